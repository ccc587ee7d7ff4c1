"""Checksums: CRC-8 (poly 0x07), CRC-16/CCITT (poly 0x1021) and XOR fold."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor


def crc8(data: Iterable[int], initial_value: int = 0x00) -> int:
    """Compute a CRC-8 with polynomial 0x07, MSB first."""
    crc = initial_value & 0xFF
    for byte in data:
        crc ^= byte & 0xFF
        for _ in range(8):
            if crc & 0x80:
                crc = ((crc << 1) ^ 0x07) & 0xFF
            else:
                crc = (crc << 1) & 0xFF
    return crc


def crc16_ccitt(data: Iterable[int], initial_value: int = 0xFFFF) -> int:
    """Compute a CRC-16/CCITT with polynomial 0x1021, MSB first."""
    crc = initial_value & 0xFFFF
    for byte in data:
        crc ^= (byte & 0xFF) << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ 0x1021) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


def xor_checksum(data: Iterable[int]) -> int:
    """XOR all bytes together."""
    return reduce(xor, (byte & 0xFF for byte in data), 0)
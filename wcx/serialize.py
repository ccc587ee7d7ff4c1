"""Byte-order-safe integer packing, standalone and cursor-based."""

from __future__ import annotations

from typing import Literal

ByteOrder = Literal["big", "little"]


class PackerOverflowError(OverflowError):
    """Raised when a packer has no room left for a value."""


class UnpackError(ValueError):
    """Raised when there are not enough bytes left to decode a value."""


def _pack(value: int, size: int, order: ByteOrder, signed: bool) -> bytes:
    try:
        return value.to_bytes(size, order, signed=signed)
    except OverflowError as exc:
        kind = "signed" if signed else "unsigned"
        raise ValueError(f"{value} does not fit a {size * 8}-bit {kind} integer") from exc


def _unpack(buf: bytes, size: int, order: ByteOrder, signed: bool) -> int:
    if len(buf) < size:
        raise UnpackError(f"need {size} bytes, got {len(buf)}")
    return int.from_bytes(bytes(buf[:size]), order, signed=signed)


def pack_u8(value: int) -> bytes:
    return _pack(value, 1, "big", False)


def pack_u16_be(value: int) -> bytes:
    return _pack(value, 2, "big", False)


def pack_u32_be(value: int) -> bytes:
    return _pack(value, 4, "big", False)


def pack_i16_be(value: int) -> bytes:
    return _pack(value, 2, "big", True)


def pack_i32_be(value: int) -> bytes:
    return _pack(value, 4, "big", True)


def pack_u16_le(value: int) -> bytes:
    return _pack(value, 2, "little", False)


def pack_u32_le(value: int) -> bytes:
    return _pack(value, 4, "little", False)


def pack_i16_le(value: int) -> bytes:
    return _pack(value, 2, "little", True)


def pack_i32_le(value: int) -> bytes:
    return _pack(value, 4, "little", True)


def unpack_u8(buf: bytes) -> int:
    return _unpack(buf, 1, "big", False)


def unpack_u16_be(buf: bytes) -> int:
    return _unpack(buf, 2, "big", False)


def unpack_u32_be(buf: bytes) -> int:
    return _unpack(buf, 4, "big", False)


def unpack_i16_be(buf: bytes) -> int:
    return _unpack(buf, 2, "big", True)


def unpack_i32_be(buf: bytes) -> int:
    return _unpack(buf, 4, "big", True)


def unpack_u16_le(buf: bytes) -> int:
    return _unpack(buf, 2, "little", False)


def unpack_u32_le(buf: bytes) -> int:
    return _unpack(buf, 4, "little", False)


def unpack_i16_le(buf: bytes) -> int:
    return _unpack(buf, 2, "little", True)


def unpack_i32_le(buf: bytes) -> int:
    return _unpack(buf, 4, "little", True)


class Packer:
    """Appends big-endian values; once a write overflows, later writes fail too."""

    def __init__(self, capacity: int | None = None) -> None:
        self.capacity = capacity
        self._buffer = bytearray()
        self.overflow = False

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def ok(self) -> bool:
        return not self.overflow

    def _write(self, data: bytes) -> None:
        if self.overflow:
            raise PackerOverflowError("packer has already overflowed")
        if self.capacity is not None and len(self._buffer) + len(data) > self.capacity:
            self.overflow = True
            raise PackerOverflowError("packer capacity exceeded")
        self._buffer += data

    def u8(self, value: int) -> None:
        self._write(pack_u8(value))

    def u16_be(self, value: int) -> None:
        self._write(pack_u16_be(value))

    def u32_be(self, value: int) -> None:
        self._write(pack_u32_be(value))

    def i16_be(self, value: int) -> None:
        self._write(pack_i16_be(value))

    def i32_be(self, value: int) -> None:
        self._write(pack_i32_be(value))

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class Unpacker:
    """Reads big-endian values from the front; once a read overruns, later reads fail too."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0
        self.overflow = False

    @property
    def ok(self) -> bool:
        return not self.overflow

    def _take(self, size: int) -> bytes:
        if self.overflow:
            raise UnpackError("unpacker has already overrun its data")
        if self._pos + size > len(self._data):
            self.overflow = True
            raise UnpackError(f"need {size} bytes, {self.remaining()} remaining")
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def u8(self) -> int:
        return unpack_u8(self._take(1))

    def u16_be(self) -> int:
        return unpack_u16_be(self._take(2))

    def u32_be(self) -> int:
        return unpack_u32_be(self._take(4))

    def i16_be(self) -> int:
        return unpack_i16_be(self._take(2))

    def i32_be(self) -> int:
        return unpack_i32_be(self._take(4))

    def remaining(self) -> int:
        return max(len(self._data) - self._pos, 0)
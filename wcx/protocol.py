"""Byte-stuffed framing: delimiter-wrapped frames with an escape byte."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

ESCAPE_XOR = 0x20


class DecoderResult(IntEnum):
    """Outcome of feeding one byte to a :class:`FrameDecoder`."""

    IDLE = 0
    IN_PROGRESS = 1
    COMPLETE = 2
    OVERFLOW = 3
    ERROR = 4


class FrameTooLargeError(ValueError):
    """Raised when an encoded frame does not fit the allowed output size."""


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} out of range: {value}")


def frame_encoded_capacity(payload_length: int) -> int:
    """Worst-case encoded size: every byte escaped plus two delimiters."""
    if payload_length < 0:
        raise ValueError("payload length must not be negative")
    return (payload_length * 2) + 2


def frame_encode(
    payload: Iterable[int],
    delimiter: int,
    escape: int,
    output_capacity: int | None = None,
) -> bytes:
    """Wrap ``payload`` in delimiters, escaping delimiter and escape bytes.

    Raise :class:`FrameTooLargeError` when the frame would exceed
    ``output_capacity`` bytes.
    """
    _check_byte("delimiter", delimiter)
    _check_byte("escape", escape)
    if output_capacity is not None and output_capacity < 2:
        raise FrameTooLargeError("output capacity must hold at least two delimiters")

    output = bytearray([delimiter])
    for byte in payload:
        _check_byte("payload byte", byte)
        if byte in (delimiter, escape):
            output += bytes((escape, byte ^ ESCAPE_XOR))
        else:
            output.append(byte)
    output.append(delimiter)

    if output_capacity is not None and len(output) > output_capacity:
        raise FrameTooLargeError(
            f"encoded frame needs {len(output)} bytes, capacity is {output_capacity}"
        )
    return bytes(output)


class FrameDecoder:
    """Incremental decoder that rebuilds payloads from a delimited byte stream."""

    def __init__(self, capacity: int, delimiter: int, escape: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        _check_byte("delimiter", delimiter)
        _check_byte("escape", escape)
        self.capacity = capacity
        self.delimiter = delimiter
        self.escape = escape
        self._buffer = bytearray()
        self.receiving = False
        self._escape_next = False
        self.overflowed = False

    def __len__(self) -> int:
        return len(self._buffer)

    def reset(self) -> None:
        """Drop any partial frame and wait for the next opening delimiter."""
        self._buffer.clear()
        self.receiving = False
        self._escape_next = False
        self.overflowed = False

    def push(self, byte: int) -> DecoderResult:
        """Feed one byte and report the decoder's state."""
        _check_byte("byte", byte)

        if not self.receiving:
            if byte == self.delimiter:
                self.receiving = True
                self._buffer.clear()
                self._escape_next = False
                self.overflowed = False
                return DecoderResult.IN_PROGRESS
            return DecoderResult.IDLE

        if self.overflowed:
            if byte == self.delimiter:
                self._buffer.clear()
                self._escape_next = False
                self.overflowed = False
                return DecoderResult.OVERFLOW
            return DecoderResult.IN_PROGRESS

        if self._escape_next:
            self._escape_next = False
            byte ^= ESCAPE_XOR
        elif byte == self.escape:
            self._escape_next = True
            return DecoderResult.IN_PROGRESS
        elif byte == self.delimiter:
            self.receiving = False
            self._escape_next = False
            return DecoderResult.COMPLETE

        if len(self._buffer) >= self.capacity:
            self._buffer.clear()
            self._escape_next = False
            self.overflowed = True
            return DecoderResult.IN_PROGRESS

        self._buffer.append(byte)
        return DecoderResult.IN_PROGRESS

    def data(self) -> bytes:
        """The payload decoded so far (the whole payload after COMPLETE)."""
        return bytes(self._buffer)
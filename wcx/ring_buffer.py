"""Fixed-capacity FIFO byte queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class BufferFullError(OverflowError):
    """Raised when pushing into a ring buffer that has no free slot."""


class RingBuffer:
    """First-in first-out queue of bytes with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, value: int) -> None:
        """Append one byte; raise :class:`BufferFullError` when full."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        if self.is_full():
            raise BufferFullError("ring buffer is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the oldest byte; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty ring buffer")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the oldest byte without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek into empty ring buffer")
        return self._items[0]

    def write(self, data: Iterable[int]) -> int:
        """Push bytes until the buffer fills; return how many were stored."""
        written = 0
        for value in data:
            if self.is_full():
                break
            self.push(value)
            written += 1
        return written

    def read(self, length: int) -> bytes:
        """Pop up to ``length`` bytes, oldest first."""
        count = min(max(length, 0), len(self._items))
        return bytes(self._items.popleft() for _ in range(count))
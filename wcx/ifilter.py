"""Integer-only moving-average and shift-based exponential moving-average filters."""

from __future__ import annotations

from collections import deque


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


class IntMovingAverage:
    """Integer average of the most recent ``capacity`` samples, truncated toward zero."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._window: deque[int] = deque(maxlen=capacity)
        self._sum = 0

    def reset(self) -> None:
        self._window.clear()
        self._sum = 0

    def update(self, sample: int) -> int:
        if len(self._window) == self.capacity:
            self._sum -= self._window[0]
        self._window.append(sample)
        self._sum += sample
        return self.value()

    def value(self) -> int:
        if not self._window:
            return 0
        return _trunc_div(self._sum, len(self._window))

    def count(self) -> int:
        return len(self._window)


class IntEma:
    """Integer EMA: ``value += (sample - value) >> shift``; a shift of 0 becomes 1."""

    def __init__(self, shift: int) -> None:
        self.shift = shift if shift > 0 else 1
        self._value = 0
        self.primed = False

    def reset(self) -> None:
        self._value = 0
        self.primed = False

    def update(self, sample: int) -> int:
        if not self.primed:
            self._value = sample
            self.primed = True
        else:
            self._value += (sample - self._value) >> self.shift
        return self._value

    def value(self) -> int:
        return self._value
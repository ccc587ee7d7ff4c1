"""Floating-point moving-average and exponential moving-average filters."""

from __future__ import annotations

from collections import deque

from wcx.common import clamp


class MovingAverage:
    """Average of the most recent ``capacity`` samples."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._window: deque[float] = deque(maxlen=capacity)
        self._sum = 0.0

    def reset(self, seed_value: float) -> None:
        """Fill the whole window with ``seed_value``."""
        self._window = deque([seed_value] * self.capacity, maxlen=self.capacity)
        self._sum = seed_value * self.capacity

    def update(self, sample: float) -> float:
        if len(self._window) == self.capacity:
            self._sum -= self._window[0]
        self._window.append(sample)
        self._sum += sample
        return self.value()

    def value(self) -> float:
        if not self._window:
            return 0.0
        return self._sum / len(self._window)


class EmaFilter:
    """Exponential moving average with smoothing factor ``alpha`` in [0, 1]."""

    def __init__(
        self, alpha: float, initial_value: float = 0.0, initialized: bool = False
    ) -> None:
        self.alpha = clamp(alpha, 0.0, 1.0)
        self.state = initial_value
        self.initialized = initialized

    def update(self, sample: float) -> float:
        if not self.initialized:
            self.state = sample
            self.initialized = True
            return self.state
        self.state += self.alpha * (sample - self.state)
        return self.state

    def value(self) -> float:
        return self.state
"""Slew-rate limiters bounding the change of a value per update step."""

from __future__ import annotations


class RateLimiter:
    """Float slew limiter; the first target is taken immediately."""

    def __init__(self, max_rise: float, max_fall: float) -> None:
        self.max_rise = max_rise
        self.max_fall = max_fall
        self.value = 0.0
        self.primed = False

    def reset(self) -> None:
        self.value = 0.0
        self.primed = False

    def update(self, target: float) -> float:
        if not self.primed:
            self.value = target
            self.primed = True
            return self.value
        delta = target - self.value
        if delta > self.max_rise:
            delta = self.max_rise
        elif delta < -self.max_fall:
            delta = -self.max_fall
        self.value += delta
        return self.value


class IntRateLimiter:
    """Integer slew limiter; the first target is taken immediately."""

    def __init__(self, max_rise: int, max_fall: int) -> None:
        self.max_rise = max_rise
        self.max_fall = max_fall
        self.value = 0
        self.primed = False

    def reset(self) -> None:
        self.value = 0
        self.primed = False

    def update(self, target: int) -> int:
        if not self.primed:
            self.value = target
            self.primed = True
            return self.value
        delta = target - self.value
        if delta > self.max_rise:
            delta = self.max_rise
        elif delta < -self.max_fall:
            delta = -self.max_fall
        self.value += delta
        return self.value
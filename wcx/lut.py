"""Lookup tables with linear interpolation and flat extrapolation."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


class LookupTable:
    """Float ``(x, y)`` points sorted by x, interpolated linearly."""

    def __init__(self, points: Iterable[tuple[float, float]]) -> None:
        self.points = tuple((float(x), float(y)) for x, y in points)
        if not self.points:
            raise ValueError("lookup table needs at least one point")
        self._xs = [x for x, _ in self.points]

    def lookup(self, x: float) -> float:
        first_x, first_y = self.points[0]
        last_x, last_y = self.points[-1]
        if x <= first_x:
            return first_y
        if x >= last_x:
            return last_y
        lo = bisect_right(self._xs, x) - 1
        x0, y0 = self.points[lo]
        x1, y1 = self.points[lo + 1]
        dx = x1 - x0
        if dx == 0.0:
            return y0
        return y0 + (y1 - y0) * ((x - x0) / dx)


class IntLookupTable:
    """Integer ``(x, y)`` points sorted by x, interpolated with rounding to nearest."""

    def __init__(self, points: Iterable[tuple[int, int]]) -> None:
        self.points = tuple((int(x), int(y)) for x, y in points)
        if not self.points:
            raise ValueError("lookup table needs at least one point")
        self._xs = [x for x, _ in self.points]

    def lookup(self, x: int) -> int:
        first_x, first_y = self.points[0]
        last_x, last_y = self.points[-1]
        if x <= first_x:
            return first_y
        if x >= last_x:
            return last_y
        lo = bisect_right(self._xs, x) - 1
        x0, y0 = self.points[lo]
        x1, y1 = self.points[lo + 1]
        dx = x1 - x0
        if dx == 0:
            return y0
        num = (y1 - y0) * (x - x0)
        half = abs(_trunc_div(dx, 2))
        return y0 + _trunc_div(num + (half if num >= 0 else -half), dx)
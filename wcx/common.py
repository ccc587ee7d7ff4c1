"""Shared helpers: wrap-safe millisecond comparison, range mapping, deadband, clamping."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T", int, float)

_U32_MASK = 0xFFFFFFFF
_I32_SIGN = 0x80000000


def time_reached(now_ms: int, deadline_ms: int) -> bool:
    """Return True once ``now_ms`` is at or past ``deadline_ms`` on a wrapping 32-bit clock."""
    return ((now_ms - deadline_ms) & _U32_MASK) < _I32_SIGN


def mapf(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map ``value`` from one range to another; a zero-width input range yields ``out_min``."""
    if in_max == in_min:
        return out_min
    return ((value - in_min) * (out_max - out_min) / (in_max - in_min)) + out_min


def apply_deadband(value: float, threshold: float) -> float:
    """Return 0.0 for values strictly inside ``(-|threshold|, |threshold|)``, else the value."""
    threshold = abs(threshold)
    if -threshold < value < threshold:
        return 0.0
    return value


def clamp(value: T, low: T, high: T) -> T:
    """Bound ``value`` to the closed range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value
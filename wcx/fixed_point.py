"""Signed Q16.16 fixed-point arithmetic with saturation to the int32 range."""

from __future__ import annotations

import math

ONE = 0x00010000
Q16_16_MAX = 0x7FFFFFFF
Q16_16_MIN = -0x80000000


def _saturate(value: int) -> int:
    if value > Q16_16_MAX:
        return Q16_16_MAX
    if value < Q16_16_MIN:
        return Q16_16_MIN
    return value


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def from_int(value: int) -> int:
    return _saturate(value << 16)


def from_float(value: float) -> int:
    """Convert to Q16.16, rounding half away from zero."""
    scaled = value * 65536.0
    if math.isinf(scaled):
        return Q16_16_MAX if scaled > 0 else Q16_16_MIN
    rounded = math.floor(abs(scaled) + 0.5)
    return _saturate(-rounded if scaled < 0 else rounded)


def to_int(value: int) -> int:
    """Integer part, truncated toward zero."""
    return _trunc_div(value, ONE)


def to_float(value: int) -> float:
    return value / 65536.0


def mul(left: int, right: int) -> int:
    return _saturate((left * right) >> 16)


def div(numerator: int, denominator: int) -> int:
    """Divide; division by zero saturates toward the numerator's sign."""
    if denominator == 0:
        if numerator > 0:
            return Q16_16_MAX
        if numerator < 0:
            return Q16_16_MIN
        return 0
    return _saturate(_trunc_div(numerator << 16, denominator))


def clamp(value: int, minimum: int, maximum: int) -> int:
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value
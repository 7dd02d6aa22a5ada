"""Rounding and range helpers shared by the transform stages."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Python's round() uses banker's rounding (round(24.5) == 24); forecast
    values round halves up instead.
    """
    return math.floor(value + 0.5)


def round_tenth(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def normalize_degrees(value: float) -> float:
    """Map any angle into [0, 360)."""
    return value % 360


def lerp(start: float, end: float, factor: float) -> float:
    return start + (end - start) * factor


def interpolate_direction(start: float, end: float, factor: float) -> float:
    """Shortest-arc interpolation between two compass directions.

    350 -> 10 at 0.5 gives 0, not 180.
    """
    a = normalize_degrees(start)
    b = normalize_degrees(end)
    diff = b - a
    if diff > 180:
        diff -= 360
    elif diff < -180:
        diff += 360
    return normalize_degrees(a + diff * factor)

# src/astrolabe/util/rounding.py
from __future__ import annotations

import math

from astrolabe.config.constants import DEGREE_FACTOR


def round_half_away(value: float) -> float:
    """
    Round to the nearest whole number, ties away from zero.

    The built-in round() uses banker's rounding (2.5 -> 2), which would move
    encoded values by one step on exact halves.
    """
    fraction, whole = math.modf(value)
    if abs(fraction) >= 0.5:
        whole += math.copysign(1.0, value)
    return whole


def round_to_five_decimals(value: float) -> float:
    """Round a degree value to 5 decimal places (~1.1 m at the equator)."""
    return round_half_away(value * DEGREE_FACTOR) / DEGREE_FACTOR


def clamp(value: float, lower: float, upper: float) -> float:
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value

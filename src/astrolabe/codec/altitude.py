# src/astrolabe/codec/altitude.py
from __future__ import annotations

import logging
import math

from astrolabe.codec.bands import as_u32
from astrolabe.config.constants import ALT_BASE, ALT_MAX_M
from astrolabe.util.rounding import clamp, round_half_away

logger = logging.getLogger(__name__)


def _as_i32(value: int) -> int:
    """Reinterpret an unsigned 32-bit value as two's-complement signed."""
    return value - (1 << 32) if value & 0x80000000 else value


def encode_altitude(meters: float) -> int:
    """
    Encode altitude in meters to a community value.

    Altitude is carried at whole-meter granularity: the input is rounded
    (ties away from zero) and clamped to +/-8,388,607 m around sea level
    at 690,000,000.
    """
    if math.isnan(meters):
        logger.debug("NaN altitude encoded as sea level")
        return ALT_BASE

    whole = round_half_away(meters)
    clamped = clamp(whole, -ALT_MAX_M, ALT_MAX_M)
    if clamped != whole:
        logger.debug("altitude %r clamped to %r", meters, clamped)

    return ALT_BASE + int(clamped)


def decode_altitude(value: int) -> float:
    """Decode an altitude community value to meters."""
    # No i32 wraparound: values >= 2**31 clamp to -ALT_MAX_M, not +ALT_MAX_M
    meters = _as_i32(as_u32(value)) - ALT_BASE
    return float(clamp(meters, -ALT_MAX_M, ALT_MAX_M))

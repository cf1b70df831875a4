# src/astrolabe/codec/degrees.py
from __future__ import annotations

import logging
import math

from astrolabe.codec.bands import as_u32
from astrolabe.config.constants import (
    LAT_BASE,
    LAT_MAX_DEG,
    LAT_MIN_DEG,
    LAT_SCALE,
    LAT_SPAN_DEG,
    LON_BASE,
    LON_MAX_DEG,
    LON_MIN_DEG,
    LON_SCALE,
    LON_SPAN_DEG,
)
from astrolabe.util.rounding import clamp, round_half_away, round_to_five_decimals

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared linear mapping
# ---------------------------------------------------------------------------

def _encode_degrees(
    degrees: float,
    *,
    lower: float,
    upper: float,
    span: float,
    scale: float,
    base: int,
    axis: str,
) -> int:
    if math.isnan(degrees):
        # NaN carries no position; it maps to the bottom of the band
        logger.debug("NaN %s encoded as band minimum %d", axis, base)
        return base

    clamped = clamp(degrees, lower, upper)
    if clamped != degrees:
        logger.debug("%s %r clamped to %r", axis, degrees, clamped)

    # Normalize
    value = round_to_five_decimals(clamped)

    # Map [lower, upper] onto [0, scale]
    steps = int(round_half_away((value - lower) * scale / span))
    return base + steps


def _decode_degrees(
    value: int,
    *,
    lower: float,
    span: float,
    scale: float,
    base: int,
    axis: str,
) -> float:
    value = as_u32(value)

    # Saturating subtraction: anything below the band decodes to `lower`
    steps = value - base
    if steps < 0:
        logger.debug("value %d is below the %s band; decoding as %r", value, axis, lower)
        steps = 0
    elif steps > scale:
        logger.debug("value %d is above the %s band", value, axis)

    return round_to_five_decimals(steps * span / scale + lower)


# ---------------------------------------------------------------------------
# Latitude
# ---------------------------------------------------------------------------

def encode_latitude(degrees: float) -> int:
    """Encode latitude in decimal degrees to a community value."""
    return _encode_degrees(
        degrees,
        lower=LAT_MIN_DEG,
        upper=LAT_MAX_DEG,
        span=LAT_SPAN_DEG,
        scale=LAT_SCALE,
        base=LAT_BASE,
        axis="latitude",
    )


def decode_latitude(value: int) -> float:
    """Decode a latitude community value to decimal degrees."""
    return _decode_degrees(
        value,
        lower=LAT_MIN_DEG,
        span=LAT_SPAN_DEG,
        scale=LAT_SCALE,
        base=LAT_BASE,
        axis="latitude",
    )


# ---------------------------------------------------------------------------
# Longitude
# ---------------------------------------------------------------------------

def encode_longitude(degrees: float) -> int:
    """Encode longitude in decimal degrees to a community value."""
    return _encode_degrees(
        degrees,
        lower=LON_MIN_DEG,
        upper=LON_MAX_DEG,
        span=LON_SPAN_DEG,
        scale=LON_SCALE,
        base=LON_BASE,
        axis="longitude",
    )


def decode_longitude(value: int) -> float:
    """Decode a longitude community value to decimal degrees."""
    return _decode_degrees(
        value,
        lower=LON_MIN_DEG,
        span=LON_SPAN_DEG,
        scale=LON_SCALE,
        base=LON_BASE,
        axis="longitude",
    )

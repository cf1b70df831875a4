# src/astrolabe/codec/bands.py
from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from astrolabe.config.constants import (
    ALT_BASE,
    ALT_MAX_M,
    LAT_BASE,
    LAT_SCALE,
    LON_BASE,
    LON_SCALE,
    U32_MAX,
)


class CommunityKind(str, Enum):
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    ALTITUDE = "altitude"


@dataclass(frozen=True)
class Band:
    """
    Inclusive range of community values reserved for one axis.
    """
    minimum: int
    maximum: int
    kind: CommunityKind

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    @property
    def width(self) -> int:
        """Number of distinct community values in the band."""
        return self.maximum - self.minimum + 1

    def overlaps(self, other: Band) -> bool:
        return self.minimum <= other.maximum and other.minimum <= self.maximum


# ---------------------------------------------------------------------------
# Band table (checked in order)
# ---------------------------------------------------------------------------

BANDS: Tuple[Band, ...] = (
    Band(LAT_BASE, LAT_BASE + int(LAT_SCALE), CommunityKind.LATITUDE),
    Band(LON_BASE, LON_BASE + int(LON_SCALE), CommunityKind.LONGITUDE),
    Band(ALT_BASE - ALT_MAX_M, ALT_BASE + ALT_MAX_M, CommunityKind.ALTITUDE),
)


def as_u32(value: int) -> int:
    """
    Validate that `value` is an unsigned 32-bit community value and return it
    as a plain int. Any integer type is accepted (numpy.uint32 included);
    bools and floats are not.
    """
    if isinstance(value, bool):
        raise TypeError("community value must be an int, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"community value must be an int, got {type(value).__name__}") from None
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"community value {value} is outside 0..{U32_MAX}")
    return value


def classify_community(value: int) -> Optional[CommunityKind]:
    """
    Return the axis whose band contains `value`, or None when the value
    falls outside every band.
    """
    value = as_u32(value)
    for band in BANDS:
        if band.contains(value):
            return band.kind
    return None


def band_for(kind: CommunityKind) -> Band:
    for band in BANDS:
        if band.kind is kind:
            return band
    raise KeyError(kind)


def bands_are_disjoint(bands: Iterable[Band] = BANDS) -> bool:
    bands = list(bands)
    for i, a in enumerate(bands):
        for b in bands[i + 1:]:
            if a.overlaps(b):
                return False
    return True


def community_space_usage(bands: Iterable[Band] = BANDS) -> float:
    """Fraction of the 32-bit value space reserved by `bands`."""
    return sum(b.width for b in bands) / (U32_MAX + 1)

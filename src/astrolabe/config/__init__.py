"""
Wire constants for astrolabe community encoding.
"""

from .constants import (
    ALT_BASE,
    ALT_MAX_M,
    ASN_MAX,
    LAT_BASE,
    LAT_SCALE,
    LON_BASE,
    LON_SCALE,
    U32_MAX,
    UNKNOWN_COMMUNITY,
)

__all__ = [
    "ALT_BASE",
    "ALT_MAX_M",
    "ASN_MAX",
    "LAT_BASE",
    "LAT_SCALE",
    "LON_BASE",
    "LON_SCALE",
    "U32_MAX",
    "UNKNOWN_COMMUNITY",
]

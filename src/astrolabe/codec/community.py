# src/astrolabe/codec/community.py
from __future__ import annotations

import re
from typing import Callable, Dict, Tuple

from astrolabe.codec.altitude import decode_altitude
from astrolabe.codec.bands import CommunityKind, as_u32, classify_community
from astrolabe.codec.degrees import decode_latitude, decode_longitude
from astrolabe.config.constants import ASN_MAX, U32_MAX, UNKNOWN_COMMUNITY

_COMMUNITY_RE = re.compile(r"^([0-9]+):([0-9]+)$")


# ---------------------------------------------------------------------------
# Per-kind rendering
# ---------------------------------------------------------------------------

_RENDERERS: Dict[CommunityKind, Callable[[int], str]] = {
    CommunityKind.LATITUDE: lambda v: f"Latitude: {decode_latitude(v):.5f}",
    CommunityKind.LONGITUDE: lambda v: f"Longitude: {decode_longitude(v):.5f}",
    CommunityKind.ALTITUDE: lambda v: f"Altitude: {decode_altitude(v):.0f} meters",
}


def decode_community(value: int) -> str:
    """
    Detect which axis a community value belongs to and decode it.

    Returns one of:
      - "Latitude: 37.77490"
      - "Longitude: -122.41940"
      - "Altitude: 15 meters"
      - "Unknown community" for values outside every band
    """
    value = as_u32(value)
    kind = classify_community(value)
    if kind is None:
        return UNKNOWN_COMMUNITY
    return _RENDERERS[kind](value)


# ---------------------------------------------------------------------------
# ASN:value notation
# ---------------------------------------------------------------------------

def format_community(asn: int, value: int) -> str:
    """Render a community in the usual `ASN:value` form."""
    if not 0 <= asn <= ASN_MAX:
        raise ValueError(f"ASN {asn} is outside 0..{ASN_MAX}")
    return f"{asn}:{as_u32(value)}"


def parse_community(text: str) -> Tuple[int, int]:
    """
    Parse `ASN:value` into (asn, value).

    Raises ValueError for malformed text or out-of-range parts.
    """
    m = _COMMUNITY_RE.match(text.strip())
    if not m:
        raise ValueError(f"Malformed community {text!r}; expected ASN:value")

    asn = int(m.group(1))
    value = int(m.group(2))

    if asn > ASN_MAX:
        raise ValueError(f"ASN {asn} is outside 0..{ASN_MAX}")
    if value > U32_MAX:
        raise ValueError(f"community value {value} is outside 0..{U32_MAX}")

    return asn, value


def decode_community_string(text: str) -> str:
    """Parse an `ASN:value` community and decode its value."""
    _, value = parse_community(text)
    return decode_community(value)

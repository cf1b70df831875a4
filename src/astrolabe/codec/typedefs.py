# src/astrolabe/codec/typedefs.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from astrolabe.codec.altitude import decode_altitude, encode_altitude
from astrolabe.codec.bands import as_u32
from astrolabe.codec.community import decode_community
from astrolabe.codec.degrees import (
    decode_latitude,
    decode_longitude,
    encode_latitude,
    encode_longitude,
)
from astrolabe.util.serialization import deserialize, serialize


# ---------------------------------------------------------------------------
# Decoded location
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Location:
    """
    A decoded position:
      - latitude, longitude: WGS84 decimal degrees, 5-decimal precision
      - altitude: meters relative to sea level, whole-meter precision
    """
    latitude: float
    longitude: float
    altitude: float = 0.0


# ---------------------------------------------------------------------------
# Community bundle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Communities:
    """
    The three community values describing one location.

    No validation ties the fields together; any three values may be
    bundled, including ones that fall outside their axis band.
    """

    lat_community: int
    lon_community: int
    alt_community: int

    def __repr__(self) -> str:
        return (
            f"Communities {{ lat_community: {self.lat_community}, "
            f"lon_community: {self.lon_community}, "
            f"alt_community: {self.alt_community} }}"
        )

    def values(self) -> Tuple[int, int, int]:
        return (self.lat_community, self.lon_community, self.alt_community)

    def decode(self) -> Location:
        return Location(
            latitude=decode_latitude(self.lat_community),
            longitude=decode_longitude(self.lon_community),
            altitude=decode_altitude(self.alt_community),
        )

    def describe(self) -> Tuple[str, str, str]:
        """decode_community() applied to each field, in lat/lon/alt order."""
        lat, lon, alt = (decode_community(v) for v in self.values())
        return lat, lon, alt

    def to_dict(self) -> Dict[str, Any]:
        return serialize(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Communities:
        communities = deserialize(data, cls)
        for v in communities.values():
            as_u32(v)
        return communities


def encode_location(lat: float, lon: float, alt: float = 0.0) -> Communities:
    """Encode a full position into its three community values."""
    return Communities(
        lat_community=encode_latitude(lat),
        lon_community=encode_longitude(lon),
        alt_community=encode_altitude(alt),
    )

"""
Geospatial encoding of latitude, longitude and altitude into 32-bit BGP
community values.
"""

from .codec.altitude import decode_altitude, encode_altitude
from .codec.bands import (
    BANDS,
    Band,
    CommunityKind,
    band_for,
    bands_are_disjoint,
    classify_community,
    community_space_usage,
)
from .codec.community import (
    decode_community,
    decode_community_string,
    format_community,
    parse_community,
)
from .codec.degrees import (
    decode_latitude,
    decode_longitude,
    encode_latitude,
    encode_longitude,
)
from .codec.typedefs import Communities, Location, encode_location
from .util.rounding import round_to_five_decimals

__all__ = [
    "BANDS",
    "Band",
    "Communities",
    "CommunityKind",
    "Location",
    "band_for",
    "bands_are_disjoint",
    "classify_community",
    "community_space_usage",
    "decode_altitude",
    "decode_community",
    "decode_community_string",
    "decode_latitude",
    "decode_longitude",
    "encode_altitude",
    "encode_latitude",
    "encode_location",
    "encode_longitude",
    "format_community",
    "parse_community",
    "round_to_five_decimals",
]

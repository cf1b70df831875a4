# src/astrolabe/config/constants.py
from __future__ import annotations

# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------

DEGREE_DECIMALS = 5
DEGREE_FACTOR = 100_000.0

# ---------------------------------------------------------------------------
# Latitude band
# ---------------------------------------------------------------------------

LAT_BASE = 600_000_000
LAT_SCALE = float((1 << 25) - 1)   # 33,554,431 steps
LAT_MIN_DEG = -90.0
LAT_MAX_DEG = 90.0
LAT_SPAN_DEG = LAT_MAX_DEG - LAT_MIN_DEG

# ---------------------------------------------------------------------------
# Longitude band
# ---------------------------------------------------------------------------

LON_BASE = 900_000_000
LON_SCALE = float((1 << 26) - 1)   # 67,108,863 steps
LON_MIN_DEG = -180.0
LON_MAX_DEG = 180.0
LON_SPAN_DEG = LON_MAX_DEG - LON_MIN_DEG

# ---------------------------------------------------------------------------
# Altitude band
# ---------------------------------------------------------------------------

ALT_BASE = 690_000_000              # sea level
ALT_MAX_M = 8_388_607

# ---------------------------------------------------------------------------
# Community value space
# ---------------------------------------------------------------------------

U32_MAX = 0xFFFFFFFF
ASN_MAX = 0xFFFF
UNKNOWN_COMMUNITY = "Unknown community"

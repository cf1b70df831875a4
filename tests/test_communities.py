"""
Tests for the Communities bundle and whole-location helpers.
"""

import json

import pytest

from astrolabe import Communities, Location, encode_location


def test_repr():
    c = Communities(lat_community=1, lon_community=2, alt_community=3)
    assert repr(c) == "Communities { lat_community: 1, lon_community: 2, alt_community: 3 }"


def test_no_cross_validation():
    c = Communities(0, 0, 0)
    assert c.values() == (0, 0, 0)


def test_frozen():
    c = Communities(1, 2, 3)
    with pytest.raises(AttributeError):
        c.lat_community = 4


class TestEncodeLocation:
    """Encoding a full position at once."""

    def test_london(self):
        c = encode_location(51.5074, -0.1278, 35.0)
        assert c.decode() == Location(latitude=51.5074, longitude=-0.1278, altitude=35.0)

    def test_default_altitude_is_sea_level(self):
        c = encode_location(40.7128, -74.0060)
        assert c.alt_community == 690000000
        assert c.decode().altitude == 0.0

    def test_describe(self):
        c = encode_location(37.7749, -122.4194, 15.0)
        assert c.describe() == (
            "Latitude: 37.77490",
            "Longitude: -122.41940",
            "Altitude: 15 meters",
        )


class TestDictExport:

    def test_to_dict(self):
        c = Communities(616777216, 933554432, 690000000)
        assert c.to_dict() == {
            "lat_community": 616777216,
            "lon_community": 933554432,
            "alt_community": 690000000,
        }

    def test_json_round_trip(self):
        c = encode_location(-33.86882, 151.20929, 58.0)
        assert Communities.from_dict(json.loads(json.dumps(c.to_dict()))) == c

    def test_from_dict_coerces_strings(self):
        c = Communities.from_dict(
            {"lat_community": "616777216", "lon_community": "933554432", "alt_community": "690000000"}
        )
        assert c == Communities(616777216, 933554432, 690000000)

    def test_from_dict_missing_field(self):
        with pytest.raises(ValueError, match="alt_community"):
            Communities.from_dict({"lat_community": 1, "lon_community": 2})

    def test_from_dict_bad_value(self):
        with pytest.raises(ValueError):
            Communities.from_dict({"lat_community": "x", "lon_community": 2, "alt_community": 3})

    def test_from_dict_out_of_range(self):
        with pytest.raises(ValueError):
            Communities.from_dict({"lat_community": 1 << 32, "lon_community": 2, "alt_community": 3})

    @pytest.mark.parametrize("bad", [616777216.9, True, "616777216.9"])
    def test_from_dict_refuses_lossy_values(self, bad):
        """Fractional floats and bools are rejected rather than truncated."""
        with pytest.raises(ValueError):
            Communities.from_dict({"lat_community": bad, "lon_community": 933554432, "alt_community": 690000000})

    def test_from_dict_accepts_whole_floats(self):
        c = Communities.from_dict({"lat_community": 616777216.0, "lon_community": 933554432, "alt_community": 690000000})
        assert c.lat_community == 616777216

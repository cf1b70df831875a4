import pytest

from astrolabe.util.rounding import clamp, round_half_away, round_to_five_decimals


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (2.5, 3.0),
        (-2.5, -3.0),
        (0.5, 1.0),
        (1.4999, 1.0),
        (-1.6, -2.0),
        (16777215.5, 16777216.0),
    ],
)
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_round_to_five_decimals():
    assert round_to_five_decimals(37.774912345) == 37.77491
    assert round_to_five_decimals(-122.419404) == -122.4194
    assert round_to_five_decimals(1.0) == 1.0


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-5, 0, 3) == 0
    assert clamp(1.5, 0, 3) == 1.5

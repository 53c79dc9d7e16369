"""Tests for the polyline codec."""

import pytest

from navroute.core.models import Coordinate
from navroute.core.polyline import decode, encode, MalformedInputError

GOOGLE_EXAMPLE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
GOOGLE_POINTS = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]


def test_decode_google_example():
    assert decode(GOOGLE_EXAMPLE) == GOOGLE_POINTS


def test_decode_returns_coordinates():
    points = decode(GOOGLE_EXAMPLE)
    assert all(isinstance(p, Coordinate) for p in points)
    assert points[0].latitude == 38.5
    assert points[0].longitude == -120.2
    assert points[-1].as_dict() == {"latitude": 43.252, "longitude": -126.453}


def test_encode_google_example():
    assert encode(GOOGLE_POINTS) == GOOGLE_EXAMPLE


def test_decode_empty_string():
    assert decode("") == []


def test_encode_empty_route():
    assert encode([]) == ""


def test_single_origin_point():
    assert encode([(0, 0)]) == "??"
    points = decode("??")
    assert points == [(0.0, 0.0)]
    assert len(points) == 1


def test_decode_is_deterministic():
    assert decode(GOOGLE_EXAMPLE) == decode(GOOGLE_EXAMPLE)


def test_deltas_accumulate_from_previous_point():
    # Same point twice: second delta is zero
    encoded = encode([(1.0, 2.0), (1.0, 2.0)])
    assert encoded.endswith("??")
    assert decode(encoded) == [(1.0, 2.0), (1.0, 2.0)]


@pytest.mark.parametrize("points", [
    [(0.00001, -0.00001)],
    [(-33.86882, 151.20929), (-33.85678, 151.21528), (-33.87, 151.2)],
    [(89.99999, 179.99999), (-89.99999, -179.99999)],
    [(52.52, 13.405), (48.85661, 2.35222), (51.50735, -0.12776), (40.41678, -3.70379)],
])
def test_decode_inverts_encode(points):
    assert decode(encode(points)) == points


@pytest.mark.parametrize("encoded", [
    GOOGLE_EXAMPLE,
    "??",
    "u{~vFvyys@fS]",
    "_ibE_seK_seK_seK",
])
def test_encode_inverts_decode(encoded):
    assert encode(decode(encoded)) == encoded


def test_encode_accepts_coordinates():
    points = [Coordinate(38.5, -120.2), Coordinate(40.7, -120.95)]
    assert decode(encode(points)) == points


def test_precision_six():
    points = [(38.500001, -120.200001), (40.7, -120.95)]
    encoded = encode(points, precision=6)
    assert decode(encoded, precision=6) == points
    assert encoded != encode(points)


def test_truncated_continuation_raises():
    # '_' has the continuation bit set and nothing follows
    with pytest.raises(MalformedInputError) as exc_info:
        decode("_")
    assert exc_info.value.position == 1


def test_missing_longitude_raises():
    with pytest.raises(MalformedInputError) as exc_info:
        decode("_p~iF")
    assert exc_info.value.position == 5


def test_truncated_google_example_raises():
    with pytest.raises(MalformedInputError):
        decode(GOOGLE_EXAMPLE[:-1])


@pytest.mark.parametrize("encoded", [" ?", "??\x7f?", "?é"])
def test_invalid_character_raises(encoded):
    with pytest.raises(MalformedInputError):
        decode(encoded)


def test_malformed_input_is_value_error():
    with pytest.raises(ValueError):
        decode("_")


def test_encode_rejects_non_finite():
    with pytest.raises(ValueError):
        encode([(float("nan"), 0.0)])


def test_over_long_value_raises():
    # Eight groups cannot be a 32-bit value
    with pytest.raises(MalformedInputError) as exc_info:
        decode("~" * 210 + "@" + "?")
    assert exc_info.value.position == 7


def test_ten_group_value_raises():
    with pytest.raises(MalformedInputError):
        decode("~" * 10 + "@" + "?")


def test_value_above_32_bits_raises():
    # Seven groups whose top group pushes the value past 0xffffffff
    with pytest.raises(MalformedInputError, match="32 bits"):
        decode("~~~~~~C?")


def test_largest_32_bit_value_decodes():
    points = decode("~~~~~~B?")
    assert points == [(-2 ** 31 / 1e5, 0.0)]


def test_polyline6_extremes_decode():
    points = [(-90.0, 180.0), (90.0, -180.0)]
    assert decode(encode(points, precision=6), precision=6) == points


@pytest.mark.parametrize("encoded", ["_??", "??_?", "?_?"])
def test_non_canonical_trailing_group_raises(encoded):
    with pytest.raises(MalformedInputError, match="Non-canonical"):
        decode(encoded)

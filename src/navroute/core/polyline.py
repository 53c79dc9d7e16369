"""Encoded polyline codec.

Implements Google's Encoded Polyline Algorithm Format.
ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm
"""

import math
from typing import Iterable, List, Tuple

from .models import Coordinate

DEFAULT_PRECISION = 5

# Every character carries 5 bits of payload offset by 63 ('?').
_CHAR_OFFSET = 63
_CONTINUATION_BIT = 0x20
_PAYLOAD_MASK = 0x1f

# Scaled coordinates are 32-bit integers: at most 7 groups of 5 bits
_MAX_SHIFT = 30
_MAX_RAW_VALUE = 0xffffffff


class MalformedInputError(ValueError):
    """Raised when an encoded polyline cannot be decoded."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at index {position})")
        self.position = position


def decode(encoded: str, precision: int = DEFAULT_PRECISION) -> List[Coordinate]:
    """
    Decode a polyline string into a list of coordinates.

    Args:
        encoded: Encoded polyline, e.g. ``overview_polyline.points`` from a
            Directions API response
        precision: Number of decimal places encoded (5 for Google, 6 for polyline6)

    Returns:
        List of Coordinate(latitude, longitude), start of the route first

    Raises:
        MalformedInputError: If the string is truncated or holds invalid characters
    """
    factor = 10 ** precision
    coordinates = []
    index, lat, lng = 0, 0, 0
    length = len(encoded)

    while index < length:
        d_lat, index = _decode_value(encoded, index)
        if index >= length:
            raise MalformedInputError("Missing longitude after latitude", index)
        d_lng, index = _decode_value(encoded, index)

        lat += d_lat
        lng += d_lng
        coordinates.append(Coordinate(lat / factor, lng / factor))

    return coordinates


def _decode_value(encoded: str, index: int) -> Tuple[int, int]:
    """Decode one signed value starting at index; return (value, next index)."""
    result, shift = 0, 0

    while True:
        if index >= len(encoded):
            raise MalformedInputError("Polyline ends mid-value", index)
        byte = ord(encoded[index]) - _CHAR_OFFSET
        if not 0 <= byte <= 0x3f:
            raise MalformedInputError(
                f"Invalid polyline character {encoded[index]!r}", index
            )
        if shift > 0 and byte == 0:
            raise MalformedInputError("Non-canonical empty trailing group", index)
        index += 1
        result |= (byte & _PAYLOAD_MASK) << shift
        shift += 5
        if not byte & _CONTINUATION_BIT:
            break
        if shift > _MAX_SHIFT:
            raise MalformedInputError("Value longer than 7 characters", index)

    if result > _MAX_RAW_VALUE:
        raise MalformedInputError("Value exceeds 32 bits", index - 1)

    if result & 1:
        return ~(result >> 1), index
    return result >> 1, index


def encode(points: Iterable[Tuple[float, float]],
           precision: int = DEFAULT_PRECISION) -> str:
    """
    Encode a sequence of (lat, lon) pairs into a polyline string.

    Args:
        points: Coordinates or (latitude, longitude) tuples
        precision: Number of decimal places to keep

    Returns:
        Encoded polyline string ("" for an empty route)
    """
    factor = 10 ** precision
    result = []
    prev_lat = 0
    prev_lon = 0

    for lat, lon in points:
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f"Cannot encode non-finite coordinate ({lat}, {lon})")

        lat_scaled = int(round(lat * factor))
        lon_scaled = int(round(lon * factor))

        result.append(_encode_value(lat_scaled - prev_lat))
        result.append(_encode_value(lon_scaled - prev_lon))

        prev_lat = lat_scaled
        prev_lon = lon_scaled

    return "".join(result)


def _encode_value(value: int) -> str:
    """Encode a single signed delta."""
    value = value << 1
    if value < 0:
        value = ~value

    chunks = []
    while value >= _CONTINUATION_BIT:
        chunks.append(chr((_CONTINUATION_BIT | (value & _PAYLOAD_MASK)) + _CHAR_OFFSET))
        value >>= 5
    chunks.append(chr(value + _CHAR_OFFSET))

    return "".join(chunks)

"""Core utilities for navroute."""

from .polyline import decode, encode, MalformedInputError
from .models import Coordinate, Region, DirectionsResult
from .utils import (
    haversine_distance,
    load_gpx_route,
    get_bounding_box,
    calculate_route_length,
    to_geojson_coordinates,
    to_geojson_linestring,
    region_for_location,
    fit_to_coordinates,
)
from .compass import heading_from_magnetometer, compass_rotation
from .config import Config
from .directions import (
    DirectionsClient,
    DirectionsError,
    NoRouteFoundError,
    parse_directions_response,
)
from .logging_config import setup_logging

__all__ = [
    "decode",
    "encode",
    "MalformedInputError",
    "Coordinate",
    "Region",
    "DirectionsResult",
    "haversine_distance",
    "load_gpx_route",
    "get_bounding_box",
    "calculate_route_length",
    "to_geojson_coordinates",
    "to_geojson_linestring",
    "region_for_location",
    "fit_to_coordinates",
    "heading_from_magnetometer",
    "compass_rotation",
    "Config",
    "DirectionsClient",
    "DirectionsError",
    "NoRouteFoundError",
    "parse_directions_response",
    "setup_logging",
]

"""Shared geographic helpers for decoded routes."""

import gpxpy
from math import radians, sin, cos, sqrt, atan2
from pathlib import Path

from .models import Coordinate, Region

# Default zoom used when centring the map on the user
LATITUDE_DELTA = 0.0922

# Smallest span used when fitting a route that collapses to a single point
MIN_FIT_DELTA = 0.005

DEFAULT_EDGE_PADDING = {"top": 100, "right": 50, "bottom": 50, "left": 50}


def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Calculate distance between two points in meters using Haversine formula.

    Args:
        lat1, lon1: Coordinates of first point
        lat2, lon2: Coordinates of second point

    Returns:
        Distance in meters
    """
    R = 6371000  # Earth radius in meters

    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat/2)**2 + cos(lat1) * cos(lat2) * sin(dlon/2)**2
    c = 2 * atan2(sqrt(a), sqrt(1-a))

    return R * c


def load_gpx_route(gpx_file):
    """
    Load a route from a GPX file.

    Args:
        gpx_file: Path to GPX file

    Returns:
        List of Coordinate values

    Raises:
        ValueError: If no points found in GPX file
    """
    gpx_file = Path(gpx_file)

    with open(gpx_file) as f:
        gpx = gpxpy.parse(f)

    points = []

    for track in gpx.tracks:
        for segment in track.segments:
            for point in segment.points:
                points.append(Coordinate(point.latitude, point.longitude))

    # Planned routes next, then loose waypoints
    if not points:
        for route in gpx.routes:
            for point in route.points:
                points.append(Coordinate(point.latitude, point.longitude))

    if not points:
        for waypoint in gpx.waypoints:
            points.append(Coordinate(waypoint.latitude, waypoint.longitude))

    if not points:
        raise ValueError(f"No points found in GPX file: {gpx_file}")

    return points


def get_bounding_box(points, buffer_km=0):
    """
    Calculate bounding box around route with buffer.

    Args:
        points: List of (lat, lon) tuples
        buffer_km: Buffer distance in kilometers

    Returns:
        Dict with keys: south, north, west, east
    """
    if not points:
        raise ValueError("Cannot compute bounding box of an empty route")

    lats = [p[0] for p in points]
    lons = [p[1] for p in points]

    # Rough approximation: 1 degree ≈ 111 km
    buffer_deg = buffer_km / 111.0

    return {
        'south': min(lats) - buffer_deg,
        'north': max(lats) + buffer_deg,
        'west': min(lons) - buffer_deg,
        'east': max(lons) + buffer_deg
    }


def calculate_route_length(points):
    """
    Calculate total route length in kilometers.

    Args:
        points: List of (lat, lon) tuples

    Returns:
        Total length in kilometers
    """
    total = 0
    for i in range(len(points) - 1):
        total += haversine_distance(
            points[i][0], points[i][1],
            points[i+1][0], points[i+1][1]
        )
    return total / 1000  # Convert to km


def to_geojson_coordinates(points):
    """Convert (lat, lon) points to GeoJSON [lon, lat] order."""
    return [[lon, lat] for lat, lon in points]


def to_geojson_linestring(points):
    """Wrap a route as a GeoJSON LineString geometry."""
    return {
        "type": "LineString",
        "coordinates": to_geojson_coordinates(points),
    }


def region_for_location(lat, lon, aspect_ratio):
    """
    Build the map region used to centre on a single location.

    Args:
        lat, lon: Centre of the region
        aspect_ratio: Viewport width divided by height

    Returns:
        Region with the default zoom
    """
    return Region(
        latitude=lat,
        longitude=lon,
        latitude_delta=LATITUDE_DELTA,
        longitude_delta=LATITUDE_DELTA * aspect_ratio,
    )


def fit_to_coordinates(points, width, height, edge_padding=None):
    """
    Compute a region showing every point of a route.

    The edge padding (in pixels) is kept clear of route points, so the
    region grows and its centre shifts away from the wider padding.

    Args:
        points: List of (lat, lon) tuples
        width, height: Viewport size in pixels
        edge_padding: Dict with top/right/bottom/left (default: 100/50/50/50)

    Returns:
        Region containing all points
    """
    padding = dict(DEFAULT_EDGE_PADDING)
    if edge_padding:
        padding.update(edge_padding)

    usable_x = 1 - (padding["left"] + padding["right"]) / width
    usable_y = 1 - (padding["top"] + padding["bottom"]) / height
    if usable_x <= 0 or usable_y <= 0:
        raise ValueError(
            f"Edge padding {padding} leaves no room in a {width}x{height} viewport"
        )

    bbox = get_bounding_box(points)
    lat_span = max(bbox['north'] - bbox['south'], MIN_FIT_DELTA)
    lon_span = max(bbox['east'] - bbox['west'], MIN_FIT_DELTA)

    latitude_delta = lat_span / usable_y
    longitude_delta = lon_span / usable_x

    # Shift the centre so the padded area stays clear
    mid_lat = (bbox['north'] + bbox['south']) / 2
    mid_lon = (bbox['east'] + bbox['west']) / 2
    center_lat = mid_lat + (padding["top"] - padding["bottom"]) * latitude_delta / (2 * height)
    center_lon = mid_lon - (padding["left"] - padding["right"]) * longitude_delta / (2 * width)

    return Region(
        latitude=center_lat,
        longitude=center_lon,
        latitude_delta=latitude_delta,
        longitude_delta=longitude_delta,
    )

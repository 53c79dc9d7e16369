"""Encode subcommand implementation."""

import sys

from ..core import encode, load_gpx_route


def parse_points(value):
    """Parse 'lat,lng;lat,lng' into a list of float pairs."""
    points = []
    for chunk in value.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        lat, lng = (float(part) for part in chunk.split(","))
        points.append((lat, lng))
    return points


def run_encode(args):
    """Encode a GPX route or a literal point list and print the polyline."""
    try:
        if args.gpx:
            points = load_gpx_route(args.gpx)
        else:
            points = parse_points(args.points)
        print(encode(points, precision=args.precision))
        return 0
    except FileNotFoundError as e:
        print(f"❌ Error: File not found: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

"""Decode subcommand implementation."""

import json
import sys

from ..core import decode, calculate_route_length, to_geojson_linestring, MalformedInputError
from ..exporters import export_route_gpx, export_route_csv


def run_decode(args):
    """Decode a polyline and print or export the route."""
    try:
        points = decode(args.polyline, precision=args.precision)
    except MalformedInputError as e:
        print(f"❌ Error: Malformed polyline: {e}", file=sys.stderr)
        return 1

    if args.geojson:
        print(json.dumps(to_geojson_linestring(points)))
    else:
        for lat, lng in points:
            print(f"{lat},{lng}")

    if args.output_gpx or args.output_csv:
        print(f"\n✓ Decoded {len(points)} points "
              f"({calculate_route_length(points):.2f} km)", file=sys.stderr)

    try:
        if args.output_gpx:
            export_route_gpx(points, args.output_gpx)
            print(f"✓ GPX written to {args.output_gpx}", file=sys.stderr)

        if args.output_csv:
            export_route_csv(points, args.output_csv)
            print(f"✓ CSV written to {args.output_csv}", file=sys.stderr)

    except KeyboardInterrupt:
        print("\n\n⚠ Export interrupted by user", file=sys.stderr)
        return 130
    except OSError as e:
        print(f"❌ Error writing output: {e}", file=sys.stderr)
        return 1

    return 0

"""Directions subcommand implementation."""

import sys

from ..core import (
    Config,
    DirectionsClient,
    DirectionsError,
    MalformedInputError,
    calculate_route_length,
)
from ..exporters import export_route_gpx


def run_directions(args):
    """Fetch a route, print its summary and optionally export it."""
    try:
        config = Config(args.config) if args.config else Config()
        client = DirectionsClient(api_key=args.api_key, config=config)

        print("=" * 60)
        print("Directions")
        print("=" * 60)
        print(f"Origin: {args.origin[0]},{args.origin[1]}")
        print(f"Destination: {args.destination[0]},{args.destination[1]}")

        result = client.get_directions(args.origin, args.destination, mode=args.mode)

        print(f"\nDistance: {result.distance_text}")
        print(f"Duration: {result.duration_text}")
        print(f"Points: {len(result.coordinates)} "
              f"({calculate_route_length(result.coordinates):.2f} km along polyline)")
        print(f"Polyline: {result.encoded_polyline}")

        if args.output_gpx:
            name = None
            if result.start_address and result.end_address:
                name = f"{result.start_address} to {result.end_address}"
            export_route_gpx(result.coordinates, args.output_gpx, name=name)
            print(f"\n✓ GPX written to {args.output_gpx}")

        return 0

    except KeyboardInterrupt:
        print("\n\n⚠ Interrupted by user")
        return 130
    except FileNotFoundError as e:
        print(f"\n❌ Error: File not found: {e}", file=sys.stderr)
        return 1
    except (DirectionsError, MalformedInputError, ValueError) as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1

"""Command-line interface for navroute."""

import sys
import argparse

from ..core import setup_logging


def parse_lat_lng(value):
    """Parse a "lat,lng" argument into a float pair."""
    try:
        lat, lng = (float(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'lat,lng', got: {value!r}")
    return lat, lng


def build_parser():
    parser = argparse.ArgumentParser(
        prog="navroute",
        description="Decode, encode and fetch driving routes as encoded polylines"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Decode subcommand
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode an encoded polyline into coordinates"
    )
    decode_parser.add_argument(
        "polyline",
        help="Encoded polyline string"
    )
    decode_parser.add_argument(
        "--precision",
        type=int,
        default=5,
        help="Encoded decimal places: 5 (Google) or 6 (polyline6) (default: 5)"
    )
    decode_parser.add_argument(
        "--geojson",
        action="store_true",
        help="Print a GeoJSON LineString instead of lat,lng rows"
    )
    decode_parser.add_argument(
        "--output-gpx",
        help="Write the route to a GPX file"
    )
    decode_parser.add_argument(
        "--output-csv",
        help="Write the route to a CSV file"
    )

    # Encode subcommand
    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode coordinates into a polyline"
    )
    source = encode_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--gpx",
        help="Input GPX route file"
    )
    source.add_argument(
        "--points",
        help="Semicolon-separated points, e.g. '38.5,-120.2;40.7,-120.95'"
    )
    encode_parser.add_argument(
        "--precision",
        type=int,
        default=5,
        help="Decimal places to encode (default: 5)"
    )

    # Directions subcommand
    directions_parser = subparsers.add_parser(
        "directions",
        help="Fetch a route from the Google Directions API"
    )
    directions_parser.add_argument(
        "--origin",
        type=parse_lat_lng,
        required=True,
        help="Start location as 'lat,lng' (use --origin=-33.9,151.2 for a negative latitude)"
    )
    directions_parser.add_argument(
        "--destination",
        type=parse_lat_lng,
        required=True,
        help="End location as 'lat,lng'"
    )
    directions_parser.add_argument(
        "--config",
        help="Path to config.ini file (default: built-in settings)"
    )
    directions_parser.add_argument(
        "--api-key",
        help="Google Maps API key (default: GOOGLE_MAPS_API_KEY or config)"
    )
    directions_parser.add_argument(
        "--mode",
        choices=["driving", "walking", "bicycling", "transit"],
        help="Travel mode (default: driving)"
    )
    directions_parser.add_argument(
        "--output-gpx",
        help="Write the decoded route to a GPX file"
    )

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(verbose=args.verbose)

    # Route to appropriate subcommand
    if args.command == "decode":
        from .decode import run_decode
        sys.exit(run_decode(args))
    elif args.command == "encode":
        from .encode import run_encode
        sys.exit(run_encode(args))
    elif args.command == "directions":
        from .directions import run_directions
        sys.exit(run_directions(args))


if __name__ == "__main__":
    main()

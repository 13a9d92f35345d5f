"""
Command Line Interface

Calls one of the web services and prints the decoded response as JSON.

Usage:
    python -m gmaps_services distances -o "48.2116039,16.37701" -d "Staatsoper, Wien" -d "Rathaus, Wien"
    python -m gmaps_services geocode --address "Stephansdom, Wien" --language de
    python -m gmaps_services geocode --latlng 48.2084114 16.3734707
"""

import argparse
import json
import logging
import sys

from .client import GoogleMapsClient
from .config_manager import ServicesConfig
from .exceptions import GMapsServicesError
from .params import DistanceMatrixParams, GeocodingParams


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gmaps_services",
        description="Google Maps Distance Matrix and Geocoding client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m gmaps_services distances -o "Albertina, Wien" -d "48.20274,16.368843" --mode walking
  python -m gmaps_services geocode --address "Stephansdom, Wien, Österreich" --language de
  python -m gmaps_services geocode --latlng 48.2084114 16.3734707 --component country:AT
        """
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log request URLs and unknown response keys"
    )
    parser.add_argument(
        "--sensor",
        action="store_true",
        default=None,
        help="Report that the request comes from a device with a location sensor"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="HTTP timeout in seconds (default: GMAPS_TIMEOUT or 30)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    dm = subparsers.add_parser("distances", help="Travel distances between origins and destinations")
    dm.add_argument(
        "-o", "--origin",
        action="append",
        required=True,
        help="Origin address or 'lat,lng' (repeatable)"
    )
    dm.add_argument(
        "-d", "--destination",
        action="append",
        required=True,
        help="Destination address or 'lat,lng' (repeatable)"
    )
    dm.add_argument("--mode", help="driving (default), walking, bicycling or transit")
    dm.add_argument("--language", help="Language of the results")
    dm.add_argument("--avoid", help="tolls, highways or ferries")
    dm.add_argument("--units", help="metric (default) or imperial")
    dm.add_argument(
        "--departure-time",
        type=int,
        default=0,
        help="Departure time in seconds since the epoch"
    )

    geo = subparsers.add_parser("geocode", help="Geocode an address or reverse geocode a location")
    target = geo.add_mutually_exclusive_group(required=True)
    target.add_argument("--address", help="Address to geocode")
    target.add_argument(
        "--latlng",
        nargs=2,
        type=float,
        metavar=("LAT", "LNG"),
        help="Location to reverse geocode"
    )
    geo.add_argument(
        "--bounds",
        nargs=4,
        type=float,
        metavar=("SOUTH", "WEST", "NORTH", "EAST"),
        help="Viewport to bias results towards"
    )
    geo.add_argument("--language", help="Language of the results")
    geo.add_argument("--region", help="ccTLD region code")
    geo.add_argument(
        "--component",
        action="append",
        help="Component filter like country:AT (repeatable)"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        ServicesConfig(location_sensor=args.sensor, timeout=args.timeout).apply()

        with GoogleMapsClient(verbose=not args.quiet) as maps:
            if args.command == "distances":
                params = DistanceMatrixParams().origins(args.origin).destinations(args.destination) \
                    .mode(args.mode).language(args.language).avoid(args.avoid) \
                    .units(args.units).departure_time(args.departure_time)
                response = maps.distances(params)
            else:
                params = GeocodingParams().language(args.language).region(args.region)
                if args.address is not None:
                    params.address(args.address)
                else:
                    params.latlng(*args.latlng)
                if args.bounds:
                    params.bounds(*args.bounds)
                if args.component:
                    params.components(args.component)
                response = maps.geocode(params)

        print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
        return 0

    except GMapsServicesError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())

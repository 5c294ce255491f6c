"""
geocalc command line.

Thin argparse front end over the public API that prints JSON results.
"""

import argparse
import json
import logging
import sys

from pydantic import BaseModel

from geocalc import __version__, calculator
from geocalc.config import settings
from geocalc.models import Failure

logger = logging.getLogger("geocalc")


def _parse_pair(text: str) -> list[float]:
    """Parse a "LAT,LON" argument."""
    try:
        lat, lon = (float(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LAT,LON, got {text!r}")
    return [lat, lon]


def _round(value, precision: int | None):
    if precision is None:
        return value
    if isinstance(value, float):
        return round(value, precision)
    if isinstance(value, list):
        return [_round(item, precision) for item in value]
    if isinstance(value, dict):
        return {key: _round(item, precision) for key, item in value.items()}
    return value


def _render(result, precision: int | None) -> str:
    if isinstance(result, BaseModel):
        result = result.model_dump()
    return json.dumps(_round(result, precision))


def _run_command(args: argparse.Namespace):
    if args.command == "distance":
        return calculator.distance_between([args.lat1, args.lon1], [args.lat2, args.lon2])
    if args.command == "bearing":
        return calculator.bearing([args.lat1, args.lon1], [args.lat2, args.lon2])
    if args.command == "destination":
        return calculator.destination_point([args.lat, args.lon], args.bearing, args.distance)
    if args.command == "bbox":
        return calculator.bounding_box([args.lat, args.lon], args.radius).as_list()
    if args.command == "center":
        return calculator.geographic_center(args.points)
    if args.command == "crossing":
        return calculator.crossing_parallels(
            [args.lat1, args.lon1], [args.lat2, args.lon2], args.latitude
        )
    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geocalc",
        description="Great-circle calculations between latitude/longitude points",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help=f"Logging level (default: {settings.log_level}, or GEOCALC_LOG_LEVEL env var)"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Round numbers in the output to this many digits (or GEOCALC_PRECISION env var)"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("distance", "Distance in meters between two points"),
        ("bearing", "Initial bearing in radians from the first point to the second"),
    ):
        sub = commands.add_parser(name, help=help_text)
        for arg in ("lat1", "lon1", "lat2", "lon2"):
            sub.add_argument(arg, type=float)

    sub = commands.add_parser("destination", help="Point reached from a start on a bearing")
    sub.add_argument("lat", type=float)
    sub.add_argument("lon", type=float)
    sub.add_argument("bearing", type=float, help="Bearing in radians")
    sub.add_argument("distance", type=float, help="Distance in meters")

    sub = commands.add_parser("bbox", help="Bounding box around a point")
    sub.add_argument("lat", type=float)
    sub.add_argument("lon", type=float)
    sub.add_argument("radius", type=float, help="Radius in meters")

    sub = commands.add_parser("center", help="Geographic center of several points")
    sub.add_argument("points", type=_parse_pair, nargs="+", metavar="LAT,LON")

    sub = commands.add_parser("crossing", help="Longitudes where a great circle crosses a latitude")
    for arg in ("lat1", "lon1", "lat2", "lon2", "latitude"):
        sub.add_argument(arg, type=float)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a single command and return the process exit status."""
    args = build_parser().parse_args(argv)

    # Command line args override config/env vars
    log_level = args.log_level if args.log_level is not None else settings.log_level
    precision = args.precision if args.precision is not None else settings.precision

    logging.basicConfig(level=log_level.upper(), format=settings.log_format)
    logger.debug(f"Running {args.command}")

    result = _run_command(args)
    print(_render(result, precision))

    return 1 if isinstance(result, Failure) else 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()

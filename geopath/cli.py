#!/usr/bin/env python3
"""
Find the shortest path between two points along the lines of a GeoJSON file.

Usage:
    geopath network.geojson --start LON LAT --end LON LAT [--precision P] [--json]

Exit codes:
    0  path found
    1  unreadable input, invalid GeoJSON or invalid coordinates
    2  bad command-line usage
    3  no path between the points
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import RoutingConfig
from .exceptions import ConfigurationError, NoPathError, ParseError, ValidationError
from .geojson import parse_paths_file
from .logging_config import get_logger, log_exception
from .router import find_shortest_path

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_NO_PATH = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geopath",
        description="Shortest path between two points along a GeoJSON line network",
    )
    parser.add_argument("input_geojson", help="GeoJSON FeatureCollection of two-point LineStrings")
    parser.add_argument("--start", type=float, nargs=2, required=True, metavar=("LON", "LAT"),
                        help="Start point (longitude latitude)")
    parser.add_argument("--end", type=float, nargs=2, required=True, metavar=("LON", "LAT"),
                        help="End point (longitude latitude)")
    parser.add_argument("--precision", type=float, default=None,
                        help="Snapping grid in degrees, 0 for exact matching "
                             "(default: $GEOPATH_PRECISION or 0)")
    parser.add_argument("--json", action="store_true", dest="as_json",
                        help="Print the result as a JSON object")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = RoutingConfig.from_env()
        if args.precision is not None:
            config.precision = args.precision
        if args.verbose:
            config.log_level = logging.DEBUG
        if args.log_file is not None:
            config.log_file = args.log_file
        config.validate()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if args.verbose or args.log_file is not None:
        config.configure_logging()

    start = tuple(args.start)
    end = tuple(args.end)

    try:
        segments = parse_paths_file(args.input_geojson)
        logger.info(f"Parsed {len(segments)} segments from {args.input_geojson}")
        result = find_shortest_path(segments, start, end, config.precision)
    except (ParseError, ValidationError) as e:
        log_exception(logger, "Could not route", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except NoPathError as e:
        logger.warning(str(e))
        print(f"no path: {e}", file=sys.stderr)
        return EXIT_NO_PATH

    if args.as_json:
        print(json.dumps({"distance": result.distance, "path": [list(p) for p in result.path]}))
    else:
        print(f"Total distance: {result.distance:.3f} m ({len(result.path)} points)")
        for lon, lat in result.path:
            print(f"{lon:.7f},{lat:.7f}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

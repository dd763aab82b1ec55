"""
GeoJSON segment source.

Reads a FeatureCollection and returns one segment per two-point LineString.
Features with any other geometry type are skipped. Parsing is
all-or-nothing: the first malformed feature aborts with GeoJSONParseError.
"""

import json
import math
from numbers import Real
from pathlib import Path
from typing import IO, Any, List, Union

from .exceptions import GeoJSONParseError, handle_parse_error
from .logging_config import get_logger
from .types import Coordinate, Segment

logger = get_logger(__name__)

GEOJSON_TYPE_FEATURE_COLLECTION = "FeatureCollection"
GEOJSON_FEATURE_TYPE_FEATURE = "Feature"
GEOJSON_GEOMETRY_TYPE_LINESTRING = "LineString"


def _parse_position(value: Any, source: str, index: int) -> Coordinate:
    # Positions may carry altitude or other trailing values; only x and y are kept
    if not isinstance(value, (list, tuple)) or len(value) < 2:
        raise GeoJSONParseError(
            source, f"LineString geom for feature #{index} has a position with fewer than two values"
        )
    x, y = value[0], value[1]
    for v in (x, y):
        if isinstance(v, bool) or not isinstance(v, Real) or not math.isfinite(v):
            raise GeoJSONParseError(
                source, f"LineString geom for feature #{index} has a non-numeric position {value!r}"
            )
    return (float(x), float(y))


def parse_geojson(data: Any, source: str = "<object>") -> List[Segment]:
    """Extract segments from an already-decoded GeoJSON document.

    Args:
        data: Decoded JSON (a dict)
        source: Name used in error messages

    Returns:
        Segments in document order

    Raises:
        GeoJSONParseError: If the root is not a FeatureCollection, a feature
            is not of type Feature, or a LineString does not have exactly
            two coordinates
    """
    root_type = data.get("type") if isinstance(data, dict) else None
    if root_type != GEOJSON_TYPE_FEATURE_COLLECTION:
        raise GeoJSONParseError(
            source,
            f"invalid root geojson type {root_type}, expected {GEOJSON_TYPE_FEATURE_COLLECTION}",
        )

    features = data.get("features") or []
    if not isinstance(features, list):
        raise GeoJSONParseError(source, "features must be a list")

    segments: List[Segment] = []
    skipped = 0
    for i, feature in enumerate(features):
        feature_type = feature.get("type") if isinstance(feature, dict) else None
        if feature_type != GEOJSON_FEATURE_TYPE_FEATURE:
            raise GeoJSONParseError(
                source,
                f"invalid geojson feature type {feature_type}, expected {GEOJSON_FEATURE_TYPE_FEATURE}",
            )

        geometry = feature.get("geometry") or {}
        if not isinstance(geometry, dict) or geometry.get("type") != GEOJSON_GEOMETRY_TYPE_LINESTRING:
            skipped += 1
            continue

        coordinates = geometry.get("coordinates")
        if not isinstance(coordinates, list) or len(coordinates) != 2:
            raise GeoJSONParseError(
                source, f"LineString geom for feature #{i} did not have two coordinates"
            )

        segments.append(
            (
                _parse_position(coordinates[0], source, i),
                _parse_position(coordinates[1], source, i),
            )
        )

    logger.debug(f"Parsed {len(segments)} segments from {source} ({skipped} non-line features skipped)")
    return segments


def parse_paths(fp: IO[str], source: str = None) -> List[Segment]:
    """Parse segments from an open text file containing GeoJSON."""
    source = source or getattr(fp, "name", "<stream>")
    try:
        data = json.load(fp)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        handle_parse_error(source, e)
    return parse_geojson(data, source)


def parse_paths_string(text: Union[str, bytes]) -> List[Segment]:
    """Parse segments from a GeoJSON string."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        handle_parse_error("<string>", e)
    return parse_geojson(data, "<string>")


def parse_paths_file(path: Union[str, Path]) -> List[Segment]:
    """Parse segments from a GeoJSON file on disk.

    Raises:
        GeoJSONParseError: If the file cannot be read or is not valid GeoJSON
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fp:
            return parse_paths(fp, str(path))
    except (FileNotFoundError, PermissionError, IsADirectoryError) as e:
        handle_parse_error(str(path), e)

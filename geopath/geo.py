"""
Geographic utilities for geopath.

Provides great-circle distance calculations and coordinate quantization.
All coordinates are (longitude, latitude) in EPSG:4326 order.
"""

import math
from numbers import Real
from typing import Iterable, List, Sequence

import numpy as np

from .exceptions import ValidationError
from .types import Coordinate, Segment

# Mean earth radius in meters (IUGG)
EARTH_RADIUS_METERS = 6371008.8


def _radians(degrees):
    return degrees * math.pi / 180


def haversine(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate great-circle distance between two points using the Haversine formula.

    Args:
        coord1: First coordinate as (longitude, latitude) in decimal degrees
        coord2: Second coordinate as (longitude, latitude) in decimal degrees

    Returns:
        Distance in meters (float)

    Example:
        >>> a = (-84.396863, 33.792908)
        >>> b = (-84.396535, 33.792578)
        >>> print(f"{haversine(a, b):.1f} m")
        47.6 m

    Note:
        - Earth radius is EARTH_RADIUS_METERS (6,371,008.8 m)
        - Coordinates must be in (lon, lat) format, not (lat, lon)
    """
    lon1, lat1 = coord1
    lon2, lat2 = coord2

    dlon = _radians(lon2 - lon1)
    dlat = _radians(lat2 - lat1)
    lat1 = _radians(lat1)
    lat2 = _radians(lat2)

    a = math.sin(dlat / 2) ** 2 + math.sin(dlon / 2) ** 2 * math.cos(lat1) * math.cos(lat2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return c * EARTH_RADIUS_METERS


def haversine_to_many(coords: np.ndarray, coord: Coordinate) -> np.ndarray:
    """Vectorized Haversine distance from every row of ``coords`` to ``coord``.

    Args:
        coords: Array of shape (N, 2) holding (lon, lat) rows
        coord: Single (lon, lat) coordinate

    Returns:
        Array of N distances in meters
    """
    lon, lat = coord
    dlon = _radians(lon - coords[:, 0])
    dlat = _radians(lat - coords[:, 1])
    lat1 = _radians(coords[:, 1])
    lat2 = _radians(lat)

    a = np.sin(dlat / 2) ** 2 + np.sin(dlon / 2) ** 2 * np.cos(lat1) * math.cos(lat2)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return c * EARTH_RADIUS_METERS


def _round_half_away(value: float) -> float:
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += int(math.copysign(1, value))
    return float(truncated)


def quantize(coord: Coordinate, precision: float) -> Coordinate:
    """
    Snap a coordinate onto a grid with spacing ``precision``.

    Near-duplicate endpoints digitized slightly differently collapse onto the
    same grid point, so they compare equal when building the graph. Halves
    round away from zero.

    Args:
        coord: (longitude, latitude) in decimal degrees
        precision: Grid spacing in degrees. 0 disables quantization.

    Returns:
        Quantized coordinate, or ``coord`` unchanged when precision is 0

    Raises:
        ValidationError: If precision is so small that the grid index overflows

    Example:
        >>> x, y = quantize((-84.3968634, 33.7929081), 0.00001)
        >>> round(x, 5), round(y, 5)
        (-84.39686, 33.79291)
    """
    if precision == 0:
        return coord
    x, y = coord
    steps_x = x / precision
    steps_y = y / precision
    if not (math.isfinite(steps_x) and math.isfinite(steps_y)):
        raise ValidationError(f"precision {precision!r} is too fine to snap {coord!r}")
    return (
        _round_half_away(steps_x) * precision,
        _round_half_away(steps_y) * precision,
    )


def quantize_segments(segments: Iterable[Segment], precision: float) -> List[Segment]:
    """Return a new list with both endpoints of every segment quantized.

    The input collection is never modified.
    """
    return [(quantize(a, precision), quantize(b, precision)) for a, b in segments]


# ==============================================================================
# Boundary validation
# ==============================================================================


def validate_coordinate(coord: Sequence[float], name: str = "coordinate") -> Coordinate:
    """Check that ``coord`` is a finite (lon, lat) pair and return it as a tuple.

    Raises:
        ValidationError: If the value is not a pair of finite real numbers
    """
    try:
        x, y = coord
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be a (longitude, latitude) pair, got {coord!r}") from e
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValidationError(f"{name} has a non-numeric component: {coord!r}")
        if not math.isfinite(value):
            raise ValidationError(f"{name} has a non-finite component: {coord!r}")
    return (float(x), float(y))


def validate_segments(segments: Iterable[Sequence[Sequence[float]]]) -> List[Segment]:
    """Validate every segment and return them as tuples of float pairs.

    Raises:
        ValidationError: If a segment does not hold exactly two valid coordinates
    """
    if segments is None:
        raise ValidationError("segments must not be None")
    validated: List[Segment] = []
    for i, segment in enumerate(segments):
        try:
            a, b = segment
        except (TypeError, ValueError) as e:
            raise ValidationError(f"segment #{i} must hold exactly two coordinates") from e
        validated.append(
            (
                validate_coordinate(a, f"segment #{i} start"),
                validate_coordinate(b, f"segment #{i} end"),
            )
        )
    return validated


def validate_precision(precision: float) -> float:
    """Check that ``precision`` is a finite, non-negative number.

    Raises:
        ValidationError: If precision is negative, NaN or infinite
    """
    if isinstance(precision, bool) or not isinstance(precision, Real):
        raise ValidationError(f"precision must be a number, got {precision!r}")
    if not math.isfinite(precision) or precision < 0:
        raise ValidationError(f"precision must be finite and >= 0, got {precision!r}")
    return float(precision)

"""
One-shot shortest path between two arbitrary points along a segment network.

The route runs from the caller's start point to the nearest graph node,
along the network, then from the node nearest the end point to the caller's
end point. The total distance is the sum of the three legs, all measured
with the same Haversine metric.
"""

import logging
from typing import Iterable

from .graph import SegmentGraph, assemble_path
from .logging_config import LogTimer, get_logger
from .types import Coordinate, PathResult, Segment

logger = get_logger(__name__)


def find_shortest_path(
    segments: Iterable[Segment],
    start: Coordinate,
    end: Coordinate,
    precision: float = 0.0,
) -> PathResult:
    """Find the shortest path between two points along a set of line segments.

    Builds a fresh graph for this single query. To run many queries over the
    same network, build a :class:`SegmentGraph` once and call its
    ``shortest_path`` method instead.

    Input coordinates are expected in EPSG:4326 (longitude, latitude) order.

    Args:
        segments: Iterable of ((x1, y1), (x2, y2)) line segments. Not modified.
        start: Query start as (lon, lat)
        end: Query end as (lon, lat)
        precision: Grid spacing used to snap segment endpoints and query points
            so that near-equal coordinates match. 0 disables snapping and
            endpoints must then match exactly.

    Returns:
        PathResult(path, distance) with distance in meters

    Raises:
        NoPathError: If no route connects the points
        ValidationError: On malformed input or a negative precision

    Example:
        >>> segments = [((0.0, 0.0), (0.0, 1.0)), ((0.0, 1.0), (0.0, 2.0))]
        >>> result = find_shortest_path(segments, (0.0, 0.0), (0.0, 2.0))
        >>> len(result.path)
        3
    """
    with LogTimer(logger, "Shortest path query", level=logging.DEBUG):
        graph = SegmentGraph.from_segments(segments, precision)
        return assemble_path(graph, start, end)

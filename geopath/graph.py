"""
Undirected, weighted graph built from unordered line segments.

Every distinct segment endpoint becomes a node with a dense integer ID in
[0, N), assigned in the order endpoints are first seen. Edge weights are
Haversine distances. A SegmentGraph is read-only once built: node
coordinates live in a frozen numpy array and adjacency lists are tuples, so
one graph can serve many queries from many threads.

`assemble_path` turns a node path into a route between two arbitrary
points: the caller's start, the matched nodes, then the caller's end.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .dijkstra import shortest_node_path
from .exceptions import GraphBuildError, NoPathError
from .geo import haversine, quantize, quantize_segments, validate_coordinate, validate_precision, validate_segments
from .locator import nearest_node
from .logging_config import LogTimer, get_logger
from .types import Coordinate, NearestNode, Neighbor, NodeID, PathResult, Segment

logger = get_logger(__name__)


def canonical_segment(segment: Segment) -> Segment:
    """Order a segment's endpoints so (a, b) and (b, a) share one key.

    Endpoints are compared lexicographically on (lon, lat).
    """
    a, b = segment
    return (a, b) if a <= b else (b, a)


def deduplicate_segments(segments: Iterable[Segment]) -> List[Segment]:
    """Drop segments that join the same two endpoints as an earlier one.

    Two segments are duplicates when their canonical forms are equal, that is
    when they have the same endpoints in either orientation. The first
    occurrence is kept with its original orientation, and the surviving
    segments keep their input order.
    """
    seen = set()
    unique: List[Segment] = []
    for segment in segments:
        key = canonical_segment(segment)
        if key in seen:
            continue
        seen.add(key)
        unique.append(segment)
    return unique


class SegmentGraph:
    """Immutable road/trail network graph.

    Build with :meth:`from_segments`, then call :meth:`shortest_path` as
    often as needed.

    Example:
        >>> graph = SegmentGraph.from_segments([((0, 0), (0, 1)), ((0, 1), (0, 2))])
        >>> result = graph.shortest_path((0, 0), (0, 2))
        >>> result.path
        [(0.0, 0.0), (0.0, 1.0), (0.0, 2.0)]
    """

    __slots__ = ("_precision", "_coords", "_node_coords", "_node_to_id", "_adjacency", "_num_edges")

    def __init__(
        self,
        coordinates: Sequence[Coordinate],
        adjacency: Sequence[Sequence[Neighbor]],
        precision: float = 0.0,
    ):
        """Wrap prebuilt node and adjacency data. Prefer :meth:`from_segments`."""
        if len(coordinates) != len(adjacency):
            raise GraphBuildError(
                "coordinate and adjacency lists differ in length",
                num_nodes=len(coordinates),
            )

        self._precision = precision
        self._coords: Tuple[Coordinate, ...] = tuple(coordinates)
        self._node_to_id: Mapping[Coordinate, NodeID] = MappingProxyType(
            {coord: i for i, coord in enumerate(self._coords)}
        )
        self._adjacency: Tuple[Tuple[Neighbor, ...], ...] = tuple(tuple(n) for n in adjacency)

        node_coords = np.array(self._coords, dtype=np.float64).reshape(-1, 2)
        node_coords.setflags(write=False)
        self._node_coords = node_coords

        # Each undirected edge shows up in two lists, self-loops in one
        loops = sum(1 for u, nbrs in enumerate(self._adjacency) for v, _ in nbrs if u == v)
        self._num_edges = (sum(len(n) for n in self._adjacency) - loops) // 2 + loops

    @classmethod
    def from_segments(cls, segments: Iterable[Segment], precision: float = 0.0) -> "SegmentGraph":
        """Build a graph from line segments.

        The caller's collection is not modified: quantization and
        deduplication work on copies.

        Args:
            segments: Iterable of ((x1, y1), (x2, y2)) pairs in (lon, lat) order
            precision: Grid spacing for snapping endpoints. 0 requires exact matches.

        Returns:
            A new SegmentGraph. Empty input yields a graph with zero nodes.

        Raises:
            ValidationError: On malformed or non-finite coordinates, or a bad precision
        """
        precision = validate_precision(precision)
        validated = validate_segments(segments)

        with LogTimer(logger, f"Graph build ({len(validated)} segments)", level=logging.DEBUG):
            snapped = quantize_segments(validated, precision)
            unique = deduplicate_segments(snapped)
            if len(unique) != len(snapped):
                logger.debug(f"Removed {len(snapped) - len(unique)} duplicate segments")

            node_to_id: Dict[Coordinate, NodeID] = {}
            coordinates: List[Coordinate] = []

            def add_point(point: Coordinate) -> NodeID:
                node_id = node_to_id.get(point)
                if node_id is None:
                    node_id = len(coordinates)
                    node_to_id[point] = node_id
                    coordinates.append(point)
                return node_id

            edges = [(add_point(a), add_point(b), haversine(a, b)) for a, b in unique]

            adjacency: List[List[Neighbor]] = [[] for _ in coordinates]
            for u, v, weight in edges:
                adjacency[u].append((v, weight))
                if u != v:
                    adjacency[v].append((u, weight))

            graph = cls(coordinates, adjacency, precision)

        logger.info(
            f"Built graph: {graph.num_nodes} nodes, {graph.num_edges} edges "
            f"from {len(validated)} segments (precision={precision})"
        )
        return graph

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def precision(self) -> float:
        return self._precision

    @property
    def num_nodes(self) -> int:
        return len(self._coords)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    @property
    def coordinates(self) -> Tuple[Coordinate, ...]:
        """Node coordinates indexed by node ID (post-quantization)."""
        return self._coords

    @property
    def node_coords(self) -> np.ndarray:
        """Read-only (N, 2) array of node coordinates."""
        return self._node_coords

    @property
    def adjacency(self) -> Tuple[Tuple[Neighbor, ...], ...]:
        return self._adjacency

    @property
    def node_to_id(self) -> Mapping[Coordinate, NodeID]:
        return self._node_to_id

    def __len__(self) -> int:
        return self.num_nodes

    def __repr__(self) -> str:
        return f"SegmentGraph(nodes={self.num_nodes}, edges={self.num_edges}, precision={self._precision})"

    def coordinate(self, node_id: NodeID) -> Coordinate:
        return self._coords[node_id]

    def neighbors(self, node_id: NodeID) -> Tuple[Neighbor, ...]:
        return self._adjacency[node_id]

    def node_id(self, coord: Coordinate) -> Optional[NodeID]:
        """ID of the node at ``coord`` after quantization, or None."""
        return self._node_to_id.get(quantize(validate_coordinate(coord), self._precision))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def nearest_node(self, coord: Coordinate) -> Optional[NearestNode]:
        """Closest node to ``coord`` (quantized with the graph's precision first)."""
        query = quantize(validate_coordinate(coord), self._precision)
        return nearest_node(self._node_coords, query)

    def shortest_path(self, start: Coordinate, end: Coordinate) -> PathResult:
        """Shortest path between two arbitrary coordinates along the network.

        Args:
            start: Query start as (lon, lat)
            end: Query end as (lon, lat)

        Returns:
            PathResult whose path begins with ``start`` and ends with ``end``

        Raises:
            NoPathError: If the graph is empty or the nearest nodes are not connected
            ValidationError: If a query coordinate is malformed or non-finite
        """
        return assemble_path(self, start, end)


def assemble_path(graph: SegmentGraph, start: Coordinate, end: Coordinate) -> PathResult:
    """Route from ``start`` to ``end`` over a prebuilt graph.

    Query points are matched to their nearest graph nodes (after snapping
    them with the graph's precision); they are never added to the graph.

    Args:
        graph: Network to route over
        start: Query start as (lon, lat)
        end: Query end as (lon, lat)

    Returns:
        PathResult. ``path[0]`` is ``start`` and ``path[-1]`` is ``end``
        exactly as supplied, whatever the precision. A node that coincides
        with the query point it was matched to is not repeated.

    Raises:
        NoPathError: If the graph is empty or the two nearest nodes are not connected
        ValidationError: If a query coordinate is malformed or non-finite
    """
    start = validate_coordinate(start, "start")
    end = validate_coordinate(end, "end")

    if graph.num_nodes == 0:
        logger.warning(f"Cannot route {start} -> {end}: graph has no nodes")
        raise NoPathError(start, end, "graph is empty")

    start_match = graph.nearest_node(start)
    end_match = graph.nearest_node(end)

    try:
        node_ids, network_distance = shortest_node_path(graph.adjacency, start_match.node_id, end_match.node_id)
    except NoPathError as e:
        logger.info(
            f"No path from {start} (node {start_match.node_id}) to {end} (node {end_match.node_id})"
        )
        raise NoPathError(start, end, e.reason) from e

    path: List[Coordinate] = [start]
    for node_id in node_ids:
        coord = graph.coordinate(node_id)
        if coord != path[-1]:
            path.append(coord)
    if len(path) > 1 and path[-1] == end:
        path[-1] = end
    else:
        path.append(end)

    total = start_match.distance + network_distance + end_match.distance
    logger.debug(
        f"Route {start} -> {end}: {len(node_ids)} nodes, {total:.3f} m "
        f"(access {start_match.distance:.3f} m, network {network_distance:.3f} m, "
        f"egress {end_match.distance:.3f} m)"
    )
    return PathResult(path, total)

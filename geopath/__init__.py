"""
geopath - Shortest paths along a network of line segments

This package provides:
- Haversine distances and coordinate snapping
- An immutable, thread-safe graph built from unordered line segments
- Nearest-node matching for arbitrary query points
- Dijkstra shortest paths with early exit and path reconstruction
- A GeoJSON reader for two-point LineString networks

Coordinates are (longitude, latitude) pairs in EPSG:4326 order.
"""

from .config import RoutingConfig
from .dijkstra import dijkstra, shortest_node_path
from .exceptions import (
    ConfigurationError,
    GeoJSONParseError,
    GeoPathError,
    GraphBuildError,
    GraphError,
    NoPathError,
    NodeNotFoundError,
    ParseError,
    RoutingError,
    ValidationError,
)
from .geo import EARTH_RADIUS_METERS, haversine, quantize, quantize_segments
from .geojson import parse_geojson, parse_paths, parse_paths_file, parse_paths_string
from .graph import SegmentGraph, assemble_path, canonical_segment, deduplicate_segments
from .locator import nearest_node
from .logging_config import LogTimer, get_logger, setup_logging
from .path_reconstruction import reconstruct_path, validate_path
from .priority_queue import MinPriorityQueue
from .router import find_shortest_path
from .types import Coordinate, Distance, NearestNode, NodeID, PathResult, Segment

__all__ = [
    # Types
    "Coordinate",
    "Segment",
    "NodeID",
    "Distance",
    "PathResult",
    "NearestNode",
    # Routing
    "find_shortest_path",
    "assemble_path",
    "SegmentGraph",
    "canonical_segment",
    "deduplicate_segments",
    "nearest_node",
    "dijkstra",
    "shortest_node_path",
    "reconstruct_path",
    "validate_path",
    "MinPriorityQueue",
    # Geographic Utilities
    "EARTH_RADIUS_METERS",
    "haversine",
    "quantize",
    "quantize_segments",
    # Input
    "parse_geojson",
    "parse_paths",
    "parse_paths_file",
    "parse_paths_string",
    # Configuration and logging
    "RoutingConfig",
    "setup_logging",
    "get_logger",
    "LogTimer",
    # Exceptions
    "GeoPathError",
    "ParseError",
    "GeoJSONParseError",
    "ValidationError",
    "GraphError",
    "GraphBuildError",
    "RoutingError",
    "NoPathError",
    "NodeNotFoundError",
    "ConfigurationError",
]

__version__ = "1.0.0"

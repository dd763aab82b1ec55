"""
Type definitions for geopath.

This module provides type aliases and result types for type safety and clarity.
All coordinates are (longitude, latitude) pairs in EPSG:4326 order.
"""

from typing import List, NamedTuple, Tuple

# Type Aliases for clarity
Coordinate = Tuple[float, float]  # (longitude, latitude) in decimal degrees
Segment = Tuple[Coordinate, Coordinate]  # One traversable, undirected line
NodeID = int  # Dense integer node identifier in [0, N)
Distance = float  # Distance in meters
Neighbor = Tuple[NodeID, Distance]  # (neighbor node, edge weight)


class PathResult(NamedTuple):
    """Result of a shortest path query.

    Attributes:
        path: Coordinates from the query start point to the query end point.
            The first and last elements are exactly the caller's coordinates.
        distance: Total great-circle travel distance in meters
    """

    path: List[Coordinate]
    distance: Distance


class NearestNode(NamedTuple):
    """Graph node closest to a query coordinate.

    Attributes:
        node_id: Identity of the closest node
        distance: Great-circle distance from the query coordinate in meters
    """

    node_id: NodeID
    distance: Distance

"""
Nearest-node lookup for arbitrary query coordinates.

An exhaustive scan over every graph node; it runs at most twice per query,
so no spatial index is kept.
"""

from typing import Optional

import numpy as np

from .geo import haversine, haversine_to_many
from .logging_config import get_logger
from .types import Coordinate, NearestNode

logger = get_logger(__name__)

# Relative slack used to collect near-tied candidates from the vectorized pass
_TIE_TOLERANCE = 1e-9


def nearest_node(node_coords: np.ndarray, query: Coordinate) -> Optional[NearestNode]:
    """Find the graph node closest to ``query`` by great-circle distance.

    Distances are first computed in one vectorized pass. Candidates within a
    hair of the minimum are then re-measured with the scalar ``haversine`` in
    node-creation order, so the result and the reported distance match a
    plain scan exactly: the lowest node ID wins a tie.

    Args:
        node_coords: Array of shape (N, 2) of (lon, lat) rows, indexed by node ID
        query: (lon, lat) coordinate

    Returns:
        NearestNode(node_id, distance), or None if there are no nodes
    """
    if len(node_coords) == 0:
        logger.debug(f"No nodes to match {query} against")
        return None

    distances = haversine_to_many(node_coords, query)
    floor = float(distances.min())
    candidates = np.flatnonzero(distances <= floor * (1 + _TIE_TOLERANCE) + _TIE_TOLERANCE)

    best_id = -1
    best_dist = float("inf")
    for node_id in candidates:
        node_id = int(node_id)
        d = haversine((float(node_coords[node_id, 0]), float(node_coords[node_id, 1])), query)
        if d < best_dist:
            best_id, best_dist = node_id, d

    logger.debug(f"Nearest node to {query}: #{best_id} at {best_dist:.3f} m")
    return NearestNode(best_id, best_dist)

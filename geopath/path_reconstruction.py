"""
Path reconstruction from Dijkstra parent pointers.

The solver stores ``parent[node] = node`` for the source and for every node
it never settled, so a walk that hits a self-parent anywhere but the source
means the chain is broken.
"""

from typing import List, Optional, Sequence, Set

from .logging_config import get_logger
from .types import NodeID

logger = get_logger(__name__)


def reconstruct_path(
    parent: Sequence[NodeID],
    source_id: NodeID,
    target_id: NodeID,
    max_iterations: Optional[int] = None,
) -> List[NodeID]:
    """Reconstruct the source-to-target node sequence from a parent array.

    Walks backwards from ``target_id`` following ``parent`` until
    ``source_id`` is reached, then reverses the collected nodes.

    Args:
        parent: Parent array from the solver. ``parent[i]`` is the node
            preceding ``i`` on the best known path; ``parent[i] == i`` for
            the source and for unsettled nodes.
        source_id: Starting node ID
        target_id: Destination node ID
        max_iterations: Maximum number of steps before giving up.
            If None, uses len(parent) as the limit.

    Returns:
        List of node IDs from source to target, inclusive.
        Returns an empty list if the chain is broken, cyclic, or too long.

    Example:
        >>> parent = [0, 0, 1, 3]
        >>> reconstruct_path(parent, source_id=0, target_id=2)
        [0, 1, 2]

    Raises:
        ValueError: If source_id or target_id are out of bounds
    """
    n = len(parent)
    if source_id < 0 or source_id >= n:
        raise ValueError(f"source_id {source_id} out of bounds [0, {n})")
    if target_id < 0 or target_id >= n:
        raise ValueError(f"target_id {target_id} out of bounds [0, {n})")

    if source_id == target_id:
        return [source_id]

    if max_iterations is None:
        max_iterations = n

    path: List[NodeID] = []
    visited: Set[NodeID] = set()
    current = target_id

    for iteration in range(max_iterations):
        path.append(current)

        if current == source_id:
            path.reverse()
            logger.debug(f"Path reconstructed: {len(path)} nodes from {source_id} to {target_id}")
            return path

        if current in visited:
            logger.warning(
                f"Cycle detected during path reconstruction from {source_id} to {target_id} "
                f"at node {current} (iteration {iteration})"
            )
            return []
        visited.add(current)

        predecessor = parent[current]

        if predecessor == current:
            logger.debug(f"No path exists: node {current} was never reached from {source_id}")
            return []

        if predecessor < 0 or predecessor >= n:
            logger.error(
                f"Invalid predecessor: parent[{current}] = {predecessor} "
                f"is out of bounds [0, {n})"
            )
            return []

        current = predecessor

    logger.warning(
        f"Path reconstruction exceeded maximum iterations ({max_iterations}) "
        f"from {source_id} to {target_id}"
    )
    return []


def validate_path(path: List[NodeID], source_id: NodeID, target_id: NodeID) -> bool:
    """Check that ``path`` runs from source to target without repeating a node.

    Example:
        >>> validate_path([0, 2, 4], source_id=0, target_id=4)
        True
        >>> validate_path([0, 2, 4], source_id=0, target_id=5)
        False
    """
    if not path:
        logger.debug("Path validation failed: empty path")
        return False

    if path[0] != source_id:
        logger.debug(f"Path validation failed: starts at {path[0]}, expected {source_id}")
        return False

    if path[-1] != target_id:
        logger.debug(f"Path validation failed: ends at {path[-1]}, expected {target_id}")
        return False

    if len(path) != len(set(path)):
        logger.debug("Path validation failed: contains duplicate nodes")
        return False

    return True

"""
Single-pair shortest path search over a SegmentGraph adjacency list.

Dijkstra with lazy deletion: the frontier may hold several entries for the
same node, and entries whose distance is worse than the best known one are
discarded when popped. The search stops as soon as the target is settled.
"""

import math
from typing import List, Sequence, Tuple

from .exceptions import NoPathError, NodeNotFoundError
from .logging_config import get_logger
from .path_reconstruction import reconstruct_path, validate_path
from .priority_queue import MinPriorityQueue
from .types import Distance, Neighbor, NodeID

logger = get_logger(__name__)


def dijkstra(
    adjacency: Sequence[Sequence[Neighbor]],
    source_id: NodeID,
    target_id: NodeID,
) -> Tuple[List[Distance], List[NodeID]]:
    """Run Dijkstra from ``source_id`` until ``target_id`` is settled.

    Every call allocates its own distance array, parent array and frontier,
    so one adjacency list can be searched from several threads at once.

    Args:
        adjacency: ``adjacency[u]`` is a sequence of (neighbor, weight) pairs
        source_id: Starting node ID
        target_id: Node ID at which the search stops

    Returns:
        Tuple of (best, parent) where:
            - best[i] is the shortest known distance from source to i
              (``inf`` if never reached)
            - parent[i] is the predecessor of i on that path
              (``i`` itself for the source and unreached nodes)

    Raises:
        NodeNotFoundError: If source_id or target_id are out of bounds
    """
    n = len(adjacency)
    for node_id in (source_id, target_id):
        if node_id < 0 or node_id >= n:
            raise NodeNotFoundError(node_id, n)

    best = [math.inf] * n
    parent = list(range(n))
    best[source_id] = 0.0

    # Entries are (distance, (from, to))
    frontier: MinPriorityQueue[Tuple[NodeID, NodeID]] = MinPriorityQueue()
    frontier.push(0.0, (source_id, source_id))

    pops = 0
    while frontier:
        dist, (from_id, to_id) = frontier.pop()
        pops += 1

        if dist > best[to_id]:
            continue  # stale

        parent[to_id] = from_id
        if to_id == target_id:
            break

        for nei, weight in adjacency[to_id]:
            cand = dist + weight
            if cand < best[nei]:
                best[nei] = cand
                frontier.push(cand, (to_id, nei))

    logger.debug(
        f"Dijkstra {source_id} -> {target_id}: {pops} pops, "
        f"{len(frontier)} entries left, distance {best[target_id]}"
    )
    return best, parent


def shortest_node_path(
    adjacency: Sequence[Sequence[Neighbor]],
    source_id: NodeID,
    target_id: NodeID,
) -> Tuple[List[NodeID], Distance]:
    """Shortest path between two nodes as a node sequence plus its length.

    Returns:
        Tuple of (node_ids, distance); node_ids runs from source to target inclusive

    Raises:
        NoPathError: If the target cannot be reached from the source
        NodeNotFoundError: If either node ID is out of bounds
    """
    best, parent = dijkstra(adjacency, source_id, target_id)

    if best[target_id] == math.inf:
        raise NoPathError(source_id, target_id, "nodes are not connected")

    node_ids = reconstruct_path(parent, source_id, target_id)
    if not validate_path(node_ids, source_id, target_id):
        logger.error(
            f"Reached node {target_id} at {best[target_id]:.3f} m but could not "
            f"reconstruct a path from {source_id}"
        )
        raise NoPathError(source_id, target_id, "parent chain is broken")

    return node_ids, best[target_id]

"""
Unit tests for the shortest path solver.

Tests lazy deletion of stale frontier entries, early exit, and failure modes.
"""

import math
import sys
import unittest
from pathlib import Path
from unittest import mock

sys.path.insert(0, str(Path(__file__).parent.parent))

from geopath.dijkstra import dijkstra, shortest_node_path
from geopath.exceptions import GraphError, NoPathError, NodeNotFoundError


def undirected(n, edges):
    """Adjacency list for n nodes from (u, v, weight) triples."""
    adjacency = [[] for _ in range(n)]
    for u, v, w in edges:
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))
    return adjacency


class TestDijkstra(unittest.TestCase):
    """Test cases for Dijkstra with lazy deletion."""

    def test_prefers_cheaper_detour(self):
        """0-1 costs 10 directly but 2 via node 2, so node 1's first entry goes stale."""
        adjacency = undirected(4, [(0, 1, 10.0), (0, 2, 1.0), (2, 1, 1.0), (1, 3, 1.0)])
        best, parent = dijkstra(adjacency, 0, 3)
        self.assertEqual(best[3], 3.0)
        self.assertEqual(best[1], 2.0)
        self.assertEqual(parent[1], 2)
        self.assertEqual(parent[3], 1)

    def test_source_is_its_own_parent(self):
        adjacency = undirected(2, [(0, 1, 4.0)])
        best, parent = dijkstra(adjacency, 0, 1)
        self.assertEqual(best[0], 0.0)
        self.assertEqual(parent[0], 0)

    def test_early_exit_leaves_far_nodes_untouched(self):
        adjacency = undirected(4, [(0, 1, 1.0), (1, 2, 5.0), (2, 3, 5.0)])
        best, parent = dijkstra(adjacency, 0, 1)
        self.assertEqual(best[1], 1.0)
        self.assertEqual(best[2], math.inf)
        self.assertEqual(best[3], math.inf)
        self.assertEqual(parent[2], 2)

    def test_unreachable_target(self):
        adjacency = undirected(4, [(0, 1, 1.0), (2, 3, 1.0)])
        best, parent = dijkstra(adjacency, 0, 3)
        self.assertEqual(best[3], math.inf)
        self.assertEqual(parent[3], 3)

    def test_zero_weight_edges(self):
        adjacency = undirected(3, [(0, 1, 0.0), (1, 2, 0.0)])
        best, _ = dijkstra(adjacency, 0, 2)
        self.assertEqual(best[2], 0.0)

    def test_out_of_bounds(self):
        adjacency = undirected(2, [(0, 1, 1.0)])
        with self.assertRaises(NodeNotFoundError) as ctx:
            dijkstra(adjacency, 0, 5)
        self.assertEqual(ctx.exception.node_id, 5)
        self.assertEqual(ctx.exception.num_nodes, 2)
        self.assertNotIn("construction", str(ctx.exception))
        with self.assertRaises(GraphError):
            dijkstra(adjacency, -1, 1)

    def test_does_not_mutate_adjacency(self):
        adjacency = undirected(3, [(0, 1, 1.0), (1, 2, 1.0)])
        snapshot = [list(n) for n in adjacency]
        dijkstra(adjacency, 0, 2)
        self.assertEqual(adjacency, snapshot)


class TestShortestNodePath(unittest.TestCase):
    """Test cases for solving plus reconstruction."""

    def test_node_sequence(self):
        adjacency = undirected(4, [(0, 1, 10.0), (0, 2, 1.0), (2, 1, 1.0), (1, 3, 1.0)])
        node_ids, distance = shortest_node_path(adjacency, 0, 3)
        self.assertEqual(node_ids, [0, 2, 1, 3])
        self.assertEqual(distance, 3.0)

    def test_reverse_direction_same_distance(self):
        adjacency = undirected(4, [(0, 1, 10.0), (0, 2, 1.0), (2, 1, 1.0), (1, 3, 1.0)])
        node_ids, distance = shortest_node_path(adjacency, 3, 0)
        self.assertEqual(node_ids, [3, 1, 2, 0])
        self.assertEqual(distance, 3.0)

    def test_same_node(self):
        adjacency = undirected(2, [(0, 1, 1.0)])
        self.assertEqual(shortest_node_path(adjacency, 1, 1), ([1], 0.0))

    def test_self_loop_is_harmless(self):
        adjacency = undirected(2, [(0, 1, 2.0)])
        adjacency[0].append((0, 0.0))
        self.assertEqual(shortest_node_path(adjacency, 0, 1), ([0, 1], 2.0))

    def test_no_path_raises(self):
        adjacency = undirected(4, [(0, 1, 1.0), (2, 3, 1.0)])
        with self.assertRaises(NoPathError) as ctx:
            shortest_node_path(adjacency, 0, 2)
        self.assertEqual(ctx.exception.start, 0)
        self.assertEqual(ctx.exception.end, 2)

    def test_invalid_reconstruction_raises(self):
        """A reconstructed path that does not run source to target is rejected."""
        adjacency = undirected(3, [(0, 1, 1.0), (1, 2, 1.0)])
        for bad_path in ([], [1, 2], [0, 1], [0, 1, 0, 1, 2]):
            with mock.patch("geopath.dijkstra.reconstruct_path", return_value=bad_path):
                with self.assertRaises(NoPathError) as ctx:
                    shortest_node_path(adjacency, 0, 2)
            self.assertEqual(ctx.exception.reason, "parent chain is broken")


if __name__ == '__main__':
    unittest.main()

"""
Unit tests for the Dijkstra frontier.
"""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from geopath.priority_queue import MinPriorityQueue


class TestMinPriorityQueue(unittest.TestCase):
    """Test cases for MinPriorityQueue."""

    def test_pops_in_priority_order(self):
        q = MinPriorityQueue()
        for priority, item in [(3.0, "c"), (1.0, "a"), (2.0, "b")]:
            q.push(priority, item)
        self.assertEqual([q.pop() for _ in range(3)], [(1.0, "a"), (2.0, "b"), (3.0, "c")])

    def test_equal_priorities_pop_in_insertion_order(self):
        q = MinPriorityQueue()
        q.push(1.0, "first")
        q.push(1.0, "second")
        self.assertEqual(q.pop()[1], "first")
        self.assertEqual(q.pop()[1], "second")

    def test_items_are_never_compared(self):
        """Unorderable payloads are fine."""
        q = MinPriorityQueue()
        q.push(1.0, {"a": 1})
        q.push(1.0, {"b": 2})
        self.assertEqual(q.pop(), (1.0, {"a": 1}))

    def test_len_and_bool(self):
        q = MinPriorityQueue()
        self.assertFalse(q)
        self.assertEqual(len(q), 0)
        q.push(0.0, (0, 0))
        self.assertTrue(q)
        self.assertEqual(len(q), 1)

    def test_peek_does_not_remove(self):
        q = MinPriorityQueue()
        q.push(5.0, "x")
        self.assertEqual(q.peek(), (5.0, "x"))
        self.assertEqual(len(q), 1)

    def test_pop_empty_raises(self):
        with self.assertRaises(IndexError):
            MinPriorityQueue().pop()


if __name__ == '__main__':
    unittest.main()

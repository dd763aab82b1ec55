"""
Min-priority queue used as the Dijkstra frontier.

Thin generic wrapper around heapq. Entries with equal priority are popped
in insertion order, and items themselves are never compared.
"""

import heapq
import itertools
from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")


class MinPriorityQueue(Generic[T]):
    """Binary-heap min-priority queue over (priority, item) pairs.

    Example:
        >>> q = MinPriorityQueue()
        >>> q.push(2.0, "b")
        >>> q.push(1.0, "a")
        >>> q.pop()
        (1.0, 'a')
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, priority: float, item: T) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> Tuple[float, T]:
        """Remove and return the entry with the smallest priority.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        priority, _, item = heapq.heappop(self._heap)
        return priority, item

    def peek(self) -> Tuple[float, T]:
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        priority, _, item = self._heap[0]
        return priority, item

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

"""Priority queues ordered by a less-than comparator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Comparator = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class Point2D:
    """A point in the plane."""

    x: float
    y: float


def less_than(p: Any, q: Any) -> bool:
    """Order items by their natural ordering."""
    return p < q


def left_right(p: Point2D, q: Point2D) -> bool:
    """Order points from left to right by their x coordinate."""
    return p.x < q.x


class HeapPriorityQueue:
    """A priority queue kept as a binary heap in a list."""

    def __init__(self, is_less: Comparator = less_than) -> None:
        self._is_less = is_less
        self._heap: list[Any] = []

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def insert(self, item: Any) -> None:
        """Add an item and bubble it up to its place."""
        heap = self._heap
        heap.append(item)
        child = len(heap) - 1
        while child > 0:
            parent = (child - 1) // 2
            if not self._is_less(heap[child], heap[parent]):
                break
            heap[child], heap[parent] = heap[parent], heap[child]
            child = parent

    def min(self) -> Any:
        """Return the smallest item; raise IndexError if the queue is empty."""
        if not self._heap:
            raise IndexError("min of empty priority queue")
        return self._heap[0]

    def remove_min(self) -> Any:
        """Remove and return the smallest item."""
        heap = self._heap
        if not heap:
            raise IndexError("removeMin of empty priority queue")
        smallest = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            parent = 0
            size = len(heap)
            while 2 * parent + 1 < size:
                child = 2 * parent + 1
                right = child + 1
                if right < size and self._is_less(heap[right], heap[child]):
                    child = right
                if not self._is_less(heap[child], heap[parent]):
                    break
                heap[child], heap[parent] = heap[parent], heap[child]
                parent = child
        return smallest


class ListPriorityQueue:
    """A priority queue kept as a sorted list; equal items stay in arrival order."""

    def __init__(self, is_less: Comparator = less_than) -> None:
        self._is_less = is_less
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def insert(self, item: Any) -> None:
        """Insert before the first item that the new one is less than."""
        position = next(
            (i for i, current in enumerate(self._items) if self._is_less(item, current)),
            len(self._items),
        )
        self._items.insert(position, item)

    def min(self) -> Any:
        """Return the smallest item; raise IndexError if the queue is empty."""
        if not self._items:
            raise IndexError("min of empty priority queue")
        return self._items[0]

    def remove_min(self) -> Any:
        """Remove and return the smallest item."""
        if not self._items:
            raise IndexError("removeMin of empty priority queue")
        return self._items.pop(0)
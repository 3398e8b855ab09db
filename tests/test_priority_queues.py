import random

import pytest

from dsbasics.priority_queues import (
    HeapPriorityQueue,
    ListPriorityQueue,
    Point2D,
    left_right,
    less_than,
)


def test_less_than_comparator():
    assert less_than(1, 2)
    assert not less_than(2, 1)
    assert not less_than(2, 2)


def test_left_right_compares_x_only():
    assert left_right(Point2D(1.1, 9.0), Point2D(6.1, 0.0))
    assert not left_right(Point2D(1.1, 2.2), Point2D(1.1, 5.1))


def test_heap_example():
    queue = HeapPriorityQueue()
    assert len(queue) == 0
    for item in [10, 9, 8, 7, 6]:
        queue.insert(item)
    assert queue.min() == 6
    assert len(queue) == 5


@pytest.mark.parametrize("queue_type", [HeapPriorityQueue, ListPriorityQueue])
def test_custom_comparator_gives_max_queue(queue_type):
    queue = queue_type(lambda p, q: p > q)
    for item in [3, 1, 4, 1, 5, 9, 2, 6]:
        queue.insert(item)
    assert queue.min() == 9
    assert [queue.remove_min() for _ in range(8)] == [9, 6, 5, 4, 3, 2, 1, 1]


@pytest.mark.parametrize("queue_type", [HeapPriorityQueue, ListPriorityQueue])
@pytest.mark.parametrize("method", ["min", "remove_min"])
def test_empty_queue_raises(queue_type, method):
    with pytest.raises(IndexError):
        getattr(queue_type(), method)()


def test_list_queue_points_example():
    points = ListPriorityQueue(left_right)
    points.insert(Point2D(1.1, 2.2))
    points.insert(Point2D(6.1, 4.3))
    points.insert(Point2D(1.1, 5.1))
    assert len(points) == 3
    drained = []
    while not points.is_empty():
        drained.append(points.remove_min())
    assert drained == [Point2D(1.1, 2.2), Point2D(1.1, 5.1), Point2D(6.1, 4.3)]


def test_heap_with_points():
    points = HeapPriorityQueue(left_right)
    for point in [Point2D(6.1, 4.3), Point2D(1.1, 2.2), Point2D(3.0, 0.0)]:
        points.insert(point)
    assert points.remove_min() == Point2D(1.1, 2.2)
    assert points.remove_min() == Point2D(3.0, 0.0)
    assert points.min() == Point2D(6.1, 4.3)
    assert len(points) == 1


def test_single_item_round_trip():
    queue = HeapPriorityQueue()
    queue.insert("only")
    assert queue.remove_min() == "only"
    assert queue.is_empty()
import pytest

from algokit.priority_queue import PriorityQueue


def _filled(pairs):
    queue = PriorityQueue()
    for value, weight in pairs:
        queue.enqueue(value, weight)
    return queue


def test_dequeue_follows_weight_order():
    pairs = [("a", 5.0), ("b", 1.0), ("c", 3.0), ("d", 4.0), ("e", 2.0)]
    queue = _filled(pairs)
    out = [queue.dequeue() for _ in range(len(pairs))]
    assert out == [value for value, _ in sorted(pairs, key=lambda p: p[1])]
    assert len(queue) == 0


def test_iteration_weights_are_ascending():
    queue = _filled([(1, 9.0), (2, 0.5), (3, 4.0), (4, 4.0), (5, 7.5)])
    weights = [weight for _, weight in queue]
    assert weights == sorted(weights)
    assert len(queue) == 5


def test_equal_weights_insert_after_front():
    queue = _filled([("a", 1.0), ("b", 1.0), ("c", 1.0)])
    assert [value for value, _ in queue] == ["a", "c", "b"]


def test_min_does_not_remove():
    queue = _filled([("x", 2.0), ("y", 1.0)])
    assert queue.min() == "y"
    assert len(queue) == 2
    assert queue.dequeue() == "y"
    assert queue.min() == "x"


def test_decrease_priority_moves_value_forward():
    queue = _filled([("a", 1.0), ("b", 2.0), ("c", 3.0)])
    queue.decrease_priority("c", 0.5)
    assert queue.min() == "c"
    assert dict(queue)["c"] == 0.5


def test_decrease_priority_front_updates_in_place():
    queue = _filled([("a", 1.0), ("b", 2.0)])
    queue.decrease_priority("a", 10.0)
    assert list(queue) == [("a", 10.0), ("b", 2.0)]


def test_decrease_priority_without_reorder_keeps_position():
    queue = _filled([("a", 1.0), ("b", 5.0), ("c", 6.0)])
    queue.decrease_priority("c", 5.5)
    assert list(queue) == [("a", 1.0), ("b", 5.0), ("c", 5.5)]


def test_decrease_priority_unknown_value_is_ignored():
    queue = _filled([("a", 1.0), ("b", 2.0)])
    queue.decrease_priority("z", 0.0)
    assert list(queue) == [("a", 1.0), ("b", 2.0)]


def test_decrease_priority_on_empty_queue():
    queue = PriorityQueue()
    queue.decrease_priority("a", 1.0)
    assert len(queue) == 0


def test_empty_queue_errors():
    queue = PriorityQueue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.min()
import pytest

from algo.queues import ArrayQueue, CircularQueue, LinkedListQueue


def _fill(queue, values):
    for value in values:
        queue.enqueue(value)
    return queue


def test_array_queue_demo():
    queue = _fill(ArrayQueue(5), [1, 2])
    assert str(queue) == "head <- 1 <- 2 <- tail"
    assert queue.dequeue() == 1
    assert str(queue) == str(_fill(ArrayQueue(5), [2]))


def test_array_queue_fifo_order():
    queue = _fill(ArrayQueue(4), ["a", "b", "c", "d"])
    assert [queue.dequeue() for _ in range(4)] == ["a", "b", "c", "d"]
    assert str(queue) == "Empty Queue"


def test_array_queue_full_raises_and_slots_are_not_reused():
    queue = _fill(ArrayQueue(2), [1, 2])
    with pytest.raises(OverflowError):
        queue.enqueue(3)
    queue.dequeue()
    queue.dequeue()
    with pytest.raises(OverflowError):
        queue.enqueue(3)


def test_array_queue_empty_raises():
    with pytest.raises(IndexError):
        ArrayQueue(3).dequeue()


def test_array_queue_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayQueue(-1)


def test_circular_queue_demo():
    queue = CircularQueue(3)
    queue.enqueue(2)
    assert queue.is_full() is False
    assert queue.is_empty() is False
    assert str(queue) == "head <- 2 <- tail"


def test_circular_queue_holds_capacity_minus_one():
    queue = _fill(CircularQueue(3), [1, 2])
    assert queue.is_full() is True
    with pytest.raises(OverflowError):
        queue.enqueue(3)


def test_circular_queue_wraps_around():
    queue = _fill(CircularQueue(3), ["a", "b"])
    assert queue.dequeue() == "a"
    queue.enqueue("c")
    assert str(queue) == str(_fill(CircularQueue(3), ["b", "c"]))
    assert [queue.dequeue(), queue.dequeue()] == ["b", "c"]
    assert queue.is_empty() is True
    assert str(queue) == "Empty queue"


def test_circular_queue_empty_raises():
    with pytest.raises(IndexError):
        CircularQueue(2).dequeue()


def test_circular_queue_zero_capacity_rejected():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_linked_queue_demo():
    queue = _fill(LinkedListQueue(), [4, 5])
    assert str(queue) == "head <- 4 <- 5 <- tail"
    assert queue.dequeue() == 4
    assert str(queue) == str(_fill(LinkedListQueue(), [5]))


def test_linked_queue_length_tracks_contents():
    queue = _fill(LinkedListQueue(), range(6))
    assert len(queue) == 6
    queue.dequeue()
    assert len(queue) == 5


def test_linked_queue_reusable_after_draining():
    queue = _fill(LinkedListQueue(), [1, 2])
    queue.dequeue()
    queue.dequeue()
    assert str(queue) == "Empty Queue"
    with pytest.raises(IndexError):
        queue.dequeue()
    queue.enqueue(7)
    assert queue.dequeue() == 7
    assert len(queue) == 0
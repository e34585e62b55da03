import pytest

from algods.circular_queue import CircularQueue


@pytest.fixture
def queue():
    q = CircularQueue(10)
    for value in (1, 2, 3, 4):
        q.enqueue(value)
    return q


def test_first_dequeues(queue):
    trace = [(queue.dequeue(), queue.front, queue.rear) for _ in range(3)]
    assert trace == [(1, 1, 4), (2, 2, 4), (3, 3, 4)]


def test_fill_wraps_around(queue):
    for _ in range(3):
        queue.dequeue()
    value = 100
    while not queue.is_full():
        queue.enqueue(value)
        value += 1
    assert value == 109
    assert queue.capacity == 10
    assert len(queue) == 10
    assert queue.rear == 2
    assert queue.front == 3


def test_drain_after_wrap(queue):
    for _ in range(3):
        queue.dequeue()
    value = 100
    while not queue.is_full():
        queue.enqueue(value)
        value += 1
    drained = []
    while not queue.is_empty():
        drained.append((queue.dequeue(), queue.front, queue.rear))
    assert [item for item, _, _ in drained] == [4] + list(range(100, 109))
    assert [front for _, front, _ in drained] == [4, 5, 6, 7, 8, 9, 10, 0, 1, 2]
    assert all(rear == 2 for _, _, rear in drained)
    assert len(queue) == 0


def test_full_without_wrap():
    q = CircularQueue(3)
    for value in range(3):
        q.enqueue(value)
    assert q.is_full() is True
    assert len(q) == 3


def test_enqueue_full_raises():
    q = CircularQueue(1)
    q.enqueue(1)
    with pytest.raises(IndexError):
        q.enqueue(2)


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        CircularQueue(2).dequeue()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)
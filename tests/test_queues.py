import pytest

from baltree.errors import QueueUnderflowError
from baltree.queues import Queue


@pytest.fixture
def queue():
    yield Queue()


def test_new_queue_is_empty(queue: Queue):
    assert queue.is_empty()
    assert queue.count == 0


def test_dequeue_returns_first_enqueued(queue: Queue):
    for value in [1, 2, 3]:
        queue.enqueue(value)

    assert len(queue) == 3
    assert queue.peek() == 1
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_enqueue_after_draining(queue: Queue):
    queue.enqueue(1)
    queue.dequeue()
    queue.enqueue(2)
    queue.enqueue(3)

    assert queue.dequeue() == 2
    assert queue.dequeue() == 3
    assert queue.tail is None


@pytest.mark.parametrize("operation", ["dequeue", "peek"])
def test_empty_queue_underflows(queue: Queue, operation):
    with pytest.raises(QueueUnderflowError):
        getattr(queue, operation)()

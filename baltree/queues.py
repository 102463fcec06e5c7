from .errors import QueueUnderflowError


class QueueNode:

    def __init__(self, value):
        self.value = value
        self.next_: QueueNode = None


class Queue:
    """FIFO queue backed by a singly linked list with a tail pointer"""

    def __init__(self):
        self.head: QueueNode = None
        self.tail: QueueNode = None
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def is_empty(self):
        return self.head is None

    def enqueue(self, value):
        node = QueueNode(value)
        if self.is_empty():
            self.head = node
        else:
            self.tail.next_ = node
        self.tail = node
        self._count += 1

    def dequeue(self):
        if self.is_empty():
            raise QueueUnderflowError("Cannot dequeue an empty queue")
        popped = self.head
        self.head = popped.next_
        # drop the tail reference once the last entry leaves
        if self.head is None:
            self.tail = None
        self._count -= 1
        return popped.value

    def peek(self):
        if self.is_empty():
            raise QueueUnderflowError("Cannot peek in an empty queue")
        return self.head.value

    def __len__(self):
        return self._count

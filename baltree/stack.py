from .errors import StackUnderflowError


class StackNode:

    def __init__(self, value, next_: "StackNode" = None):
        self.value = value
        self.next_ = next_


class Stack:
    """LIFO stack backed by a singly linked list"""

    def __init__(self):
        self.head: StackNode = None
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def is_empty(self):
        return self.head is None

    def push(self, value):
        self.head = StackNode(value, self.head)
        self._count += 1

    def pop(self):
        if self.is_empty():
            raise StackUnderflowError("Cannot pop from an empty stack")
        popped = self.head
        self.head = popped.next_
        self._count -= 1
        return popped.value

    def peek(self):
        if self.is_empty():
            raise StackUnderflowError("Cannot peek at an empty stack")
        return self.head.value

    def __len__(self):
        return self._count

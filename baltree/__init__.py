import logging

from .balanced import BalancedTree
from .errors import QueueUnderflowError, StackUnderflowError, TreeUnderflowError, UnderflowError
from .queues import Queue
from .stack import Stack
from .tree import SEPARATOR, Direction, Node, Tree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BalancedTree",
    "Direction",
    "Node",
    "Queue",
    "QueueUnderflowError",
    "SEPARATOR",
    "Stack",
    "StackUnderflowError",
    "Tree",
    "TreeUnderflowError",
    "UnderflowError",
]

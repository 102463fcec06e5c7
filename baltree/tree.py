import enum
import logging
from typing import Iterator, List, Optional

import networkx as nx

from .queues import Queue
from .stack import Stack

# joins values in the string form of a tree
SEPARATOR = ", "

logger = logging.getLogger(__name__)


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class Node:

    def __init__(self, value, parent: Optional["Node"] = None):
        # the parent link is only used to walk upwards; the tree owns nodes
        # through the left/right links
        self.parent: Optional[Node] = parent
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        self.value = value

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def get_child(self, direction: Direction):
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def get_direction(self) -> Direction:
        if self.parent is None:
            return Direction.ROOT
        return Direction.LEFT if self is self.parent.left else Direction.RIGHT

    def dispose(self):
        self.parent = None
        self.left = None
        self.right = None

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"Node({self.value!r})"


class Tree:
    """Unordered binary tree of parent/left/right linked nodes.

    The tree is empty while it has no root. Size and height are never stored;
    both are recomputed from the node graph on every call.
    """

    def __init__(self, root: Optional[Node] = None):
        self.root = root

    def is_empty(self):
        return self.root is None

    @staticmethod
    def subtree_size(node: Optional[Node]) -> int:
        if node is None:
            return 0
        return Tree.subtree_size(node.left) + Tree.subtree_size(node.right) + 1

    @staticmethod
    def subtree_height(node: Optional[Node]) -> int:
        if node is None:
            return -1
        return 1 + max(Tree.subtree_height(node.left), Tree.subtree_height(node.right))

    def size(self) -> int:
        return self.subtree_size(self.root)

    def height(self) -> int:
        return self.subtree_height(self.root)

    def search(self, value, depth_first: bool = True) -> Optional[Node]:
        """Returns the first node holding value, or None if there isn't one"""
        if depth_first:
            return self.depth_first_search(value)
        return self.breadth_first_search(value)

    def depth_first_search(self, value) -> Optional[Node]:
        for node in self._preorder():
            if node.value == value:
                return node
        return None

    def breadth_first_search(self, value) -> Optional[Node]:
        for node in self._level_order():
            if node.value == value:
                return node
        return None

    def _preorder(self) -> Iterator[Node]:
        if self.is_empty():
            return
        stack = Stack()
        stack.push(self.root)
        while not stack.is_empty():
            node = stack.pop()
            yield node
            # the right child goes on first so the left one is popped next
            if node.right is not None:
                stack.push(node.right)
            if node.left is not None:
                stack.push(node.left)

    def _level_order(self) -> Iterator[Node]:
        if self.is_empty():
            return
        queue = Queue()
        queue.enqueue(self.root)
        while not queue.is_empty():
            node = queue.dequeue()
            yield node
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)

    def to_sequence(self) -> List:
        """Returns every value in pre-order (root, left subtree, right subtree)"""
        return [node.value for node in self._preorder()]

    def level_order(self) -> List:
        return [node.value for node in self._level_order()]

    def to_graph(self) -> nx.DiGraph:
        """Exports the node graph as a DiGraph of parent -> child edges.

        Graph nodes are integers numbered in pre-order, each with a ``value``
        attribute. Edges carry the ``direction`` of the child ("LEFT" or
        "RIGHT"). Edges are built from the child links only, so comparing the
        result with each node's parent link exposes inconsistent back-references.
        """
        graph = nx.DiGraph()
        nodes = list(self._preorder())
        ids = {id(node): index for index, node in enumerate(nodes)}
        for index, node in enumerate(nodes):
            graph.add_node(index, value=node.value)
        for index, node in enumerate(nodes):
            for direction in (Direction.LEFT, Direction.RIGHT):
                child = node.get_child(direction)
                if child is not None:
                    graph.add_edge(index, ids[id(child)], direction=direction.name)
        return graph

    def pprint(self, node: Optional[Node], depth=0):
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        direction = node.get_direction()
        return ("\t" * depth + f"|_ {direction.name} | {node.value}\n"
                + self.pprint(node.left, depth + 1)
                + self.pprint(node.right, depth + 1))

    def dispose(self):
        """Unlinks every node and leaves the tree empty"""
        if self.is_empty():
            return
        count = 0
        stack = Stack()
        stack.push(self.root)
        while not stack.is_empty():
            node = stack.pop()
            if node.left is not None:
                stack.push(node.left)
            if node.right is not None:
                stack.push(node.right)
            node.dispose()
            count += 1
        self.root = None
        logger.debug("disposed tree of %d nodes", count)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.dispose()

    def __len__(self):
        return self.size()

    def __iter__(self):
        return iter(self.to_sequence())

    def __contains__(self, value):
        return self.search(value) is not None

    def __str__(self):
        return SEPARATOR.join(str(value) for value in self.to_sequence())

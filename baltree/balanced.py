import logging
from typing import Iterable

from .errors import TreeUnderflowError
from .tree import Node, Tree

logger = logging.getLogger(__name__)


class BalancedTree(Tree):
    """Tree that keeps the sizes of every node's subtrees within one.

    Values are not ordered. Each insertion grows the smaller of the two
    subtrees, which also keeps the height close to log2(n). Removal swaps a
    leaf into the removed node's place and does not rebalance by size.
    """

    def add(self, value):
        if self.is_empty():
            self.root = Node(value)
            logger.debug("added %r as the root", value)
            return
        self._add_child(self.root, value)

    def extend(self, values: Iterable):
        for value in values:
            self.add(value)

    def _add_child(self, parent: Node, value):
        if parent.left is None:
            parent.left = Node(value, parent)
        elif parent.right is None:
            parent.right = Node(value, parent)
        # both slots are taken, so descend into the smaller subtree. ties go
        # left, which is why the left subtree is never the smaller one
        elif self.subtree_size(parent.left) > self.subtree_size(parent.right):
            self._add_child(parent.right, value)
        else:
            self._add_child(parent.left, value)

    def remove(self, value) -> bool:
        """Removes the first node holding value found by a depth first search

        Returns False if no node holds the value. Raises TreeUnderflowError if
        the tree is empty.
        """
        if self.is_empty():
            logger.debug("refusing to remove %r from an empty tree", value)
            raise TreeUnderflowError("Cannot remove from an empty tree")

        node = self.search(value)
        if node is None:
            return False

        self._remove_node(node)
        return True

    def _remove_node(self, node: Node):
        parent = node.parent

        # node has no children. if it's the root the tree is now empty,
        # otherwise unhook it from its parent
        if node.is_leaf():
            if parent is None:
                self.root = None
                logger.debug("removed %r, the last node in the tree", node.value)
            else:
                self._detach_leaf(node)
                logger.debug("removed leaf %r", node.value)
            node.dispose()
            return

        # node has 2 children. pull a leaf out of the taller subtree and put
        # it where the node was, adopting both of the node's children
        if node.left is not None and node.right is not None:
            swap = self._find_leaf_to_swap(node)
            self._replace(node, swap)
            # the leaf may have been one of node's children, so read them only
            # after it has been detached
            swap.left = node.left
            swap.right = node.right
            if swap.left is not None:
                swap.left.parent = swap
            if swap.right is not None:
                swap.right.parent = swap
            logger.debug("removed %r, swapped in leaf %r", node.value, swap.value)
            node.dispose()
            return

        # node has 1 child. the child's subtree takes its place
        child = node.left if node.left is not None else node.right
        self._replace(node, child)
        logger.debug("removed %r, promoted child %r", node.value, child.value)
        node.dispose()

    def _replace(self, node: Node, replacement: Node):
        parent = node.parent
        replacement.parent = parent
        if parent is None:
            self.root = replacement
        else:
            parent.set_child(node.get_direction(), replacement)

    def _detach_leaf(self, leaf: Node):
        parent = leaf.parent
        # when the left child goes, its right sibling moves over into the left
        # slot. the right slot is cleared in both cases
        if leaf is parent.left:
            parent.left = parent.right
        parent.right = None
        leaf.parent = None

    def _find_leaf_to_swap(self, node: Node) -> Node:
        """Walks down the taller subtree to a leaf and detaches it"""
        if node.is_leaf():
            if node.parent is not None:
                self._detach_leaf(node)
            return node

        if self.subtree_height(node.left) > self.subtree_height(node.right):
            return self._find_leaf_to_swap(node.left)
        return self._find_leaf_to_swap(node.right)

"""AVL trees: height-balanced binary search trees."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from arbor.bst import BinarySearchTree, is_bst
from arbor.structure import rotate_left, rotate_right
from arbor.tree import Node, balance


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of *tree*, parents before children."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(node.children())


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if a non-empty *tree* is a valid AVL tree.

    The tree must be a strict binary search tree and, at every node, the
    heights of the two subtrees may differ by at most one.
    """
    if tree is None or not is_bst(tree):
        return False
    return all(abs(balance(node)) <= 1 for node in _nodes(tree))


class AVLTree(BinarySearchTree):
    """A binary search tree that rebalances itself after every change."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(values)

    @classmethod
    def from_sorted(cls, values: Sequence[int]) -> "AVLTree":
        """Build a balanced tree directly from an ascending sequence.

        Each subtree is rooted at the middle element of its slice.
        """
        items = list(values)
        tree = cls()

        def build(start: int, end: int, parent: Optional[Node]) -> Optional[Node]:
            if start > end:
                return None
            mid = (start + end) // 2
            node = Node(items[mid], parent=parent)
            node.left = build(start, mid - 1, node)
            node.right = build(mid + 1, end, node)
            return node

        tree.root = build(0, len(items) - 1, None)
        return tree

    def insert(self, value: int) -> Optional[Node]:
        """Insert *value*, rebalance, and return its node; None if present."""
        node = super().insert(value)
        if node is not None:
            self._rebalance(node.parent)
        return node

    def remove(self, value: int) -> bool:
        """Remove *value* and rebalance; return False if it was absent."""
        node = self.search(value)
        if node is None:
            return False
        unlinked = node
        if node.left is not None and node.right is not None:
            unlinked = node.right
            while unlinked.left is not None:
                unlinked = unlinked.left
        start = unlinked.parent
        super().remove(value)
        self._rebalance(start)
        return True

    def _rebalance(self, start: Optional[Node]) -> None:
        """Restore the balance of every node from *start* up to the root."""
        node = start
        while node is not None:
            factor = balance(node)
            if factor > 1:
                if balance(node.left) < 0:
                    rotate_left(node.left)
                node = rotate_right(node)
            elif factor < -1:
                if balance(node.right) > 0:
                    rotate_right(node.right)
                node = rotate_left(node)
            if node.parent is None:
                self.root = node
            node = node.parent
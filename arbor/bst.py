"""Binary search trees over distinct integer values."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from arbor.tree import Node, inorder, size


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if a non-empty *tree* is a valid binary search tree.

    Every value in a left subtree is strictly smaller than its ancestor's,
    every value in a right subtree strictly greater; duplicates fail.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


class BinarySearchTree:
    """A binary search tree; values are inserted in order, duplicates ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> Optional[Node]:
        """Insert *value* and return its new node, or None if already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value, parent=current)
                    return current.left
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value, parent=current)
                    return current.right
                current = current.right
            else:
                return None

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding *value*, or None if it is absent."""
        current = self.root
        while current is not None and current.value != value:
            current = current.left if value < current.value else current.right
        return current

    def remove(self, value: int) -> bool:
        """Remove *value* from the tree; return False if it was absent.

        A node with two children takes the value of its in-order
        successor, which is then removed from the right subtree.
        """
        node = self.search(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None
        return True

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)
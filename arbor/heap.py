"""Max binary heaps stored as linked, complete binary trees."""

from __future__ import annotations

from typing import Iterable, Optional

from arbor.structure import is_complete
from arbor.tree import Node


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if a non-empty *tree* is a complete max binary heap."""
    if tree is None or not is_complete(tree):
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in node.children():
            if child.value > node.value:
                return False
            stack.append(child)
    return True


class MaxHeap:
    """A max binary heap; the largest value always sits at the root."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _node_at(self, position: int) -> Node:
        """Return the node at 1-based level-order *position*."""
        node = self.root
        for bit in bin(position)[3:]:
            node = node.right if bit == "1" else node.left
        return node

    def insert(self, value: int) -> Node:
        """Insert *value* and return the node where it comes to rest."""
        self._size += 1
        if self.root is None:
            self.root = Node(value)
            return self.root
        position = self._size
        parent = self._node_at(position // 2)
        node = Node(value, parent=parent)
        if position & 1:
            parent.right = node
        else:
            parent.left = node
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        last = self._node_at(self._size)
        self._size -= 1
        if last is self.root:
            self.root = None
            return top
        parent = last.parent
        if parent.right is last:
            parent.right = None
        else:
            parent.left = None
        last.parent = None
        self.root.value = last.value
        self._sift_down(self.root)
        return top

    @staticmethod
    def _sift_down(node: Node) -> None:
        while node.left is not None:
            child = node.left
            if node.right is not None and node.right.value >= child.value:
                child = node.right
            if node.value > child.value:
                break
            node.value, child.value = child.value, node.value
            node = child

    def to_sorted_list(self) -> list[int]:
        """Empty the heap and return its values in descending order."""
        result = []
        while self.root is not None:
            result.append(self.extract())
        return result

    def __len__(self) -> int:
        return self._size
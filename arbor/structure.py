"""Whole-tree structure: ancestry, level order, completeness and rotations."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from arbor.tree import Node, depth


def common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest common ancestor of two nodes, or None if they share none.

    A node counts as its own ancestor, so a node and one of its descendants
    have that node as their common ancestor.
    """
    if first is None or second is None:
        return None
    depth_first, depth_second = depth(first), depth(second)
    while depth_first > depth_second:
        first = first.parent
        depth_first -= 1
    while depth_second > depth_first:
        second = second.parent
        depth_second -= 1
    while first is not None and second is not None:
        if first is second:
            return first
        first, second = first.parent, second.parent
    return None


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of *tree* level by level, left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(node.children())


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if a non-empty *tree* fills every level from the left.

    Every level except possibly the last is full, and the nodes of the
    last level are packed to the left.
    """
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def _relink(old: Node, new: Node) -> None:
    """Make *new* take *old*'s place under *old*'s former parent."""
    parent = old.parent
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        elif parent.right is old:
            parent.right = new
    old.parent = new


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate *tree* to the left and return the new subtree root.

    Returns None when there is no tree or it has no right child to lift.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    _relink(tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate *tree* to the right and return the new subtree root.

    Returns None when there is no tree or it has no left child to lift.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    _relink(tree, pivot)
    return pivot
"""Binary tree nodes and the basic operations and measurements on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its family."""

    value: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)

    def children(self) -> Iterator["Node"]:
        """Yield the existing children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of *parent*.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    node = Node(value, parent=parent, left=parent.left)
    if parent.left is not None:
        parent.left.parent = node
    parent.left = node
    return node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of *parent*.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    node = Node(value, parent=parent, right=parent.right)
    if parent.right is not None:
        parent.right.parent = node
    parent.right = node
    return node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of *tree* in pre-order."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def delete(tree: Optional[Node]) -> None:
    """Dismantle a whole tree, unlinking every node in it."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    for node in list(_walk(tree)):
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if *node* exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if *node* exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of *tree* in pre-order."""
    for node in _walk(tree):
        yield node.value


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of *tree* in in-order."""
    stack: list[Node] = []
    current = tree
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        yield node.value
        current = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of *tree* in post-order."""
    stack: list[tuple[Node, bool]] = [(tree, False)] if tree is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def _levels(tree: Optional[Node]) -> int:
    """Count the levels of *tree*; an empty tree has none."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [child for node in level for child in node.children()]
    return count


def height(tree: Optional[Node]) -> int:
    """Return the height of *tree* in edges; 0 for a leaf or an empty tree."""
    return max(_levels(tree) - 1, 0)


def depth(node: Optional[Node]) -> int:
    """Return the number of edges between *node* and its root."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in *tree*."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in *tree*."""
    return sum(1 for node in _walk(tree) if is_leaf(node))


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes in *tree* with at least one child."""
    return sum(1 for node in _walk(tree) if not is_leaf(node))


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor of *tree*: left levels minus right levels."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node of a non-empty *tree* has zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _walk(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if a non-empty *tree* has every level completely filled."""
    if tree is None:
        return False
    return size(tree) == (1 << _levels(tree)) - 1


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of *node*'s parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is node:
        return parent.right
    if parent.right is node:
        return parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of *node*'s parent, or None."""
    if node is None:
        return None
    return sibling(node.parent)
from arbor.structure import (
    common_ancestor,
    is_complete,
    levelorder,
    rotate_left,
    rotate_right,
)
from arbor.tree import Node, inorder, insert_left, insert_right, preorder


def _links_consistent(root):
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.parent is not node:
                    return False
                stack.append(child)
    return True


def _sample():
    root = Node(98)
    left = insert_left(root, 12)
    right = insert_right(root, 402)
    insert_right(left, 54)
    insert_left(left, 10)
    insert_left(right, 128)
    return root


def test_levelorder_visits_level_by_level():
    root = _sample()
    assert list(levelorder(root)) == [98, 12, 402, 10, 54, 128]


def test_levelorder_of_empty_tree_is_empty():
    assert list(levelorder(None)) == []


def test_levelorder_covers_every_node():
    root = _sample()
    assert sorted(levelorder(root)) == sorted(preorder(root))


def test_common_ancestor_of_cousins():
    root = _sample()
    ten = root.left.left
    one_two_eight = root.right.left
    assert common_ancestor(ten, one_two_eight) is root


def test_common_ancestor_of_siblings():
    root = _sample()
    assert common_ancestor(root.left.left, root.left.right) is root.left


def test_common_ancestor_of_node_and_descendant():
    root = _sample()
    assert common_ancestor(root.left, root.left.right) is root.left
    assert common_ancestor(root.right.left, root) is root


def test_common_ancestor_of_node_with_itself():
    root = _sample()
    assert common_ancestor(root.left, root.left) is root.left


def test_common_ancestor_of_separate_trees_is_none():
    assert common_ancestor(_sample().left, _sample().right) is None


def test_common_ancestor_of_missing_node_is_none():
    root = _sample()
    assert common_ancestor(root, None) is None
    assert common_ancestor(None, root) is None


def test_is_complete_for_left_packed_tree():
    root = _sample()
    assert is_complete(root) is True


def test_is_complete_false_with_gap():
    root = _sample()
    insert_right(root.right, 500)
    root.right.left = None
    assert is_complete(root) is False


def test_is_complete_false_when_last_level_not_left_packed():
    root = Node(1)
    insert_left(root, 2)
    insert_right(root, 3)
    insert_left(root.right, 4)
    assert is_complete(root) is False


def test_is_complete_single_node_and_empty():
    assert is_complete(Node(7)) is True
    assert is_complete(None) is False


def test_rotate_left_lifts_right_child():
    root = Node(98)
    insert_right(root, 102)
    insert_right(root.right, 128)
    new_root = rotate_left(root)
    assert new_root.value == 102
    assert new_root.parent is None
    assert new_root.left is root
    assert list(preorder(new_root)) == [102, 98, 128]
    assert _links_consistent(new_root)


def test_rotate_right_lifts_left_child():
    root = Node(98)
    insert_left(root, 64)
    insert_left(root.left, 32)
    new_root = rotate_right(root)
    assert new_root.value == 64
    assert list(preorder(new_root)) == [64, 32, 98]
    assert _links_consistent(new_root)


def test_rotations_keep_inorder_and_undo_each_other():
    root = _sample()
    before_in = list(inorder(root))
    before_pre = list(preorder(root))
    rotated = rotate_left(root)
    assert list(inorder(rotated)) == before_in
    restored = rotate_right(rotated)
    assert list(preorder(restored)) == before_pre
    assert _links_consistent(restored)


def test_rotation_of_subtree_updates_parent_link():
    root = _sample()
    sub = root.left
    new_sub = rotate_left(sub)
    assert root.left is new_sub
    assert new_sub.parent is root
    assert _links_consistent(root)


def test_rotation_without_pivot_returns_none():
    leaf = Node(3)
    assert rotate_left(leaf) is None
    assert rotate_right(leaf) is None
    assert rotate_left(None) is None
    assert rotate_right(None) is None
# arbor

Linked binary trees for Python. The package covers plain binary trees whose
nodes link to their parents, binary search trees, AVL trees and max binary
heaps. It also has the usual measurements and traversals.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Building a tree by hand

`arbor.tree.Node` holds an integer `value` and links named `parent`, `left`
and `right`. `Node.children()` yields the children that exist, left first.

```python
from arbor.tree import Node, insert_left, insert_right, preorder, height, size

root = Node(98)
insert_left(root, 12)
insert_right(root, 402)
insert_left(root.left, 6)

list(preorder(root))   # [98, 12, 6, 402]
height(root)           # 2 (counted in edges; a leaf has height 0)
size(root)             # 4
```

`insert_left` and `insert_right` raise `ValueError` when the parent is `None`.
If the parent already has a child on that side, that child moves under the new
node.

`arbor.tree` has more functions:

- `preorder`, `inorder` and `postorder` are generators of values.
- `depth(node)` gives the number of edges up to the root.
- `leaves(tree)` counts the nodes without children.
- `internal_nodes(tree)` counts the nodes with at least one child.
- `balance(tree)` gives the height of the left subtree minus the height of the right.
- `is_leaf` and `is_root` test a single node.
- `is_full(tree)` is true when every node has zero or two children.
- `is_perfect(tree)` is true when every level is filled.
- `sibling(node)` and `uncle(node)` return a node or `None`.
- `delete(tree)` detaches a subtree from its parent and unlinks every node in it.

The tests `is_full` and `is_perfect` return `False` for an empty tree.

## Shape and structure

`arbor.structure` works on any tree of `Node` objects:

- `levelorder(tree)` yields the values level by level, left to right.
- `is_complete(tree)` tells whether the tree is complete. It is `False` for an empty tree.
- `common_ancestor(first, second)` returns the lowest common ancestor of two nodes, or `None` if they have none. A node counts as its own ancestor.
- `rotate_left(tree)` and `rotate_right(tree)` rotate a subtree and return its new root. If the parent of the old root exists, the parent is relinked to the new root. The result is `None` when there is no child on the side that would move up.

## Binary search trees

```python
from arbor.bst import BinarySearchTree, is_bst

tree = BinarySearchTree([98, 402, 12, 46, 128])
tree.insert(256)       # the new node, or None if 256 was already present
tree.search(46)        # the node holding 46, or None
tree.remove(98)        # True; False if the value was absent
46 in tree             # True
list(tree)             # values in ascending order
len(tree)              # 5
is_bst(tree.root)      # True
```

Duplicate values are ignored on insertion. When a removed node has two
children, it takes the value of its in-order successor. `is_bst` requires
strictly ordered values and returns `False` for an empty tree.

## AVL trees

`AVLTree` is a `BinarySearchTree` that rebalances itself with rotations after
every insertion and removal.

```python
from arbor.avl import AVLTree, is_avl

tree = AVLTree([98, 402, 12, 46, 128, 256, 512, 50])
tree.remove(46)
is_avl(tree.root)      # True

balanced = AVLTree.from_sorted([1, 2, 3, 4, 5, 6, 7])
balanced.root.value    # 4
```

`from_sorted` expects values in ascending order. It roots each subtree at the
middle element of its slice.

## Max heaps

`MaxHeap` keeps its values in a complete binary tree of linked `Node`s. The
largest value is at `heap.root`.

```python
from arbor.heap import MaxHeap, is_heap

heap = MaxHeap([79, 47, 68, 87, 84, 91, 21])
heap.insert(100)
is_heap(heap.root)     # True
heap.extract()         # 100
len(heap)              # 7
heap.to_sorted_list()  # values in descending order; the heap is emptied
```

`extract` raises `IndexError` on an empty heap.

## What it does not do

- The package has no command-line program.
- It has no function for printing or drawing a tree. Use the traversal generators to inspect a tree's contents.
# arvores

Two tree structures for integers: a plain binary search tree
(`arvores.bst.BinarySearchTree`) and a self-balancing AVL tree
(`arvores.avl.AVLTree`). Each tree also has a small front end that reads
numeric commands from standard input.

## Installation

```
pip install .
```

## Library use

### Binary search tree

```python
from arvores.bst import BinarySearchTree

bst = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    bst.insert(value)

list(bst.in_order())      # [20, 30, 40, 50, 70]
list(bst)                 # same as in_order()
bst.height()              # 3
bst.leaf_count()          # 3
bst.successor(40)         # 50
bst.parent(20)            # 30
bst.parent(50)            # None (the root has no parent)
bst.range_sum(25, 60)     # 120
30 in bst                 # True
list(bst.descendants(30)) # [20, 40]
```

The tree is not balanced. Equal values are stored to the right.

- `pre_order()`, `in_order()`, `post_order()` and `reverse_order()` return
  iterators over the values; `reverse_order()` gives them in descending order.
- `successor(value)` and `parent(value)` return `None` when the value is not
  in the tree, or when it has no successor or parent.
- `descendants(value)` yields the left subtree and then the right subtree of
  the node holding `value`, each in order; it yields nothing if the value is
  absent.
- `remove(value)` removes one occurrence; a node with two children takes the
  largest value of its left subtree. Removing a missing value does nothing.
- `multiply_by(factor)` multiplies every stored value in place. The tree
  shape is not changed, so a negative factor leaves the values out of search
  order.
- `clear()` empties the tree; `len(bst)` counts the nodes and an empty tree is
  false.

### AVL tree

```python
from arvores.avl import AVLTree

avl = AVLTree()
for value in (1, 2, 3):
    avl.insert(value)

avl.format_pre_order()    # "[2 | 0][1 | 0][3 | 0]"
list(avl.pre_order())     # [(2, 0), (1, 0), (3, 0)]
list(avl)                 # [1, 2, 3]
avl.max_value()           # 3
```

Each node keeps a balance factor, the height of its right subtree minus the
height of its left. Equal values are stored to the left.

- `pre_order()` yields `(value, balance)` pairs; `format_pre_order()` renders
  them as `[value | balance]` items.
- `remove(value)` removes one occurrence and rebalances; removing a missing
  value does nothing.
- `max_value()` raises `ValueError` on an empty tree.
- `clear()` empties the tree; `len(avl)` counts the nodes and an empty tree is
  false.

## Command-line use

Both commands read whitespace-separated integers from standard input. The
first integer of each command selects an operation; some operations read
further integers as arguments. Code `99` or the end of input stops the
program. Unknown codes are ignored; input that is not an integer stops the
program with an error.

### `arvores-avl`

| Code | Arguments | Effect |
|------|-----------|--------|
| 1 | value | insert |
| 2 | | print pre-order as `[value | balance]` items |
| 3 | value | remove |
| 4 | | clear the tree |
| 99 | | exit |

```
echo "1 10 1 20 1 30 2 99" | arvores-avl
```

prints `[20 | 0][10 | 0][30 | 0]`.

### `arvores-bst`

| Code | Arguments | Effect |
|------|-----------|--------|
| 1 | value | insert |
| 2 / 3 / 4 / 5 | | print pre-order / in-order / post-order / reverse order |
| 6 | | print number of leaves |
| 7 | value | print successor, or `-1` |
| 8 | value | print parent, or `-1` |
| 9 | value | remove |
| 10 | low high | print sum of values in `[low, high]` |
| 11 | | clear the tree |
| 12 | factor | multiply every value by factor |
| 13 | value | print 1 if present, else 0 |
| 14 | value | print descendants in order |
| 15 | | print height |
| 99 | | exit |

```
echo "1 50 1 30 1 70 3 15 99" | arvores-bst
```

prints `[30][50][70]` and then `2`.

The command loops can also be driven from Python with
`arvores.avl_cli.run(stream, out)` and `arvores.bst_cli.run(stream, out)`,
which read from any text stream and write to any text stream.

## Running the tests

```
pip install ".[test]"
pytest
```
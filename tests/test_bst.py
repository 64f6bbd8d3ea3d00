import random

import pytest

from arvores.bst import BinarySearchTree

VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 65]


def _build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def _walk(node):
    if node is None:
        return []
    return [node] + _walk(node.left) + _walk(node.right)


def test_orders_relate():
    tree = _build(VALUES)
    assert list(tree.in_order()) == sorted(VALUES)
    assert list(tree.reverse_order()) == sorted(VALUES, reverse=True)
    pre = list(tree.pre_order())
    post = list(tree.post_order())
    assert pre[0] == VALUES[0]
    assert post[-1] == VALUES[0]
    assert sorted(pre) == sorted(post) == sorted(VALUES)


def test_pre_order_pinned():
    tree = _build([2, 1, 3])
    assert list(tree.pre_order()) == [2, 1, 3]
    assert list(tree.post_order()) == [1, 3, 2]


def test_duplicates_go_right():
    tree = _build([5, 5])
    assert tree.root.right.value == 5
    assert tree.root.left is None


def test_leaf_count_matches_nodes():
    tree = _build(VALUES)
    leaves = [n for n in _walk(tree.root) if n.left is None and n.right is None]
    assert tree.leaf_count() == len(leaves)
    assert BinarySearchTree().leaf_count() == 0


def test_successor():
    tree = _build(VALUES)
    ordered = sorted(VALUES)
    for current, following in zip(ordered, ordered[1:]):
        assert tree.successor(current) == following
    assert tree.successor(max(VALUES)) is None
    assert tree.successor(999) is None


def test_parent():
    tree = _build(VALUES)
    for node in _walk(tree.root):
        for child in (node.left, node.right):
            if child is not None:
                assert tree.parent(child.value) == node.value
    assert tree.parent(VALUES[0]) is None
    assert tree.parent(999) is None
    assert BinarySearchTree().parent(1) is None


@pytest.mark.parametrize("seed", range(5))
def test_remove_keeps_order(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 30) for _ in range(80)]
    tree = _build(values)
    remaining = sorted(values)
    for value in rng.sample(values, 60):
        tree.remove(value)
        remaining.remove(value)
        assert list(tree) == remaining


def test_remove_missing_no_change():
    tree = _build(VALUES)
    tree.remove(999)
    assert list(tree.pre_order()) == list(_build(VALUES).pre_order())


def test_remove_root_uses_left_maximum():
    tree = _build(VALUES)
    tree.remove(50)
    assert tree.root.value == max(v for v in VALUES if v < 50)


def test_range_sum():
    tree = _build(VALUES)
    assert tree.range_sum(30, 60) == sum(v for v in VALUES if 30 <= v <= 60)
    assert tree.range_sum(100, 200) == 0


def test_multiply_by():
    tree = _build(VALUES)
    tree.multiply_by(2)
    assert list(tree) == [2 * v for v in sorted(VALUES)]
    tree.multiply_by(-1)
    assert list(tree) == [-2 * v for v in sorted(VALUES)]


def test_contains():
    tree = _build(VALUES)
    assert all(v in tree for v in VALUES)
    assert 999 not in tree
    assert 1 not in BinarySearchTree()


def test_descendants():
    tree = _build(VALUES)
    assert sorted(tree.descendants(VALUES[0])) == sorted(VALUES[1:])
    assert list(tree.descendants(999)) == []
    leaf = next(n for n in _walk(tree.root) if n.left is None and n.right is None)
    assert list(tree.descendants(leaf.value)) == []


def test_height():
    assert BinarySearchTree().height() == 0
    assert _build([1]).height() == 1
    assert _build(range(10)).height() == 10


def test_deep_chain_no_recursion_error():
    tree = _build(range(5000))
    assert len(tree) == 5000
    assert tree.height() == 5000
    assert list(tree) == list(range(5000))
    tree.remove(0)
    assert 0 not in tree


def test_clear():
    tree = _build(VALUES)
    tree.clear()
    assert not tree
    assert len(tree) == 0
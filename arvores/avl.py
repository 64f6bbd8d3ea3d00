"""Self-balancing AVL tree of integers with balance factors kept per node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class AVLNode:
    """A tree node; ``balance`` is height(right) - height(left)."""

    value: int
    balance: int = 0
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None


def _rotate_left(pivot: AVLNode) -> AVLNode:
    u = pivot.right
    pivot.right = u.left
    u.left = pivot
    if u.balance == 1:
        pivot.balance = 0
        u.balance = 0
    else:
        pivot.balance = 1
        u.balance = -1
    return u


def _rotate_right(pivot: AVLNode) -> AVLNode:
    u = pivot.left
    pivot.left = u.right
    u.right = pivot
    if u.balance == -1:
        pivot.balance = 0
        u.balance = 0
    else:
        pivot.balance = -1
        u.balance = 1
    return u


def _rotate_double_right(pivot: AVLNode) -> AVLNode:
    u = pivot.left
    v = u.right
    u.right = v.left
    pivot.left = v.right
    v.left = u
    v.right = pivot
    if v.balance == 1:
        pivot.balance, u.balance = 0, -1
    elif v.balance == -1:
        pivot.balance, u.balance = 1, 0
    else:
        pivot.balance, u.balance = 0, 0
    v.balance = 0
    return v


def _rotate_double_left(pivot: AVLNode) -> AVLNode:
    u = pivot.right
    v = u.left
    pivot.right = v.left
    u.left = v.right
    v.left = pivot
    v.right = u
    if v.balance == 1:
        pivot.balance, u.balance = -1, 0
    elif v.balance == -1:
        pivot.balance, u.balance = 0, 1
    else:
        pivot.balance, u.balance = 0, 0
    v.balance = 0
    return v


def _rebalance(pivot: AVLNode) -> tuple[AVLNode, bool]:
    """Rotate an unbalanced pivot; the flag tells whether the height is kept."""
    if pivot.balance == 2:
        u = pivot.right
        if u.balance >= 0:
            kept = u.balance == 0
            return _rotate_left(pivot), kept
        return _rotate_double_left(pivot), False
    u = pivot.left
    if u.balance <= 0:
        kept = u.balance == 0
        return _rotate_right(pivot), kept
    return _rotate_double_right(pivot), False


def _insert(node: Optional[AVLNode], value: int) -> tuple[AVLNode, bool]:
    if node is None:
        return AVLNode(value), True
    if value > node.value:
        node.right, grew = _insert(node.right, value)
        if not grew:
            return node, False
        if node.balance == -1:
            node.balance = 0
            return node, False
        if node.balance == 0:
            node.balance = 1
            return node, True
        node.balance = 2
        return _rebalance(node)[0], False
    node.left, grew = _insert(node.left, value)
    if not grew:
        return node, False
    if node.balance == 1:
        node.balance = 0
        return node, False
    if node.balance == 0:
        node.balance = -1
        return node, True
    node.balance = -2
    return _rebalance(node)[0], False


def _after_left_shrunk(node: AVLNode) -> tuple[AVLNode, bool]:
    if node.balance == -1:
        node.balance = 0
        return node, True
    if node.balance == 0:
        node.balance = 1
        return node, False
    node.balance = 2
    new_root, kept = _rebalance(node)
    return new_root, not kept


def _after_right_shrunk(node: AVLNode) -> tuple[AVLNode, bool]:
    if node.balance == 1:
        node.balance = 0
        return node, True
    if node.balance == 0:
        node.balance = -1
        return node, False
    node.balance = -2
    new_root, kept = _rebalance(node)
    return new_root, not kept


def _rightmost(node: AVLNode) -> int:
    while node.right is not None:
        node = node.right
    return node.value


def _remove(node: Optional[AVLNode], value: int) -> tuple[Optional[AVLNode], bool]:
    if node is None:
        return None, False
    if node.value == value:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        node.value = _rightmost(node.left)
        node.left, shrunk = _remove(node.left, node.value)
        return _after_left_shrunk(node) if shrunk else (node, False)
    if value > node.value:
        node.right, shrunk = _remove(node.right, value)
        return _after_right_shrunk(node) if shrunk else (node, False)
    node.left, shrunk = _remove(node.left, value)
    return _after_left_shrunk(node) if shrunk else (node, False)


class AVLTree:
    """An AVL tree of integers; equal values are kept and go to the left."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def insert(self, value: int) -> None:
        """Insert one value, rebalancing as needed."""
        self.root, _ = _insert(self.root, value)

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``; a missing value changes nothing."""
        self.root, _ = _remove(self.root, value)

    def max_value(self) -> int:
        """Return the largest value held."""
        if self.root is None:
            raise ValueError("max_value() of an empty tree")
        return _rightmost(self.root)

    def pre_order(self) -> Iterator[tuple[int, int]]:
        """Yield ``(value, balance)`` pairs in pre-order."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value, node.balance
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def format_pre_order(self) -> str:
        """Render the pre-order walk as ``[value | balance]`` items."""
        return "".join(f"[{value} | {balance}]" for value, balance in self.pre_order())

    def clear(self) -> None:
        """Drop every node."""
        self.root = None

    def __iter__(self) -> Iterator[int]:
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self.root is not None
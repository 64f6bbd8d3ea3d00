"""Unbalanced binary search tree of integers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class BSTNode:
    """A tree node."""

    value: int
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


def _in_order(node: Optional[BSTNode]) -> Iterator[BSTNode]:
    stack: list[BSTNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _remove(root: Optional[BSTNode], value: int) -> Optional[BSTNode]:
    parent: Optional[BSTNode] = None
    node = root
    went_left = False
    while node is not None and node.value != value:
        parent = node
        went_left = value < node.value
        node = node.left if went_left else node.right
    if node is None:
        return root
    if node.left is not None and node.right is not None:
        predecessor = node.left
        while predecessor.right is not None:
            predecessor = predecessor.right
        node.value = predecessor.value
        node.left = _remove(node.left, predecessor.value)
        return root
    child = node.left if node.left is not None else node.right
    if parent is None:
        return child
    if went_left:
        parent.left = child
    else:
        parent.right = child
    return root


class BinarySearchTree:
    """A binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def insert(self, value: int) -> None:
        """Insert one value."""
        new = BSTNode(value)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def _find(self, value: int) -> tuple[Optional[BSTNode], Optional[BSTNode]]:
        parent = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        return node, parent

    def pre_order(self) -> Iterator[int]:
        """Yield values root first, then left and right subtrees."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> Iterator[int]:
        """Yield values in ascending order."""
        return (node.value for node in _in_order(self.root))

    def post_order(self) -> Iterator[int]:
        """Yield values with both subtrees before their root."""
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(result)

    def reverse_order(self) -> Iterator[int]:
        """Yield values right subtree first, i.e. in descending order."""
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node.value
            node = node.left

    def leaf_count(self) -> int:
        """Number of nodes with no children."""
        return sum(
            1 for node in _in_order(self.root) if node.left is None and node.right is None
        )

    def successor(self, value: int) -> Optional[int]:
        """Next value after ``value`` in order, or None if absent or last."""
        node = self.root
        ancestor = None
        while node is not None and node.value != value:
            if value < node.value:
                ancestor = node
                node = node.left
            else:
                node = node.right
        if node is None:
            return None
        if node.right is not None:
            smallest = node.right
            while smallest.left is not None:
                smallest = smallest.left
            return smallest.value
        return ancestor.value if ancestor is not None else None

    def parent(self, value: int) -> Optional[int]:
        """Value of the parent of ``value``, or None if absent or the root."""
        node, parent = self._find(value)
        if node is None or parent is None:
            return None
        return parent.value

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``; a missing value changes nothing."""
        self.root = _remove(self.root, value)

    def range_sum(self, low: int, high: int) -> int:
        """Sum of the values between ``low`` and ``high`` inclusive."""
        return sum(v for v in self.in_order() if low <= v <= high)

    def clear(self) -> None:
        """Drop every node."""
        self.root = None

    def multiply_by(self, factor: int) -> None:
        """Multiply every stored value by ``factor`` in place."""
        for node in _in_order(self.root):
            node.value *= factor

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def descendants(self, value: int) -> Iterator[int]:
        """Yield the left then right subtree of ``value`` in order."""
        node, _ = self._find(value)
        if node is None:
            return
        yield from (n.value for n in _in_order(node.left))
        yield from (n.value for n in _in_order(node.right))

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        levels = 0
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            levels += 1
            for _ in range(len(queue)):
                node = queue.popleft()
                queue.extend(c for c in (node.left, node.right) if c is not None)
        return levels

    def __iter__(self) -> Iterator[int]:
        return self.in_order()

    def __len__(self) -> int:
        return sum(1 for _ in _in_order(self.root))

    def __bool__(self) -> bool:
        return self.root is not None
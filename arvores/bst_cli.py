"""Command loop driving a binary search tree from integer codes on standard input.

Codes: 1 v insert, 2 pre-order, 3 in-order, 4 post-order, 5 reverse,
6 leaf count, 7 v successor, 8 v parent, 9 v remove, 10 a b range sum,
11 clear, 12 v multiply, 13 v search, 14 v descendants, 15 height, 99 quit.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from arvores.bst import BinarySearchTree

_MISSING = -1


def _integers(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for word in line.split():
            yield int(word)


def _bracketed(values: Iterable[int]) -> str:
    return "".join(f"[{v}]" for v in values)


def _or_missing(value: Optional[int]) -> int:
    return _MISSING if value is None else value


def run(stream: TextIO, out: TextIO) -> None:
    """Execute the commands read from ``stream``, writing results to ``out``."""
    tree = BinarySearchTree()
    numbers = _integers(stream)
    traversals = {
        2: tree.pre_order,
        3: tree.in_order,
        4: tree.post_order,
        5: tree.reverse_order,
    }
    for code in numbers:
        if code == 99:
            break
        if code in traversals:
            out.write(_bracketed(traversals[code]()) + "\n")
        elif code == 6:
            out.write(f"{tree.leaf_count()}\n")
        elif code == 11:
            tree.clear()
        elif code == 15:
            out.write(f"{tree.height()}\n")
        elif code in (1, 7, 8, 9, 10, 12, 13, 14):
            value = next(numbers, None)
            if value is None:
                break
            if code == 1:
                tree.insert(value)
            elif code == 7:
                out.write(f"{_or_missing(tree.successor(value))}\n")
            elif code == 8:
                out.write(f"{_or_missing(tree.parent(value))}\n")
            elif code == 9:
                tree.remove(value)
            elif code == 10:
                high = next(numbers, None)
                if high is None:
                    break
                out.write(f"{tree.range_sum(value, high)}\n")
            elif code == 12:
                tree.multiply_by(value)
            elif code == 13:
                out.write(f"{int(value in tree)}\n")
            else:
                out.write(_bracketed(tree.descendants(value)) + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command loop on standard input and output."""
    parser = argparse.ArgumentParser(description="Binary search tree command loop")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0
"""Command loop driving an AVL tree from integer codes on standard input.

Codes: 1 v insert, 2 print pre-order, 3 v remove, 4 clear, 99 quit.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, Sequence, TextIO

from arvores.avl import AVLTree


def _integers(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for word in line.split():
            yield int(word)


def run(stream: TextIO, out: TextIO) -> None:
    """Execute the commands read from ``stream``, writing results to ``out``."""
    tree = AVLTree()
    numbers = _integers(stream)
    for code in numbers:
        if code == 1:
            value = next(numbers, None)
            if value is None:
                break
            tree.insert(value)
        elif code == 2:
            out.write(tree.format_pre_order() + "\n")
        elif code == 3:
            value = next(numbers, None)
            if value is None:
                break
            tree.remove(value)
        elif code == 4:
            tree.clear()
        elif code == 99:
            break


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command loop on standard input and output."""
    parser = argparse.ArgumentParser(description="AVL tree command loop")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0
import io
import sys

import pytest

from arvores.avl import AVLTree
from arvores.avl_cli import main, run


def _run(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_insert_and_print():
    assert _run("1 10\n1 20\n1 30\n2\n99\n") == "[20 | 0][10 | 0][30 | 0]\n"


def test_output_matches_tree():
    values = [8, 3, 12, 1, 5, 9, 15, 4]
    commands = " ".join(f"1 {v}" for v in values) + " 3 12 2 99"
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    tree.remove(12)
    assert _run(commands) == tree.format_pre_order() + "\n"


def test_clear_then_print_empty_line():
    assert _run("1 1 1 2 4 2 99") == "\n"


def test_stops_at_99():
    assert _run("1 1 99 2") == ""


def test_stops_at_end_of_input():
    assert _run("1 5 2") == "[5 | 0]\n"


def test_unknown_codes_ignored():
    assert _run("7 1 5 42 2 99") == "[5 | 0]\n"


def test_non_integer_raises():
    with pytest.raises(ValueError):
        _run("1 x")


def test_main_uses_stdio(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 2 1 1 2 99\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "[2 | -1][1 | 0]\n"
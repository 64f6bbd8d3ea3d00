"""Binary search tree and AVL tree of integers, with command-driven front ends."""

__version__ = "0.1.0"
__all__ = ["avl", "avl_cli", "bst", "bst_cli"]
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arvores"
version = "0.1.0"
description = "Binary search tree and AVL tree of integers with command-driven front ends"
requires-python = ">=3.10"
dependencies = []
keywords = ["bst", "avl", "binary search tree", "balanced tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arvores-avl = "arvores.avl_cli:main"
arvores-bst = "arvores.bst_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arvores"]

[tool.pytest.ini_options]
addopts = "-ra"

"""Core building blocks for SearchTreeLib.

This package contains the node type, the construction helpers, the
traversal strategies and the exception hierarchy.
"""

from .errors import (
    SearchTreeError,
    DuplicateValueError,
    NotFoundError,
    InvalidOperandError,
    EmptyTreeError,
    ConfigurationError,
)
from .node import BSTNode
from .builder import prepare_values, build_balanced, build_from_iterable
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    parse_order,
)

__all__ = [
    "SearchTreeError",
    "DuplicateValueError",
    "NotFoundError",
    "InvalidOperandError",
    "EmptyTreeError",
    "ConfigurationError",
    "BSTNode",
    "prepare_values",
    "build_balanced",
    "build_from_iterable",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "parse_order",
]

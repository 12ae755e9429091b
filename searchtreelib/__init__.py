"""SearchTreeLib - Binary Search Trees Balanced on Demand.

SearchTreeLib provides a binary search tree over unique, orderable
scalar values. Trees are built at minimal height from any iterable,
mutated with insert() and delete(), and rebuilt with rebalance() when
the root's subtrees drift apart.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from searchtreelib import BinarySearchTree

    tree = BinarySearchTree([1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324])
    tree.insert(150)
    tree.rebalance()
    print(tree.inorder())
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core.errors import (
    SearchTreeError,
    DuplicateValueError,
    NotFoundError,
    InvalidOperandError,
    EmptyTreeError,
    ConfigurationError,
)
from .core.node import BSTNode
from .config import (
    TraversalOrder,
    DuplicatePolicy,
    RenderConfig,
    TreeConfig,
)
from .tree import BinarySearchTree
from .api import (
    build_tree,
    traverse_tree,
    traverse_with_depth,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    "BinarySearchTree",
    "BSTNode",
    # Errors
    "SearchTreeError",
    "DuplicateValueError",
    "NotFoundError",
    "InvalidOperandError",
    "EmptyTreeError",
    "ConfigurationError",
    # Config
    "TraversalOrder",
    "DuplicatePolicy",
    "RenderConfig",
    "TreeConfig",
    # API
    "build_tree",
    "traverse_tree",
    "traverse_with_depth",
    "get_tree_stats",
]

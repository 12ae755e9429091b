"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of
use in simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from ._common.config import TraversalOrder, TreeConfig
from .core.traverser import LevelOrderTraverser
from .tree import BinarySearchTree


def build_tree(values: Iterable[Any] = (), **kwargs) -> BinarySearchTree:
    """Simple interface for building a tree.

    Args:
        values: Orderable values in any order, duplicates allowed
        **kwargs: TreeConfig fields (duplicate_policy, on_duplicate, render)

    Returns:
        Minimal-height BinarySearchTree over the unique values

    Example:
        >>> tree = build_tree([5, 3, 8, 3])
        >>> tree.level_order()
        [5, 3, 8]
    """
    config = TreeConfig(**kwargs) if kwargs else None
    return BinarySearchTree(values, config=config)


def traverse_tree(tree: BinarySearchTree,
                  order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> Iterator[Any]:
    """Iterate a tree's values in the given order.

    Args:
        tree: Tree to walk
        order: Traversal order (preorder, inorder, postorder, level)

    Yields:
        Values in traversal order

    Example:
        >>> for value in traverse_tree(tree, "postorder"):
        ...     print(value)
    """
    yield from tree.traverse(order)


def traverse_with_depth(tree: BinarySearchTree,
                        order: Union[TraversalOrder, str] = TraversalOrder.LEVEL_ORDER,
                        max_depth: Optional[int] = None,
                        min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
    """Iterate ``(value, depth)`` pairs, root at depth 0.

    Args:
        tree: Tree to walk
        order: Traversal order (preorder, inorder, postorder, level)
        max_depth: Deepest level to visit (None = unlimited)
        min_depth: Shallowest level to yield

    Raises:
        ValueError: If the order or the depth window is invalid

    Example:
        >>> for value, depth in traverse_with_depth(tree, max_depth=2):
        ...     print("  " * depth + str(value))
    """
    return tree.traverse_with_depth(order, max_depth=max_depth, min_depth=min_depth)


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to inspect

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree(range(7)))
        >>> stats['height'], stats['leaf_nodes']
        (2, 4)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': tree.height(),
        'is_balanced': tree.is_balanced(),
        'depths': {},
        'min_value': None,
        'max_value': None,
    }

    for node, depth in LevelOrderTraverser().traverse(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    if tree:
        stats['min_value'] = tree.min_value()
        stats['max_value'] = tree.max_value()

    return stats

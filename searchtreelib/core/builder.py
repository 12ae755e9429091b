"""Minimal-height construction for SearchTreeLib.

Both the BinarySearchTree constructor and rebalance() go through here:
values are deduplicated, sorted and then split recursively around the
middle index so every subtree is as shallow as possible.
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence

from .node import BSTNode

logger = logging.getLogger(__name__)


def prepare_values(values: Iterable[Any]) -> List[Any]:
    """Deduplicate and sort input values.

    Args:
        values: Any iterable of orderable values, in any order

    Returns:
        New list of unique values in ascending order
    """
    return sorted(set(values))


def build_balanced(values: Sequence[Any],
                   start: int = 0,
                   end: Optional[int] = None) -> Optional[BSTNode]:
    """Build a height-balanced subtree from a sorted slice.

    The node for ``values[(start + end) // 2]`` becomes the subtree root,
    so even-length ranges pick the lower middle. Left and right subtrees
    are built from ``[start, mid - 1]`` and ``[mid + 1, end]``.

    Args:
        values: Sorted sequence without duplicates
        start: First index of the range (inclusive)
        end: Last index of the range (inclusive), defaults to the last index

    Returns:
        Root node of the subtree, or None for an empty range
    """
    if end is None:
        end = len(values) - 1

    if start > end:
        return None

    mid = (start + end) // 2
    node = BSTNode(values[mid])

    node.left = build_balanced(values, start, mid - 1)
    node.right = build_balanced(values, mid + 1, end)

    return node


def build_from_iterable(values: Iterable[Any]) -> Optional[BSTNode]:
    """Prepare raw input and build a minimal-height tree from it.

    Args:
        values: Unsorted input, duplicates allowed

    Returns:
        Root node, or None if the input was empty
    """
    prepared = prepare_values(values)
    logger.debug("Building tree from %d unique values", len(prepared))
    return build_balanced(prepared)

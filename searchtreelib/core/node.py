"""BSTNode for SearchTreeLib.

The BSTNode is intentionally kept simple - it's a data container.
Ordering, insertion and removal logic live in BinarySearchTree, which
owns the root node; every other node is owned by its parent.
"""

from typing import Any, Optional

from .errors import InvalidOperandError


class BSTNode:
    """A single vertex of a binary search tree.

    Holds a value and links to at most two children. Values in the left
    subtree are smaller than ``value``, values in the right subtree are
    larger. The node itself does not enforce ordering - that is the tree's
    job - but it does guarantee that a child link is always either None
    or another BSTNode.
    """

    __slots__ = ('value', '_left', '_right')

    def __init__(self, value: Any):
        """Create a leaf node.

        Args:
            value: Orderable scalar stored in the node
        """
        self.value = value
        self._left: Optional['BSTNode'] = None
        self._right: Optional['BSTNode'] = None

    @staticmethod
    def _check_link(node: Any, side: str) -> Optional['BSTNode']:
        """Reject anything that is not a BSTNode or None."""
        if node is not None and not isinstance(node, BSTNode):
            raise InvalidOperandError(
                f"{side} child must be a BSTNode or None, "
                f"got {type(node).__name__}"
            )
        return node

    @property
    def left(self) -> Optional['BSTNode']:
        """Left child (smaller values) or None."""
        return self._left

    @left.setter
    def left(self, node: Optional['BSTNode']) -> None:
        self._left = self._check_link(node, "left")

    @property
    def right(self) -> Optional['BSTNode']:
        """Right child (larger values) or None."""
        return self._right

    @right.setter
    def right(self, node: Optional['BSTNode']) -> None:
        self._right = self._check_link(node, "right")

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self._left is None and self._right is None

    def __repr__(self) -> str:
        return f"BSTNode(value={self.value!r})"

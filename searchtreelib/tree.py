"""BinarySearchTree for SearchTreeLib.

The tree owns its root node and every other node is owned by its
parent, so the structure is a strict hierarchy with no shared nodes.
Balancing is on demand: insert() and delete() never restructure the
tree, rebalance() rebuilds it from its in-order values when the root's
subtrees drift apart in height.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from ._common.config import DuplicatePolicy, TraversalOrder, TreeConfig
from .core.builder import build_balanced, build_from_iterable
from .core.errors import (
    ConfigurationError,
    DuplicateValueError,
    EmptyTreeError,
    InvalidOperandError,
    NotFoundError,
)
from .core.node import BSTNode
from .core.traverser import (
    InOrderTraverser,
    LevelOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    create_traverser,
)
from . import render

logger = logging.getLogger(__name__)

# Default for height(): distinguishes "use the root" from an explicit None
_ROOT = object()


class BinarySearchTree:
    """Binary search tree over unique, orderable scalar values.

    Built from any iterable: input is deduplicated, sorted and arranged
    into a minimal-height tree. After that the tree is mutated with
    insert() and delete(), and can be restored to minimal height with
    rebalance().

    Example:
        >>> tree = BinarySearchTree([1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324])
        >>> tree.inorder()
        [1, 3, 4, 5, 7, 8, 9, 23, 67, 324, 6345]
        >>> tree.delete(7)
        True
        >>> 7 in tree
        False
    """

    def __init__(self, values: Iterable[Any] = (), config: Optional[TreeConfig] = None):
        """Create a tree from input values.

        Args:
            values: Orderable values in any order, duplicates allowed
            config: Tree behavior settings (defaults to TreeConfig())

        Raises:
            ConfigurationError: If the config fails validation
        """
        self.config = config or TreeConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self._root: Optional[BSTNode] = None
        self.build(values)

    @property
    def root(self) -> Optional[BSTNode]:
        """Top node of the tree, or None when empty."""
        return self._root

    # Construction

    def build(self, values: Iterable[Any]) -> None:
        """Replace the tree's contents with a minimal-height tree of values."""
        self._root = build_from_iterable(values)

    def clear(self) -> None:
        """Remove every node."""
        self._root = None

    # Mutation

    def insert(self, value: Any) -> bool:
        """Insert a value as a new leaf.

        Descends left for smaller values and right for larger ones, and
        attaches a new node at the first empty link. The tree is not
        rebalanced.

        Args:
            value: Value to insert

        Returns:
            True if a node was added, False if the value already existed

        Raises:
            DuplicateValueError: If the value exists and the duplicate
                policy is RAISE
            InvalidOperandError: If the value is neither less than,
                greater than nor equal to a node value (e.g. NaN)
        """
        if self._root is None:
            self._root = BSTNode(value)
            return True

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BSTNode(value)
                    return True
                node = node.right
            elif value == node.value:
                self._report_duplicate(value)
                return False
            else:
                raise InvalidOperandError(
                    f"{value!r} cannot be ordered against {node.value!r}"
                )

    def _report_duplicate(self, value: Any) -> None:
        """Report a duplicate insert according to the configured policy."""
        if self.config.on_duplicate is not None:
            self.config.on_duplicate(value)

        policy = self.config.duplicate_policy
        if policy == DuplicatePolicy.RAISE:
            raise DuplicateValueError(value)
        if policy == DuplicatePolicy.WARN:
            logger.warning("Node with value %r already exists", value)

    def delete(self, value: Any) -> bool:
        """Remove a value from the tree.

        A node with two children takes its in-order successor's value,
        and the successor is then removed from the right subtree, so at
        most one node is unlinked per call. The tree is not rebalanced.

        Args:
            value: Value to remove

        Returns:
            True if the value was removed, False if it was not present
        """
        parent: Optional[BSTNode] = None
        node = self._root
        while node is not None:
            if value < node.value:
                parent, node = node, node.left
            elif value > node.value:
                parent, node = node, node.right
            elif value == node.value:
                break
            else:
                node = None

        if node is None:
            logger.debug("Delete of %r skipped: value not in tree", value)
            return False

        if node.left is not None and node.right is not None:
            # Take the in-order successor's value, then unlink the successor
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.value = successor.value
            parent, node = successor_parent, successor

        # Leaf or right child only: replaced by the right subtree,
        # left child only: replaced by the left subtree
        replacement = node.right if node.left is None else node.left
        self._replace_link(parent, node, replacement)
        return True

    def _replace_link(self, parent: Optional[BSTNode], node: BSTNode,
                      replacement: Optional[BSTNode]) -> None:
        """Point the link that owns node at replacement instead."""
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

    @staticmethod
    def _min_node(node: BSTNode) -> BSTNode:
        """Leftmost node of a subtree."""
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _max_node(node: BSTNode) -> BSTNode:
        """Rightmost node of a subtree."""
        while node.right is not None:
            node = node.right
        return node

    # Lookup

    def find(self, value: Any) -> BSTNode:
        """Locate the node holding a value.

        Args:
            value: Value to search for

        Returns:
            The node whose value equals ``value``

        Raises:
            NotFoundError: If the value is not in the tree
        """
        node = self._root

        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            elif value == node.value:
                return node
            else:
                break

        raise NotFoundError(value)

    def contains(self, value: Any) -> bool:
        """Check membership without raising."""
        try:
            self.find(value)
        except NotFoundError:
            return False
        return True

    def min_value(self) -> Any:
        """Smallest value in the tree.

        Raises:
            EmptyTreeError: If the tree has no nodes
        """
        if self._root is None:
            raise EmptyTreeError("min_value() on an empty tree")
        return self._min_node(self._root).value

    def max_value(self) -> Any:
        """Largest value in the tree.

        Raises:
            EmptyTreeError: If the tree has no nodes
        """
        if self._root is None:
            raise EmptyTreeError("max_value() on an empty tree")
        return self._max_node(self._root).value

    # Traversal

    def preorder(self) -> List[Any]:
        """Values in pre-order (node, left, right)."""
        return [node.value for node, _ in PreOrderTraverser().traverse(self._root)]

    def inorder(self) -> List[Any]:
        """Values in in-order (left, node, right), i.e. ascending."""
        return [node.value for node, _ in InOrderTraverser().traverse(self._root)]

    def postorder(self) -> List[Any]:
        """Values in post-order (left, right, node)."""
        return [node.value for node, _ in PostOrderTraverser().traverse(self._root)]

    def level_order(self) -> List[Any]:
        """Values in breadth-first order, left to right within a level."""
        return [node.value for node, _ in LevelOrderTraverser().traverse(self._root)]

    def traverse(self, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> Iterator[Any]:
        """Lazily iterate values in the given order.

        Args:
            order: TraversalOrder or its name (preorder, inorder, postorder, level)

        Raises:
            ValueError: If the order name is not recognized
        """
        traverser = create_traverser(order)
        return (node.value for node, _ in traverser.traverse(self._root))

    def traverse_with_depth(self,
                            order: Union[TraversalOrder, str] = TraversalOrder.LEVEL_ORDER,
                            max_depth: Optional[int] = None,
                            min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Lazily iterate ``(value, depth)`` pairs in the given order.

        Args:
            order: TraversalOrder or its name (preorder, inorder, postorder, level)
            max_depth: Deepest level to visit (None = unlimited). Nodes
                below it are neither yielded nor explored.
            min_depth: Shallowest level to yield; shallower nodes are
                still walked through but not yielded

        Raises:
            ValueError: If the order name is not recognized or the depth
                window is invalid
        """
        if min_depth < 0:
            raise ValueError(f"min_depth cannot be negative, got {min_depth}")
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth cannot be negative, got {max_depth}")
        if max_depth is not None and max_depth < min_depth:
            raise ValueError(
                f"max_depth cannot be less than min_depth ({max_depth} < {min_depth})"
            )

        traverser = create_traverser(order)
        return ((node.value, depth)
                for node, depth in traverser.traverse(self._root, max_depth, min_depth))

    # Shape queries

    def height(self, node: Optional[BSTNode] = _ROOT) -> int:
        """Number of edges on the longest path from node down to a leaf.

        Args:
            node: Subtree root, defaults to the tree's root. None is an
                absent subtree and has height -1, so a leaf has height 0.

        Returns:
            Height in edges (-1 for an empty tree)

        Raises:
            InvalidOperandError: If node is neither a BSTNode nor None
        """
        if node is _ROOT:
            node = self._root
        elif node is not None and not isinstance(node, BSTNode):
            raise InvalidOperandError(
                f"height() expects a BSTNode or None, got {type(node).__name__}"
            )
        # Deepest level reached by a breadth-first walk; iterative on any shape
        return max((depth for _, depth in LevelOrderTraverser().traverse(node)), default=-1)

    def depth(self, target: Union[BSTNode, Any]) -> int:
        """Number of edges from the root down to a node.

        The tree is re-descended from the root comparing values, so a
        node is matched by its value rather than by identity.

        Args:
            target: A BSTNode or a raw value

        Returns:
            Depth where root = 0

        Raises:
            NotFoundError: If no node with that value is in the tree
        """
        value = target.value if isinstance(target, BSTNode) else target

        node = self._root
        depth = 0
        while node is not None and node.value != value:
            node = node.right if value > node.value else node.left
            depth += 1

        if node is None:
            raise NotFoundError(value, f"Invalid node: {value!r} is not in the tree")
        return depth

    def is_balanced(self) -> bool:
        """Check whether the root's subtrees differ in height by at most one.

        Only the root's two subtrees are compared; deeper nodes may be
        lopsided. An empty tree and a single node are balanced.
        """
        if self._root is None:
            return True

        left_height = self.height(self._root.left)
        right_height = self.height(self._root.right)
        return abs(left_height - right_height) <= 1

    def rebalance(self) -> bool:
        """Rebuild the tree at minimal height if it is not balanced.

        Returns:
            True if the tree was rebuilt, False if it was already balanced
        """
        if self.is_balanced():
            return False

        values = self.inorder()
        logger.debug(
            "Rebalancing %d nodes (height %d)", len(values), self.height()
        )
        self._root = build_balanced(values)
        return True

    # Display

    def render(self) -> str:
        """Sideways text drawing of the tree (empty string when empty)."""
        return render.render_tree(self._root, self.config.render)

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        """Print the sideways drawing to a stream (stdout by default)."""
        render.print_tree(self._root, self.config.render, file=file)

    # Python protocols

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        return self.traverse(TraversalOrder.IN_ORDER)

    def __len__(self) -> int:
        count = 0
        for _ in LevelOrderTraverser().traverse(self._root):
            count += 1
        return count

    def __bool__(self) -> bool:
        return self._root is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.inorder()!r})"

"""Tree traversal strategies for SearchTreeLib.

Traversers implement the different orders for walking a binary search
tree. They all yield ``(node, depth)`` tuples, where depth is counted in
edges from the node the traversal started at.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Type, Union

from .._common.config import TraversalOrder
from .node import BSTNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers only read child links; they never modify the tree.
    Depth filtering works the same way for every order: nodes outside
    ``[min_depth, max_depth]`` are not yielded, and nothing below
    ``max_depth`` is explored.
    """

    order: TraversalOrder

    @abstractmethod
    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal: node, left subtree, right subtree.

    Every node is emitted before any of its descendants. Rebuilding a
    tree by inserting values in this order reproduces its shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return

        # Explicit stack: degenerate trees can be deeper than the recursion limit
        stack: List[Tuple[BSTNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            # Right pushed first so the left subtree is popped first
            if self._should_explore(depth, max_depth):
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal: left subtree, node, right subtree.

    For a valid BST this yields values in strictly ascending order,
    which is what rebalance() relies on.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return

        # Entries are (node, depth, expanded); an expanded node is emitted when popped
        stack: List[Tuple[BSTNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            explore = self._should_explore(depth, max_depth)

            if explore and node.right is not None:
                stack.append((node.right, depth + 1, False))
            stack.append((node, depth, True))
            if explore and node.left is not None:
                stack.append((node.left, depth + 1, False))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal: left subtree, right subtree, node.

    Every node is emitted after all of its descendants. Good for
    teardown or computing subtree aggregates bottom-up.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return

        stack: List[Tuple[BSTNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                if node.right is not None:
                    stack.append((node.right, depth + 1, False))
                if node.left is not None:
                    stack.append((node.left, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N before visiting nodes at depth N+1,
    left to right within a level. Iterative, so it is not limited by
    the recursion limit on degenerate trees.
    """

    order = TraversalOrder.LEVEL_ORDER

    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return

        # Queue stores (node, depth) tuples
        queue: Deque[Tuple[BSTNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                if node.left is not None:
                    queue.append((node.left, depth + 1))
                if node.right is not None:
                    queue.append((node.right, depth + 1))


_TRAVERSERS = {
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}

_ORDER_ALIASES = {
    'pre': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'in': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'levelorder': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or a name.

    Args:
        order: TraversalOrder or one of its string aliases

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    key = order.lower() if isinstance(order, str) else str(order)
    if key in _ORDER_ALIASES:
        return _ORDER_ALIASES[key]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


def create_traverser(order: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder or its name (preorder, inorder, postorder, level)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If order name is not recognized
    """
    traverser_cls: Type[TreeTraverser] = _TRAVERSERS[parse_order(order)]
    return traverser_cls()

"""Test fixtures for SearchTreeLib consumers.

These fixtures check structural invariants from the outside, so test
suites can verify a tree after arbitrary mutation sequences without
reaching into private attributes.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..core.node import BSTNode
from ..tree import BinarySearchTree

_UNBOUNDED = object()


class TreeInvariantChecker:
    """Public test fixture for BST invariant verification.

    Example:
        tree = BinarySearchTree([5, 2, 8])
        tree.insert(7)
        checker = TreeInvariantChecker(tree)

        assert checker.violations() == []
        assert checker.get_summary()['node_count'] == 4
    """

    def __init__(self, tree: BinarySearchTree):
        """Initialize with the tree under test.

        Args:
            tree: BinarySearchTree to inspect
        """
        self._tree = tree

    def violations(self) -> List[str]:
        """Collect every ordering violation in the tree.

        Each node is checked against the open interval its ancestors
        allow, which also catches duplicates.

        Returns:
            Human-readable descriptions (empty if the tree is valid)
        """
        problems: List[str] = []

        # Iterative so degenerate trees don't hit the recursion limit
        stack: List[Tuple[Optional[BSTNode], Any, Any]] = [(self._tree.root, _UNBOUNDED, _UNBOUNDED)]

        while stack:
            node, low, high = stack.pop()
            if node is None:
                continue

            if low is not _UNBOUNDED and not node.value > low:
                problems.append(f"{node.value!r} is not greater than ancestor {low!r}")
            if high is not _UNBOUNDED and not node.value < high:
                problems.append(f"{node.value!r} is not less than ancestor {high!r}")

            stack.append((node.left, low, node.value))
            stack.append((node.right, node.value, high))

        return problems

    def is_valid(self) -> bool:
        """Check the ordering invariant holds everywhere."""
        return not self.violations()

    def is_minimal_height(self) -> bool:
        """Check the height equals the minimum possible for the node count."""
        count = len(self._tree)
        if count == 0:
            return self._tree.height() == -1
        return self._tree.height() == count.bit_length() - 1

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - node_count: Number of nodes
            - height: Height of the root (-1 when empty)
            - is_balanced: Result of the root-level balance check
            - is_valid: Whether the ordering invariant holds
            - values: In-order values
        """
        return {
            'node_count': len(self._tree),
            'height': self._tree.height(),
            'is_balanced': self._tree.is_balanced(),
            'is_valid': self.is_valid(),
            'values': self._tree.inorder(),
        }


def assert_valid_bst(tree: BinarySearchTree) -> None:
    """Assert that a tree satisfies the BST ordering invariant.

    Raises:
        AssertionError: Listing every violation found
    """
    problems = TreeInvariantChecker(tree).violations()
    assert not problems, "BST invariant violated: " + "; ".join(problems)

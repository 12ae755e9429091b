"""Configuration system for SearchTreeLib.

This module defines how users tune a tree's behavior: how duplicate
inserts are reported, which traversal order to use and how the
diagnostic rendering looks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalOrder(Enum):
    """Order in which tree values are visited.

    The three depth-first orders differ only in when a node is emitted
    relative to its subtrees. Level order is breadth-first.
    """
    PRE_ORDER = "preorder"      # Node before its subtrees
    IN_ORDER = "inorder"        # Left subtree, node, right subtree
    POST_ORDER = "postorder"    # Node after its subtrees
    LEVEL_ORDER = "level"       # Breadth-first, top to bottom


class DuplicatePolicy(Enum):
    """What insert() does when the value is already in the tree.

    The tree is never modified by a duplicate insert; the policy only
    controls how the condition is reported.
    """
    WARN = "warn"       # Log a warning, return False
    IGNORE = "ignore"   # Return False silently
    RAISE = "raise"     # Raise DuplicateValueError


@dataclass
class RenderConfig:
    """Connectors used by the sideways tree rendering."""

    vertical: str = "│   "       # Prefix continuation under a left-side parent
    blank: str = "    "          # Prefix continuation with no line to draw
    left_branch: str = "└── "    # Connector for a left child (or the root)
    right_branch: str = "┌── "   # Connector for a right child

    def validate(self) -> List[str]:
        """Validate that the connectors line up.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        widths = {
            len(self.vertical),
            len(self.blank),
            len(self.left_branch),
            len(self.right_branch),
        }
        if len(widths) != 1:
            errors.append("render connectors must all have the same width")

        if self.blank.strip():
            errors.append("blank connector must be whitespace")

        return errors


@dataclass
class TreeConfig:
    """Complete configuration for a BinarySearchTree.

    Defaults reproduce the classic behavior: duplicates are reported with
    a warning and otherwise ignored.
    """

    # Duplicate handling
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.WARN
    on_duplicate: Optional[Callable[[Any], None]] = None  # Called before the policy applies

    # Diagnostic rendering
    render: RenderConfig = field(default_factory=RenderConfig)

    @classmethod
    def strict(cls) -> 'TreeConfig':
        """Create config that raises on duplicate inserts."""
        return cls(duplicate_policy=DuplicatePolicy.RAISE)

    @classmethod
    def quiet(cls) -> 'TreeConfig':
        """Create config that drops duplicate inserts without logging."""
        return cls(duplicate_policy=DuplicatePolicy.IGNORE)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.duplicate_policy, DuplicatePolicy):
            errors.append(
                f"duplicate_policy must be a DuplicatePolicy, got {self.duplicate_policy!r}"
            )

        if self.on_duplicate is not None and not callable(self.on_duplicate):
            errors.append("on_duplicate must be callable")

        if not isinstance(self.render, RenderConfig):
            errors.append("render must be a RenderConfig")
        else:
            errors.extend(self.render.validate())

        return errors

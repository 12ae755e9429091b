"""Diagnostic text rendering for SearchTreeLib.

Draws a tree sideways: the right subtree above its parent, the left
subtree below, one line per node. For the tree built from [1, 2, 3]:

    │   ┌── 3
    └── 2
        └── 1

This is a display convenience only; nothing in the library parses it.
"""

import sys
from typing import List, Optional, TextIO, Tuple

from ._common.config import RenderConfig
from .core.node import BSTNode


def render_lines(root: Optional[BSTNode],
                 config: Optional[RenderConfig] = None) -> List[str]:
    """Render a subtree as a list of lines, top to bottom.

    Args:
        root: Subtree to draw (None gives no lines)
        config: Connector strings, defaults to box-drawing characters

    Returns:
        One line per node
    """
    config = config or RenderConfig()
    lines: List[str] = []
    if root is None:
        return lines

    # Entries are (node, prefix, is_left, expanded); the root is drawn like
    # a left child. Reverse in-order: right subtree, node, left subtree.
    stack: List[Tuple[BSTNode, str, bool, bool]] = [(root, "", True, False)]

    while stack:
        node, prefix, is_left, expanded = stack.pop()

        if expanded:
            connector = config.left_branch if is_left else config.right_branch
            lines.append(f"{prefix}{connector}{node.value}")
            continue

        if node.left is not None:
            stack.append((node.left, prefix + (config.blank if is_left else config.vertical), True, False))
        stack.append((node, prefix, is_left, True))
        if node.right is not None:
            stack.append((node.right, prefix + (config.vertical if is_left else config.blank), False, False))

    return lines


def render_tree(root: Optional[BSTNode],
                config: Optional[RenderConfig] = None) -> str:
    """Render a subtree as a single string (empty for an empty tree)."""
    return "\n".join(render_lines(root, config))


def print_tree(root: Optional[BSTNode],
               config: Optional[RenderConfig] = None,
               file: Optional[TextIO] = None) -> None:
    """Write the rendering of a subtree to a stream.

    Args:
        root: Subtree to draw
        config: Connector strings
        file: Output stream, defaults to sys.stdout
    """
    stream = file if file is not None else sys.stdout
    for line in render_lines(root, config):
        print(line, file=stream)

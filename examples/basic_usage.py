#!/usr/bin/env python3
"""
Basic usage example for SearchTreeLib.

This example demonstrates:
- Building a tree from unsorted input with duplicates
- The four traversal orders
- Unbalancing a tree with inserts and restoring it with rebalance()
"""

import logging
import random
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import BinarySearchTree, get_tree_stats


def show(tree: BinarySearchTree) -> None:
    """Print the tree, its balance and its traversals."""
    tree.print_tree()
    print("Tree is balanced." if tree.is_balanced() else "Tree is not balanced.")

    print(f"Pre order traversal: \n{', '.join(map(str, tree.preorder()))}")
    print(f"Post order traversal: \n{', '.join(map(str, tree.postorder()))}")
    print(f"In order traversal: \n{', '.join(map(str, tree.inorder()))}")
    print(f"Level order traversal: \n{', '.join(map(str, tree.level_order()))}")
    print("-" * 50)


def main():
    """Exercise the public API with sample data."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    tree = BinarySearchTree([1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324])
    show(tree)

    # Add seven random numbers between 100 and 199
    for _ in range(7):
        tree.insert(random.randint(100, 199))

    tree.print_tree()
    print("Tree is balanced." if tree.is_balanced() else "Tree is not balanced.")

    tree.rebalance()
    show(tree)

    stats = get_tree_stats(tree)
    print(f"Nodes: {stats['total_nodes']}, height: {stats['height']}, "
          f"leaves: {stats['leaf_nodes']}")


if __name__ == "__main__":
    main()

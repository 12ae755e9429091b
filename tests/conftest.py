"""Shared pytest fixtures for the SearchTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import BinarySearchTree


# Unsorted, with duplicates: 11 unique values
SAMPLE_VALUES = [1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324]
SAMPLE_SORTED = [1, 3, 4, 5, 7, 8, 9, 23, 67, 324, 6345]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests excluded by run_tests.py")


@pytest.fixture
def sample_tree() -> BinarySearchTree:
    """Tree built from SAMPLE_VALUES.

    Structure:
                 8
            /         \\
           4           67
         /   \\       /    \\
        1     5     9     324
         \\     \\     \\      \\
          3     7    23    6345
    """
    return BinarySearchTree(SAMPLE_VALUES)


@pytest.fixture
def empty_tree() -> BinarySearchTree:
    return BinarySearchTree()

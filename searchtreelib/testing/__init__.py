"""Testing utilities for SearchTreeLib consumers."""

from .fixtures import TreeInvariantChecker, assert_valid_bst

__all__ = ['TreeInvariantChecker', 'assert_valid_bst']

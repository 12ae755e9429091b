"""Tests for the functional high-level API."""

import logging

import pytest

from searchtreelib import (
    BinarySearchTree,
    DuplicatePolicy,
    DuplicateValueError,
    TraversalOrder,
    build_tree,
    get_tree_stats,
    traverse_tree,
    traverse_with_depth,
)


def test_build_tree_defaults():
    tree = build_tree([5, 3, 8, 3])
    assert isinstance(tree, BinarySearchTree)
    assert tree.level_order() == [5, 3, 8]
    assert tree.config.duplicate_policy is DuplicatePolicy.WARN


def test_build_tree_passes_config_options():
    tree = build_tree([1, 2], duplicate_policy=DuplicatePolicy.RAISE)
    with pytest.raises(DuplicateValueError):
        tree.insert(1)


def test_build_tree_empty():
    assert build_tree().root is None


@pytest.mark.parametrize("order,expected", [
    ("preorder", [2, 1, 3]),
    ("inorder", [1, 2, 3]),
    ("postorder", [1, 3, 2]),
    (TraversalOrder.LEVEL_ORDER, [2, 1, 3]),
])
def test_traverse_tree(order, expected):
    assert list(traverse_tree(build_tree([3, 1, 2]), order)) == expected


def test_traverse_tree_is_lazy(sample_tree):
    iterator = traverse_tree(sample_tree)
    assert next(iterator) == 1
    assert next(iterator) == 3


def test_traverse_with_depth_groups_levels(sample_tree):
    levels = {}
    for value, depth in traverse_with_depth(sample_tree):
        levels.setdefault(depth, []).append(value)

    assert levels == {
        0: [8],
        1: [4, 67],
        2: [1, 5, 9, 324],
        3: [3, 7, 23, 6345],
    }


def test_get_tree_stats(sample_tree):
    stats = get_tree_stats(sample_tree)

    assert stats['total_nodes'] == 11
    assert stats['leaf_nodes'] == 4
    assert stats['internal_nodes'] == 7
    assert stats['height'] == 3
    assert stats['is_balanced'] is True
    assert stats['depths'] == {0: 1, 1: 2, 2: 4, 3: 4}
    assert stats['min_value'] == 1
    assert stats['max_value'] == 6345


def test_get_tree_stats_complete_tree():
    stats = get_tree_stats(build_tree(range(7)))
    assert (stats['height'], stats['leaf_nodes']) == (2, 4)


def test_get_tree_stats_empty_tree():
    stats = get_tree_stats(build_tree())

    assert stats['total_nodes'] == 0
    assert stats['height'] == -1
    assert stats['is_balanced'] is True
    assert stats['depths'] == {}
    assert stats['min_value'] is None
    assert stats['max_value'] is None


def test_library_installs_no_handlers():
    assert logging.getLogger("searchtreelib.tree").handlers == []


def test_traverse_with_depth_window(sample_tree):
    pairs = list(traverse_with_depth(sample_tree, "inorder", max_depth=2, min_depth=1))
    assert pairs == [(1, 2), (4, 1), (5, 2), (9, 2), (67, 1), (324, 2)]


def test_traverse_with_depth_max_depth_zero_is_root_only(sample_tree):
    assert list(traverse_with_depth(sample_tree, max_depth=0)) == [(8, 0)]


@pytest.mark.parametrize("max_depth,min_depth", [
    (None, -1),
    (-1, 0),
    (1, 2),
])
def test_traverse_with_depth_rejects_bad_window(sample_tree, max_depth, min_depth):
    with pytest.raises(ValueError):
        traverse_with_depth(sample_tree, max_depth=max_depth, min_depth=min_depth)

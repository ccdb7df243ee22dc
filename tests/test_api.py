"""Tests for the functional API in karytree.api."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from karytree import (
    build_tree,
    traverse_tree,
    collect_keys,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    iter_with_depth,
    get_tree_stats,
    heap_sorted_keys,
    Tree,
    RootPolicy,
    ParentNotFound,
    CapacityExceeded,
    ArityMismatch,
    RootAlreadySet,
)

SAMPLE_EDGES = [(10, 20), (10, 15), (20, 25), (20, 30)]


@pytest.fixture
def sample_tree():
    return build_tree(10, SAMPLE_EDGES)


def test_build_tree(sample_tree):
    assert sample_tree.arity == 2
    assert collect_keys(sample_tree) == [10, 20, 15, 25, 30]


def test_build_tree_respects_arity():
    with pytest.raises(CapacityExceeded):
        build_tree(1, [(1, 2), (1, 3), (1, 4)])

    tree = build_tree(1, [(1, 2), (1, 3), (1, 4)], arity=3)
    assert collect_keys(tree) == [1, 2, 3, 4]


def test_build_tree_parent_order_matters():
    with pytest.raises(ParentNotFound):
        build_tree(1, [(2, 3), (1, 2)])


def test_build_tree_root_policy():
    tree = build_tree(1, [], root_policy=RootPolicy.REJECT)
    with pytest.raises(RootAlreadySet):
        tree.add_root(2)


@pytest.mark.parametrize("order, expected", [
    ("bfs", [10, 20, 15, 25, 30]),
    ("dfs", [10, 20, 25, 30, 15]),
    ("pre_order", [10, 20, 25, 30, 15]),
    ("post_order", [25, 30, 20, 15, 10]),
    ("in_order", [25, 20, 30, 10, 15]),
    ("min_heap", [10, 15, 20, 25, 30]),
])
def test_collect_keys_by_order(sample_tree, order, expected):
    assert collect_keys(sample_tree, order) == expected


def test_traverse_tree_steps_one_node_at_a_time(sample_tree):
    walker = traverse_tree(sample_tree, "pre_order")
    assert next(walker).key == 10
    assert next(walker).key == 20


def test_traverse_tree_fails_at_call_site(sample_tree):
    with pytest.raises(ValueError):
        traverse_tree(sample_tree, "zigzag")

    ternary = build_tree("a", [("a", "b")], arity=3)
    with pytest.raises(ArityMismatch):
        traverse_tree(ternary, "in_order")


def test_traverse_tree_heap_reshapes_on_call():
    tree = build_tree(30, [(30, 20), (30, 10)])
    walker = traverse_tree(tree, "min_heap")
    assert tree.root.key == 10
    assert [node.key for node in walker] == [10, 20, 30]


def test_count_nodes(sample_tree):
    assert count_nodes(sample_tree) == 5
    assert count_nodes(Tree()) == 0


def test_find_nodes(sample_tree):
    found = [node.key for node in find_nodes(sample_tree, lambda n: n.key % 10 == 0)]
    assert found == [10, 20, 30]

    found_post = [node.key for node in
                  find_nodes(sample_tree, lambda n: n.key > 18, order="post")]
    assert found_post == [25, 30, 20]


def test_get_leaf_nodes(sample_tree):
    assert [node.key for node in get_leaf_nodes(sample_tree)] == [15, 25, 30]


def test_iter_with_depth(sample_tree):
    pairs = [(node.key, depth) for node, depth in iter_with_depth(sample_tree)]
    assert pairs == [(10, 0), (20, 1), (25, 2), (30, 2), (15, 1)]
    assert list(iter_with_depth(Tree())) == []


def test_get_tree_stats(sample_tree):
    stats = get_tree_stats(sample_tree)
    assert stats['total_nodes'] == 5
    assert stats['leaf_nodes'] == 3
    assert stats['internal_nodes'] == 2
    assert stats['max_depth'] == 2
    assert stats['depths'] == {0: 1, 1: 2, 2: 2}
    assert stats['average_branching'] == 2


def test_get_tree_stats_empty():
    stats = get_tree_stats(Tree())
    assert stats['total_nodes'] == 0
    assert stats['average_branching'] == 0


def test_heap_sorted_keys_mutates(sample_tree):
    assert heap_sorted_keys(sample_tree) == [10, 15, 20, 25, 30]

    reshaped = build_tree(30, [(30, 20), (30, 10)])
    heap_sorted_keys(reshaped)
    assert reshaped.root.key == 10


def test_heap_sorted_keys_requires_binary():
    tree = build_tree("a", [("a", "b")], arity=3)
    with pytest.raises(ArityMismatch):
        heap_sorted_keys(tree)

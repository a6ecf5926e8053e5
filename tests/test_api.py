"""Tests for the functional helpers in btreelib.api."""

import sys
from pathlib import Path
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from btreelib import (
    BinaryTree,
    Node,
    TraversalOrder,
    TreeConfig,
    build_tree,
    collect_payloads,
    count_nodes,
    get_leaf_nodes,
    get_tree_stats,
    payload_less,
    tree_depth,
)


def less_than(a, b):
    return a < b


def test_payload_less_compares_payloads():
    less = payload_less(less_than)
    assert less(Node(1), Node(2)) is True
    assert less(Node(2), Node(1)) is False


def test_build_tree_collapses_duplicates():
    tree = build_tree([5, 3, 8, 3, 5, 5], less_than)
    assert count_nodes(tree) == 3
    assert collect_payloads(tree) == [8, 5, 3]
    assert collect_payloads(tree, TraversalOrder.REVERSE) == [3, 5, 8]
    assert collect_payloads(tree, "reverse_legacy") == [3, 5, 8]


def test_build_tree_honours_config():
    tree = build_tree([2, 1, 3], less_than, TreeConfig.deep())
    assert tree.config.iterative is True


def test_empty_tree_helpers():
    tree = build_tree([], less_than)
    assert count_nodes(tree) == 0
    assert tree_depth(tree) == 0
    assert list(get_leaf_nodes(tree)) == []
    assert get_tree_stats(tree) == {'total_nodes': 0, 'leaf_nodes': 0, 'max_depth': 0}


def test_stats_on_balanced_tree():
    tree = build_tree([50, 30, 70, 20, 40, 60, 80], less_than)
    stats = get_tree_stats(tree)
    assert stats == {'total_nodes': 7, 'leaf_nodes': 4, 'max_depth': 3}
    assert [n.payload for n in get_leaf_nodes(tree)] == [80, 60, 40, 20]


def test_depth_of_degenerate_tree():
    n = sys.getrecursionlimit() + 500
    tree = build_tree(range(n), less_than, TreeConfig.deep())
    assert tree_depth(tree) == n


def test_lone_root():
    tree = BinaryTree(payload_less(less_than))
    tree.upsert(Node("only"))
    assert tree_depth(tree) == 1
    assert [n.payload for n in get_leaf_nodes(tree)] == ["only"]


@pytest.mark.parametrize("order", list(TraversalOrder))
def test_every_order_visits_distinct_set(order):
    values = ["pear", "apple", "fig", "apple", "kiwi", "date", "fig", "plum"]
    tree = build_tree(values, less_than)
    assert sorted(collect_payloads(tree, order)) == sorted(set(values))

"""Tests for the high-level functional API."""

import logging
from collections import Counter

import pytest

from compositree import (
    Container,
    KindCounter,
    Leaf,
    PriceCalculator,
    UnhandledKindError,
    WeightedSumOperation,
    apply_operation,
    count_nodes,
    find_nodes,
    fold_tree,
    get_leaf_nodes,
    get_tree_stats,
    traverse_tree,
    traverse_with_depth,
)


def test_traverse_tree_default_is_preorder(file_tree):
    names = [node.name for node in traverse_tree(file_tree)]
    assert names == ["Root", "Documents", "Text.txt", "Photos", "Image.jpg"]


def test_traverse_order_matches_display(file_tree):
    names = [node.name for node in traverse_tree(file_tree)]
    assert names == [line.lstrip("-").strip() for line in file_tree.display()]


def test_traverse_with_depth(file_tree):
    depths = [depth for _, depth in traverse_with_depth(file_tree)]
    assert depths == [0, 1, 2, 1, 2]


def test_filters(file_tree):
    leaves_only = traverse_tree(file_tree, include_filter=lambda node: node.is_leaf())
    assert [node.name for node in leaves_only] == ["Text.txt", "Image.jpg"]

    # Exclusion does not prune the excluded container's children
    no_photos = traverse_tree(file_tree, exclude_filter=lambda node: node.name == "Photos")
    assert [node.name for node in no_photos] == ["Root", "Documents", "Text.txt", "Image.jpg"]


def test_apply_operation_returns_result(airport):
    assert apply_operation(airport, PriceCalculator()) == 110


def test_apply_operation_logs_errors(caplog):
    root = Container("Airport", [Leaf("Zeppelin", kind="airship")], kind="airport")
    with caplog.at_level(logging.DEBUG, logger="compositree.api"):
        with pytest.raises(UnhandledKindError):
            apply_operation(root, PriceCalculator())
    assert any("Error in apply_operation" in record.getMessage() for record in caplog.records)


def test_apply_operation_logs_result(airport, caplog):
    with caplog.at_level(logging.DEBUG, logger="compositree.api"):
        apply_operation(airport, PriceCalculator())
    assert any("apply_operation returned 110" in record.getMessage() for record in caplog.records)


def test_fold_tree_agrees_with_operation():
    weights = {'hub': 1, 'a': 100, 'b': 10}
    root = Container("root", [
        Leaf("a1", kind="a"),
        Container("inner", [Leaf("a2", kind="a"), Leaf("b1", kind="b")], kind="hub"),
    ], kind="hub")

    folded = fold_tree(root, lambda total, node: total + weights[node.kind], 0)

    assert folded == 212
    assert folded == apply_operation(root, WeightedSumOperation(weights))


def test_fold_tree_collects_in_preorder(file_tree):
    names = fold_tree(file_tree, lambda acc, node: acc + [node.name], [])
    assert names == ["Root", "Documents", "Text.txt", "Photos", "Image.jpg"]


def test_count_nodes(file_tree):
    assert count_nodes(file_tree) == 5
    assert count_nodes(file_tree, max_depth=1) == 3


def test_find_nodes(file_tree):
    found = find_nodes(file_tree, lambda node: node.name.endswith(".jpg"))
    assert [node.name for node in found] == ["Image.jpg"]


def test_get_leaf_nodes(file_tree):
    assert [node.name for node in get_leaf_nodes(file_tree)] == ["Text.txt", "Image.jpg"]


def test_get_tree_stats(file_tree):
    stats = get_tree_stats(file_tree)
    assert stats['total_nodes'] == 5
    assert stats['leaf_nodes'] == 2
    assert stats['container_nodes'] == 3
    assert stats['max_depth'] == 2
    assert stats['depths'] == {0: 1, 1: 2, 2: 2}
    assert stats['kinds'] == Counter(container=3, leaf=2)


def test_stats_kinds_match_kind_counter(airport):
    assert get_tree_stats(airport)['kinds'] == apply_operation(airport, KindCounter())

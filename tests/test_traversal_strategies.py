"""Unit tests for traversal strategies and configuration.

Tests the traversal orders, depth limits and node filters over a small
composite tree.
"""

import unittest
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositree import (
    BreadthFirstTraverser,
    ConfigurationError,
    Container,
    DepthConfig,
    DepthFirstPostOrderTraverser,
    DepthFirstPreOrderTraverser,
    Leaf,
    TraversalStrategy,
    create_traverser,
    get_leaf_nodes,
    traverse_tree,
    traverse_with_depth,
)


class TestTraversalStrategies(unittest.TestCase):
    """Test different traversal strategies."""

    def setUp(self):
        # Tree structure:
        #   root/
        #     a/
        #       a1
        #       a2
        #     b/
        #       b1/
        #         b1a
        #       b2
        #     c
        self.root = Container("root")
        a = self.root.add(Container("a"))
        a.add(Leaf("a1"))
        a.add(Leaf("a2"))
        b = self.root.add(Container("b"))
        b1 = b.add(Container("b1"))
        b1.add(Leaf("b1a"))
        b.add(Leaf("b2"))
        self.root.add(Leaf("c"))

    def names(self, pairs):
        return [(node.name, depth) for node, depth in pairs]

    def test_pre_order_traversal(self):
        traverser = DepthFirstPreOrderTraverser()
        self.assertEqual(self.names(traverser.traverse(self.root)), [
            ("root", 0), ("a", 1), ("a1", 2), ("a2", 2),
            ("b", 1), ("b1", 2), ("b1a", 3), ("b2", 2), ("c", 1),
        ])

    def test_post_order_traversal(self):
        traverser = DepthFirstPostOrderTraverser()
        order = [name for name, _ in self.names(traverser.traverse(self.root))]
        self.assertEqual(order, ["a1", "a2", "a", "b1a", "b1", "b2", "b", "c", "root"])

    def test_breadth_first_traversal(self):
        traverser = BreadthFirstTraverser()
        pairs = self.names(traverser.traverse(self.root))
        depths = [depth for _, depth in pairs]

        # BFS should visit all nodes at depth N before depth N+1
        self.assertEqual(depths, sorted(depths))
        self.assertEqual([name for name, _ in pairs],
                         ["root", "a", "b", "c", "a1", "a2", "b1", "b2", "b1a"])

    def test_max_depth(self):
        traverser = DepthFirstPreOrderTraverser()
        pairs = self.names(traverser.traverse(self.root, max_depth=1))
        self.assertEqual(pairs, [("root", 0), ("a", 1), ("b", 1), ("c", 1)])

    def test_min_depth(self):
        traverser = BreadthFirstTraverser()
        pairs = self.names(traverser.traverse(self.root, min_depth=2))
        self.assertTrue(all(depth >= 2 for _, depth in pairs))
        self.assertEqual(len(pairs), 5)

    def test_leaf_root(self):
        for strategy in TraversalStrategy:
            traverser = create_traverser(strategy)
            self.assertEqual(self.names(traverser.traverse(Leaf("only"))), [("only", 0)])

    def test_every_strategy_visits_every_node_once(self):
        for strategy in TraversalStrategy:
            nodes = list(traverse_tree(self.root, strategy=strategy))
            self.assertEqual(len(nodes), 9)
            self.assertEqual(len({id(node) for node in nodes}), 9)


class TestTraverserFactory(unittest.TestCase):
    """Test creating traversers by name."""

    def test_names_and_aliases(self):
        self.assertIsInstance(create_traverser("dfs_pre"), DepthFirstPreOrderTraverser)
        self.assertIsInstance(create_traverser("DFS"), DepthFirstPreOrderTraverser)
        self.assertIsInstance(create_traverser("post_order"), DepthFirstPostOrderTraverser)
        self.assertIsInstance(create_traverser("breadth_first"), BreadthFirstTraverser)
        self.assertIsInstance(create_traverser(TraversalStrategy.BREADTH_FIRST),
                              BreadthFirstTraverser)

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError) as ctx:
            create_traverser("zigzag")
        self.assertIn("zigzag", str(ctx.exception))


class TestTraversalConfigValidation(unittest.TestCase):
    """Test that invalid depth limits are rejected before traversal."""

    def test_negative_min_depth(self):
        with self.assertRaises(ConfigurationError):
            list(traverse_tree(Leaf("x"), min_depth=-1))

    def test_max_below_min(self):
        with self.assertRaises(ConfigurationError) as ctx:
            list(traverse_with_depth(Leaf("x"), min_depth=3, max_depth=1))
        self.assertIn("max_depth cannot be less than min_depth", str(ctx.exception))

    def test_invalid_limits_reported_at_call_time(self):
        # No iteration needed for the error to surface
        with self.assertRaises(ConfigurationError):
            traverse_with_depth(Leaf("x"), max_depth=-1)
        with self.assertRaises(ConfigurationError):
            traverse_tree(Leaf("x"), min_depth=-1)
        with self.assertRaises(ConfigurationError):
            get_leaf_nodes(Leaf("x"), min_depth=2, max_depth=1)

    def test_unknown_strategy_reported_at_call_time(self):
        with self.assertRaises(ValueError):
            traverse_tree(Leaf("x"), strategy="zigzag")


class TestDepthConfigTraversal(unittest.TestCase):
    """Test traversers driven by a DepthConfig."""

    def setUp(self):
        self.root = Container("root", [
            Container("a", [Leaf("a1")]),
            Leaf("b"),
        ])

    def test_depth_config_limits(self):
        traverser = DepthFirstPreOrderTraverser()
        pairs = traverser.traverse(self.root, depth=DepthConfig(min_depth=1, max_depth=1))
        self.assertEqual([(node.name, depth) for node, depth in pairs], [("a", 1), ("b", 1)])

    def test_depth_config_overrides_keyword_limits(self):
        traverser = BreadthFirstTraverser()
        pairs = traverser.traverse(self.root, max_depth=0, depth=DepthConfig())
        self.assertEqual(len(list(pairs)), 4)


if __name__ == "__main__":
    unittest.main()

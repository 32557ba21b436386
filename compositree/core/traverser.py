"""Tree traversal strategies for compositree.

Traversers implement different orders for walking a composite tree. They
read children only from nodes whose ``is_leaf()`` is False, so leaves are
never asked for children they do not have. Depth limits come from a
DepthConfig.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, Optional, Tuple, Union

from .node import Node
from ..config import DepthConfig, TraversalStrategy


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 depth: Optional[DepthConfig] = None) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes
            depth: Depth limits to use instead of ``max_depth``/``min_depth``

        Returns:
            Iterator of (node, depth) tuples, depth relative to root
        """
        if depth is None:
            depth = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        return self._walk(root, depth)

    @abstractmethod
    def _walk(self, root: Node, limits: DepthConfig) -> Iterator[Tuple[Node, int]]:
        pass


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before its children, children left to right. This is
    the same order in which ``accept`` applies an operation and in which
    ``display`` renders lines.
    """

    def _walk(self, root: Node, limits: DepthConfig) -> Iterator[Tuple[Node, int]]:
        def _traverse_recursive(node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
            # Yield parent first (pre-order)
            if limits.should_yield(depth):
                yield (node, depth)

            if limits.should_explore(depth) and not node.is_leaf():
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

        yield from _traverse_recursive(root, 0)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before their parent. Good for aggregating values up
    the tree, such as folder totals.
    """

    def _walk(self, root: Node, limits: DepthConfig) -> Iterator[Tuple[Node, int]]:
        def _traverse_recursive(node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
            if limits.should_explore(depth) and not node.is_leaf():
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

            # Then yield parent (post-order)
            if limits.should_yield(depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before any node at depth N+1.
    """

    def _walk(self, root: Node, limits: DepthConfig) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if limits.should_yield(depth):
                yield (node, depth)

            if limits.should_explore(depth) and not node.is_leaf():
                for child in node.children:
                    queue.append((child, depth + 1))


_STRATEGIES = {
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
}

_ALIASES = {
    'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
    'post_order': TraversalStrategy.DEPTH_FIRST_POST,
    'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse a strategy from an enum member or a name.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower not in _ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_ALIASES.keys())}"
        )
    return _ALIASES[strategy_lower]


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy member or name (dfs_pre, dfs_post, bfs)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _STRATEGIES[parse_strategy(strategy)]()

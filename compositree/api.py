"""High-level API for compositree.

This module provides simple, functional interfaces for common operations
on composite trees. These functions wrap the traversers and operations for
ease of use in simple cases.
"""

from collections import Counter
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, TypeVar, Union

from .config import DepthConfig, FilterConfig, TraversalConfig, TraversalStrategy
from .core.node import Node
from .core.operation import Operation
from .core.traverser import create_traverser, parse_strategy
from .utils.logging import log_calls

T = TypeVar('T')


def traverse_with_depth(
    root: Node,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
) -> Iterator[Tuple[Node, int]]:
    """Traverse a tree, producing each node with its depth.

    Options are validated when this is called, before the first node is
    requested.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (dfs_pre, dfs_post, bfs)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded

    Returns:
        Iterator of (node, depth) tuples, depth relative to root

    Raises:
        ConfigurationError: If the depth limits are inconsistent
        ValueError: If strategy name is not recognized
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(include_filter=include_filter, exclude_filter=exclude_filter),
    )
    config.raise_if_invalid()

    traverser = create_traverser(config.strategy)
    return (
        (node, depth)
        for node, depth in traverser.traverse(root, depth=config.depth)
        if config.filter.should_include(node)
    )


def traverse_tree(root: Node, **kwargs) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Accepts the same options as ``traverse_with_depth`` and produces just
    the nodes.

    Example:
        >>> root = Container("Root", [Leaf("a.txt"), Leaf("b.txt")])
        >>> [node.name for node in traverse_tree(root)]
        ['Root', 'a.txt', 'b.txt']
    """
    return (node for node, _ in traverse_with_depth(root, **kwargs))


@log_calls()
def apply_operation(root: Node, operation: Operation) -> Any:
    """Apply an operation to every node under ``root`` and return its result.

    Example:
        >>> airport = Container("Airport", [Leaf("A320", kind="plane")], kind="airport")
        >>> apply_operation(airport, PriceCalculator())
        100
    """
    root.accept(operation)
    return operation.result()


def fold_tree(root: Node, func: Callable[[T, Node], T], initial: T) -> T:
    """Fold over the tree pre-order with an explicit accumulator.

    ``func(acc, node)`` returns the new accumulator. Nothing is stored on
    the nodes or on an operation object.

    Example:
        >>> fold_tree(root, lambda total, node: total + 1, 0)
        3
    """
    acc = initial
    for node in traverse_tree(root):
        acc = func(acc, node)
    return acc


def count_nodes(root: Node, **kwargs) -> int:
    """Count nodes in a tree that match criteria."""
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(root: Node, predicate: Callable[[Node], bool], **kwargs) -> Iterator[Node]:
    """Find nodes that match a predicate, in traversal order."""
    kwargs['include_filter'] = predicate
    return traverse_tree(root, **kwargs)


def get_leaf_nodes(root: Node, **kwargs) -> Iterator[Node]:
    """Get all leaf nodes in a tree."""
    return (node for node in traverse_tree(root, **kwargs) if node.is_leaf())


def get_tree_stats(root: Node, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, container_nodes,
        max_depth, depths (node count per depth) and kinds
        (node count per kind)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
        'kinds': Counter(),
    }

    for node, depth in traverse_with_depth(root, **kwargs):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1
        stats['kinds'][node.kind] += 1

    stats['container_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats

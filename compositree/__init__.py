"""compositree - Composite trees with external operations.

Build a tree from leaves and containers, then apply operations defined
outside the node classes. Each operation chooses its behavior per node
kind, and containers forward it to their children in order.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from compositree import Container, Leaf, PriceCalculator

    airport = Container("Airport", kind="airport")
    airport.add(Leaf("A320", kind="plane"))
    airport.add(Leaf("Shuttle", kind="bus"))

    prices = PriceCalculator()
    airport.accept(prices)
    prices.get_total()   # 110
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import Node, Leaf, Container
from .core.operation import Operation, FunctionOperation
from .core.traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .operations import (
    WeightedSumOperation,
    PriceCalculator,
    KindCounter,
    NameCollector,
)

# Configuration and errors
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DepthConfig,
    FilterConfig,
    DisplayConfig,
)
from .errors import (
    TreeError,
    UnhandledKindError,
    NodeNotFoundError,
    ConfigurationError,
)

# High-level API
from .display import render_lines, render_tree, print_tree
from .api import (
    traverse_tree,
    traverse_with_depth,
    apply_operation,
    fold_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    '__version__',
    # Core
    'Node',
    'Leaf',
    'Container',
    'Operation',
    'FunctionOperation',
    'TreeTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
    'WeightedSumOperation',
    'PriceCalculator',
    'KindCounter',
    'NameCollector',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DepthConfig',
    'FilterConfig',
    'DisplayConfig',
    # Errors
    'TreeError',
    'UnhandledKindError',
    'NodeNotFoundError',
    'ConfigurationError',
    # API
    'render_lines',
    'render_tree',
    'print_tree',
    'traverse_tree',
    'traverse_with_depth',
    'apply_operation',
    'fold_tree',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]

"""Core abstractions for compositree.

This package contains the node variants, the operation base class and
the traversal strategies.
"""

from .node import Node, Leaf, Container
from .operation import Operation, FunctionOperation
from .traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)

__all__ = [
    "Node",
    "Leaf",
    "Container",
    "Operation",
    "FunctionOperation",
    "TreeTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
]

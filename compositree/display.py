"""Text rendering of composite trees."""

import sys
from typing import List, Optional, TextIO

from .config import DisplayConfig
from .core.node import Node


def render_lines(root: Node, indent_level: int = 0,
                 config: Optional[DisplayConfig] = None) -> List[str]:
    """Return the rendered lines for ``root`` and its subtree, pre-order.

    Raises:
        ConfigurationError: If ``config`` is invalid
    """
    return root.display(indent_level, config)


def render_tree(root: Node, indent_level: int = 0,
                config: Optional[DisplayConfig] = None) -> str:
    """Render the tree as a single newline-separated string."""
    return "\n".join(render_lines(root, indent_level, config))


def print_tree(root: Node, stream: Optional[TextIO] = None, indent_level: int = 0,
               config: Optional[DisplayConfig] = None) -> None:
    """Write the rendered tree to ``stream`` (default: stdout), one node per line.

    Example:
        >>> root = Container("Root", [Leaf("a.txt")])
        >>> print_tree(root)
         Root
        -- a.txt
    """
    stream = stream or sys.stdout
    for line in render_lines(root, indent_level, config):
        stream.write(line + "\n")

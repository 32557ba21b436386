"""Configuration system for compositree.

This module defines how callers specify traversal order, depth limits,
node filtering and the textual format used when rendering a tree.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional

from .errors import ConfigurationError


class TraversalStrategy(Enum):
    """How to walk the tree."""
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children (accept order)
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    BREADTH_FIRST = "bfs"           # Level by level


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be explored."""
        if self.max_depth is None:
            return True
        return depth < self.max_depth


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal.

    Filters decide which nodes are yielded; they never prune a subtree, so
    the children of an excluded container are still considered.
    """

    include_filter: Optional[Callable[[Any], bool]] = None
    exclude_filter: Optional[Callable[[Any], bool]] = None

    def should_include(self, node) -> bool:
        """Check if a node passes the filters. Exclusion takes precedence."""
        if self.exclude_filter and self.exclude_filter(node):
            return False
        if self.include_filter:
            return self.include_filter(node)
        return True


@dataclass(frozen=True)
class DisplayConfig:
    """Text format for rendered tree lines.

    The defaults give ``'-' * indent + ' ' + name`` with children indented
    two steps deeper than their parent.
    """

    indent_step: int = 2
    fill_char: str = "-"
    separator: str = " "

    def format_line(self, name: str, indent_level: int) -> str:
        """Render one node name at the given indent level."""
        if indent_level < 0:
            raise ValueError(f"indent_level cannot be negative: {indent_level}")
        return f"{self.fill_char * indent_level}{self.separator}{name}"

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if self.indent_step < 0:
            errors.append("indent_step cannot be negative")
        if len(self.fill_char) != 1:
            errors.append("fill_char must be a single character")
        return errors

    def raise_if_invalid(self) -> None:
        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid display configuration: {'; '.join(errors)}")


DEFAULT_DISPLAY = DisplayConfig()


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal."""

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Config that stops at ``max_depth`` (default: root and its children)."""
        return cls(depth=DepthConfig(max_depth=max_depth))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"unknown strategy: {self.strategy!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors

    def raise_if_invalid(self) -> None:
        """Raise ConfigurationError listing every validation error."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")

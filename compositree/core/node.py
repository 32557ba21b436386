"""Composite node types for compositree.

A tree is built from two node variants:

- ``Leaf``: a terminal node. It has no children and no way to add any.
- ``Container``: holds an ordered list of child nodes, each a Leaf or
  another Container.

Every node carries a ``kind`` tag. Operations (see ``operation.py``) pick
their per-node behavior by kind, so several domain kinds ("plane", "bus",
"file") can share the same structural variant.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..config import DEFAULT_DISPLAY, DisplayConfig
from ..errors import NodeNotFoundError

if TYPE_CHECKING:
    from .operation import Operation

logger = logging.getLogger(__name__)


class Node(ABC):
    """Abstract base class for nodes in a composite tree.

    Nodes are compared by identity. Names are labels, not keys: a file
    tree can hold many nodes called ``README``.
    """

    KIND = "node"

    def __init__(self, name: str, kind: Optional[str] = None):
        self._name = name
        self._kind = kind if kind is not None else self.KIND

    @property
    def name(self) -> str:
        """Human-readable label fixed at construction."""
        return self._name

    @property
    def kind(self) -> str:
        """Tag used by operations to select a handler."""
        return self._kind

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node is a leaf.

        This is the capability check used by traversal: only non-leaf
        nodes are asked for their children.
        """
        pass

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node."""
        return {
            'name': self._name,
            'kind': self._kind,
            'is_leaf': self.is_leaf(),
        }

    def accept(self, operation: 'Operation') -> None:
        """Apply an operation to this node.

        Containers override this to forward the operation to their
        children after visiting themselves.
        """
        operation.visit(self)

    def display(self, indent_level: int = 0,
                config: Optional[DisplayConfig] = None) -> List[str]:
        """Render this node as a list of text lines.

        Args:
            indent_level: Number of fill characters before the name
            config: Line format (defaults to ``'-' * indent + ' ' + name``)

        Returns:
            One line per node, pre-order

        Raises:
            ConfigurationError: If ``config`` is invalid
            ValueError: If ``indent_level`` is negative
        """
        config = config or DEFAULT_DISPLAY
        config.raise_if_invalid()
        return self._render(indent_level, config)

    def _render(self, indent_level: int, config: DisplayConfig) -> List[str]:
        return [config.format_line(self._name, indent_level)]

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, kind={self._kind!r})"


class Leaf(Node):
    """Terminal node with no children."""

    KIND = "leaf"

    def is_leaf(self) -> bool:
        return True


class Container(Node):
    """Node holding an ordered sequence of children.

    Children keep insertion order. The container owns them: a node should
    be added to one container only, and never to one of its own
    descendants. Neither rule is checked.
    """

    KIND = "container"

    def __init__(self, name: str, children: Optional[Iterable[Node]] = None,
                 kind: Optional[str] = None):
        super().__init__(name, kind)
        self._children: List[Node] = []
        for child in children or ():
            self.add(child)

    def is_leaf(self) -> bool:
        # An empty container is still a container
        return False

    @property
    def children(self) -> Tuple[Node, ...]:
        """Snapshot of the children in insertion order."""
        return tuple(self._children)

    def add(self, child: Node) -> Node:
        """Append a child and return it.

        Returning the child allows building nested structures inline:

            docs = root.add(Container("Documents"))
            docs.add(Leaf("Text.txt"))
        """
        self._children.append(child)
        logger.debug("Added %r to %r", child, self)
        return child

    def remove(self, child: Node) -> None:
        """Remove a direct child.

        Raises:
            NodeNotFoundError: If ``child`` is not a direct child
        """
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                logger.debug("Removed %r from %r", child, self)
                return
        raise NodeNotFoundError(f"{child!r} is not a child of {self!r}")

    def accept(self, operation: 'Operation') -> None:
        """Visit this container, then each child in order."""
        operation.visit(self)
        for child in self._children:
            child.accept(operation)

    def _render(self, indent_level: int, config: DisplayConfig) -> List[str]:
        # Children render indent_step deeper than this container
        lines = [config.format_line(self._name, indent_level)]
        for child in self._children:
            lines.extend(child._render(indent_level + config.indent_step, config))
        return lines

    def metadata(self) -> Dict[str, Any]:
        metadata = super().metadata()
        metadata['child_count'] = len(self._children)
        return metadata

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        # Defining __len__ would otherwise make empty containers falsy
        return True

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

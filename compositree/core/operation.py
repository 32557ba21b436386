"""External operations (visitors) for compositree.

An Operation is defined outside the node classes and applied to a tree
with ``root.accept(operation)``. Each visited node is routed to a handler
chosen by the node's ``kind``. The set of kinds an operation understands
is closed: a kind without a handler goes to ``fallback()``, which raises
UnhandledKindError unless a subclass decides otherwise.

Operations keep their own accumulated state and must never modify the
tree they visit.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .node import Node
from ..errors import UnhandledKindError

logger = logging.getLogger(__name__)

Handler = Callable[[Node], Any]


class Operation(ABC):
    """Abstract base class for operations dispatched by node kind.

    Subclasses implement ``handlers()`` to return the dispatch table and
    ``result()`` to expose the accumulated value. Subclasses holding state
    should override ``reset()`` and call ``super().__init__()``.
    """

    def __init__(self):
        self._dispatch: Dict[str, Handler] = dict(self.handlers())

    @abstractmethod
    def handlers(self) -> Mapping[str, Handler]:
        """Return the mapping from node kind to handler.

        Called once at construction.
        """
        pass

    @abstractmethod
    def result(self) -> Any:
        """Return the value accumulated so far."""
        pass

    def reset(self) -> None:
        """Return the accumulator to its initial state."""
        logger.debug("Reset %s", self.__class__.__name__)

    def visit(self, node: Node) -> Any:
        """Dispatch ``node`` to the handler for its kind."""
        handler = self._dispatch.get(node.kind)
        if handler is None:
            return self.fallback(node)
        return handler(node)

    def fallback(self, node: Node) -> Any:
        """Handle a node whose kind has no handler.

        Raises:
            UnhandledKindError: Always, unless overridden
        """
        raise UnhandledKindError(node.kind, self.__class__.__name__)

    def accepts_any_kind(self) -> bool:
        """Check if ``fallback()`` handles kinds missing from the dispatch table.

        Subclasses that override ``fallback()`` to handle nodes instead of
        raising must override this too.
        """
        return False

    def supports(self, kind: str) -> bool:
        """Check if visiting a node of ``kind`` is handled."""
        return kind in self._dispatch or self.accepts_any_kind()

    def check_kinds(self, kinds: Iterable[str]) -> None:
        """Verify ahead of a traversal that every kind has a handler.

        Raises:
            UnhandledKindError: For the first kind without a handler
        """
        for kind in kinds:
            if not self.supports(kind):
                raise UnhandledKindError(kind, self.__class__.__name__)


class FunctionOperation(Operation):
    """Operation built from plain functions, without subclassing.

    Each handler's return value is recorded, so ``result()`` gives the
    ``(node, value)`` pairs in visit order.
    """

    def __init__(self, handlers: Mapping[str, Handler],
                 fallback: Optional[Handler] = None):
        """Initialize with a dispatch table.

        Args:
            handlers: Mapping of node kind to function(node) -> Any
            fallback: Function for kinds missing from ``handlers``
                (default: raise UnhandledKindError)
        """
        self._handlers = dict(handlers)
        self._fallback = fallback
        self._results: List[Tuple[Node, Any]] = []
        super().__init__()

    def handlers(self) -> Mapping[str, Handler]:
        return self._handlers

    def visit(self, node: Node) -> Any:
        value = super().visit(node)
        self._results.append((node, value))
        return value

    def fallback(self, node: Node) -> Any:
        if self._fallback is None:
            return super().fallback(node)
        return self._fallback(node)

    def accepts_any_kind(self) -> bool:
        return self._fallback is not None

    def result(self) -> List[Tuple[Node, Any]]:
        return list(self._results)

    def reset(self) -> None:
        super().reset()
        self._results = []

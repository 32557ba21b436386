"""Exceptions raised by compositree.

Everything derives from TreeError so callers can catch library errors in
one place. Each error also derives from the matching builtin, which keeps
``except LookupError`` and ``except ValueError`` working as expected.
"""


class TreeError(Exception):
    """Base class for all compositree errors."""
    pass


class UnhandledKindError(TreeError, LookupError):
    """Raised when an operation has no handler for a node kind."""

    def __init__(self, kind: str, operation: str):
        self.kind = kind
        self.operation = operation
        super().__init__(f"{operation} has no handler for node kind {kind!r}")


class NodeNotFoundError(TreeError, ValueError):
    """Raised when removing a node that is not a direct child."""
    pass


class ConfigurationError(TreeError, ValueError):
    """Raised when a configuration object fails validation."""
    pass

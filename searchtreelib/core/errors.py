"""Exception types raised by SearchTreeLib.

Every error derives from SearchTreeError so callers can catch the whole
family at once. Each also derives from the closest builtin exception,
which keeps ``except KeyError`` style handling working.
"""

from typing import Any, Optional


class SearchTreeError(Exception):
    """Base class for all SearchTreeLib errors."""
    pass


class DuplicateValueError(SearchTreeError, ValueError):
    """Raised when inserting a value that is already in the tree.

    Only raised under DuplicatePolicy.RAISE. The tree is left unchanged.
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Node with value {value!r} already exists")


class NotFoundError(SearchTreeError, KeyError):
    """Raised when a value is not present in the tree."""

    def __init__(self, value: Any, message: Optional[str] = None):
        self.value = value
        self.message = message or f"Could not find node with value of {value!r}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message


class InvalidOperandError(SearchTreeError, TypeError):
    """Raised for an operand the tree cannot use: a bad child link, a non-node
    height() argument, or a value that cannot be ordered (e.g. NaN)."""
    pass


class EmptyTreeError(SearchTreeError):
    """Raised by operations that need at least one node."""
    pass


class ConfigurationError(SearchTreeError, ValueError):
    """Raised when a TreeConfig fails validation."""
    pass

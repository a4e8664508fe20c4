"""
Custom exceptions for the graph module.

Every error raised by quadnav derives from QuadnavError so callers can
catch the whole family in one place. Errors are raised before any new
context is built, so a failed call never leaves partial state behind.
"""

from __future__ import annotations

from typing import Any


class QuadnavError(Exception):
    """Base exception for all quadnav errors."""

    pass


class UnsupportedNodeTypeError(QuadnavError, TypeError):
    """Raised when a value cannot be coerced into an RDF term.

    Terms, strings and numbers (and lists of them) are accepted; anything
    else, e.g. a compiled regex or a plain dict, ends up here.
    """

    def __init__(self, value: Any, message: str | None = None) -> None:
        """Initialize with the offending value.

        Args:
            value: The value that could not be coerced
            message: Optional override for the default message
        """
        super().__init__(
            message or f"Unsupported node type: {type(value).__name__}"
        )
        self.value = value


class InvalidContextArityError(QuadnavError):
    """Raised when an operation needs exactly one term in the context."""

    def __init__(self, arity: int, message: str | None = None) -> None:
        """Initialize with the number of term-bearing entries found.

        Args:
            arity: How many entries with a term the context holds
            message: Optional override for the default message
        """
        super().__init__(
            message
            or f"Expected exactly one term in the context, found {arity}"
        )
        self.arity = arity


class InvalidListError(QuadnavError):
    """Raised when an RDF Collection is malformed or cyclic."""

    def __init__(self, message: str, node: Any = None) -> None:
        super().__init__(message)
        self.node = node

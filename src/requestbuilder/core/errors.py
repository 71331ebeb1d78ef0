"""
Structured error types for requestbuilder.

Operation outcomes are never raised: an executor reports them through
:class:`~requestbuilder.ops.response.Status` on the response.  The errors
here cover *misuse of the library itself* (a missing entity type, a status
value that is not a :class:`Status`, instantiating the abstract metadata
base) and carry a small context dict for structured logging.

Examples:
    >>> err = InvalidEntityTypeError("entity_type must be a class")
    >>> err.with_context(operation="create").context
    {'operation': 'create'}
"""

from __future__ import annotations

from typing import Any, Self


class RequestBuilderError(Exception):
    """Base exception for all requestbuilder errors.

    Attributes:
        message: Human-readable description.
        context: Extra key/value pairs for logging.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = dict(context or {})

    def with_context(self, **kwargs: Any) -> Self:
        """Add context fields and return self for chaining."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (for structured logs)."""
        d: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
        }
        if self.context:
            d["context"] = dict(self.context)
        return d

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidEntityTypeError(RequestBuilderError, TypeError):
    """The entity-type marker passed to a factory or builder is not a class."""


class InvalidStatusError(RequestBuilderError, ValueError):
    """A response status is neither a ``Status`` member nor its string value."""


class AbstractMetadataError(RequestBuilderError, TypeError):
    """``ResultMetadata`` was instantiated directly instead of via a subclass."""


__all__ = [
    "RequestBuilderError",
    "InvalidEntityTypeError",
    "InvalidStatusError",
    "AbstractMetadataError",
]

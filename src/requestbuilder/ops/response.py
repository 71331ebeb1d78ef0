"""
Response envelope shared by every operation.

:class:`OperationResponse` carries the two-valued outcome (:class:`Status`),
an optional human-readable message, and optional :class:`ResultMetadata`.
Concrete responses in :mod:`requestbuilder.ops.create`, ``.update``,
``.delete`` and ``.query`` add their payload.

Responses are produced by whatever executes a request; this library only
fixes their shape.  Callers branch on :meth:`OperationResponse.is_success`
or :meth:`OperationResponse.is_failure` before reading payload fields.
A response whose status was never set is neither a success nor a failure.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Self

from requestbuilder.core.errors import AbstractMetadataError, InvalidStatusError
from requestbuilder.core.logging import get_logger

logger = get_logger(__name__)


class Status(str, Enum):
    """Outcome of an operation."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


def coerce_status(value: Status | str | None) -> Status | None:
    """Return *value* as a :class:`Status`, accepting its string form.

    ``None`` passes through (status unset).

    Raises:
        InvalidStatusError: if *value* names no status.
    """
    if value is None or isinstance(value, Status):
        return value
    try:
        return Status(value)
    except (ValueError, TypeError) as exc:
        raise InvalidStatusError(
            f"Unknown status {value!r}; expected one of {[s.value for s in Status]}",
            context={"status": repr(value)},
        ) from exc


@dataclass(frozen=True)
class ResultMetadata:
    """Base for operation-specific supplementary result data.

    Not instantiable on its own: subclass it (as a frozen dataclass) and add
    fields.  Subclasses overriding ``__post_init__`` must call ``super()``.

    Example:
        >>> @dataclass(frozen=True)
        ... class BulkInfo(ResultMetadata):
        ...     affected: int = 0
        >>> BulkInfo("3 rows", affected=3).description
        '3 rows'
    """

    description: str | None = None

    def __post_init__(self) -> None:
        if type(self) is ResultMetadata:
            raise AbstractMetadataError(
                "ResultMetadata is abstract; define a subclass to attach metadata"
            )

    def to_dict(self) -> dict[str, Any]:
        """Non-``None`` fields as a plain dict."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class OperationResponse:
    """Base response: status, message, and metadata.

    All three may be reassigned after construction.  Assigning ``status``
    (directly or through :meth:`set_status`) coerces string values to
    :class:`Status` and rejects unknown ones.

    Attributes:
        status: ``Status.SUCCESS``, ``Status.FAILURE`` or ``None`` (unset).
        message: Optional human-readable description of the outcome.
        metadata: Optional :class:`ResultMetadata` subclass instance.
    """

    status: Status | None = None
    message: str | None = None
    metadata: ResultMetadata | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "status":
            value = coerce_status(value)
        super().__setattr__(name, value)

    # ------------------------------------------------------------------ #
    # Factory helpers
    # ------------------------------------------------------------------ #

    @classmethod
    def ok(
        cls,
        *,
        message: str | None = None,
        metadata: ResultMetadata | None = None,
    ) -> Self:
        """Create a successful response."""
        return cls(Status.SUCCESS, message=message, metadata=metadata)

    @classmethod
    def fail(
        cls,
        message: str | None = None,
        *,
        metadata: ResultMetadata | None = None,
    ) -> Self:
        """Create a failed response."""
        return cls(Status.FAILURE, message=message, metadata=metadata)

    # ------------------------------------------------------------------ #
    # Status
    # ------------------------------------------------------------------ #

    def is_success(self) -> bool:
        return self.status == Status.SUCCESS

    def is_failure(self) -> bool:
        return self.status == Status.FAILURE

    def set_status(self, status: Status | str | None) -> None:
        """Replace the status, accepting ``Status`` members or their values."""
        new_status = coerce_status(status)
        if new_status is not self.status:
            logger.debug(
                "response_status_changed",
                response=type(self).__name__,
                old=self.status.value if self.status else None,
                new=new_status.value if new_status else None,
            )
        self.status = new_status

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (for logging and debugging)."""
        d: dict[str, Any] = {
            "status": self.status.value if self.status else None,
            "success": self.is_success(),
        }
        if self.message is not None:
            d["message"] = self.message
        if self.metadata is not None:
            d["metadata"] = self.metadata.to_dict()
        return d


__all__ = [
    "Status",
    "coerce_status",
    "ResultMetadata",
    "OperationResponse",
]

"""
Query operation: request, builder, and response.

A query request carries up to four optional string filters.  The response
holds the matching entities as an ordered list that is never ``None``.

Example::

    request = (
        OperationRequest.query(Order)
        .with_identifiers("o-1", "cust-7")
        .context_id("tenant-a")
        .build()
    )
    response = QueryResponse.ok([order])
    for order in response:
        ...
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar, Self

from requestbuilder.core.logging import get_logger
from requestbuilder.ops.request import OperationRequest, require_entity_type, type_name
from requestbuilder.ops.response import OperationResponse, ResultMetadata, Status

logger = get_logger(__name__)


def _present(value: str | None) -> bool:
    return value is not None and value != ""


@dataclass(frozen=True)
class QueryRequest[T](OperationRequest[T]):
    """Request to look up entities.

    Attributes:
        id: Primary identifier filter.
        parent_id: Owning entity filter.
        reference_id: Cross-reference filter.
        context_id: Scope filter (tenant, workspace, ...).

    Values are stored exactly as given; no trimming.
    """

    operation: ClassVar[str] = "query"

    id: str | None = None
    parent_id: str | None = None
    reference_id: str | None = None
    context_id: str | None = None

    def has_id(self) -> bool:
        return _present(self.id)

    def has_parent_id(self) -> bool:
        return _present(self.parent_id)

    def has_reference_id(self) -> bool:
        return _present(self.reference_id)

    def has_context_id(self) -> bool:
        return _present(self.context_id)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        for key in ("id", "parent_id", "reference_id", "context_id"):
            value = getattr(self, key)
            if value is not None:
                d[key] = value
        return d


class QueryRequestBuilder[T]:
    """Fluent builder for :class:`QueryRequest`."""

    def __init__(self, entity_type: type[T]) -> None:
        self._entity_type = require_entity_type(entity_type, operation=QueryRequest.operation)
        self._id: str | None = None
        self._parent_id: str | None = None
        self._reference_id: str | None = None
        self._context_id: str | None = None

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    def id(self, id: str | None) -> Self:
        self._id = id
        return self

    def parent_id(self, parent_id: str | None) -> Self:
        self._parent_id = parent_id
        return self

    def reference_id(self, reference_id: str | None) -> Self:
        self._reference_id = reference_id
        return self

    def context_id(self, context_id: str | None) -> Self:
        self._context_id = context_id
        return self

    def with_identifiers(self, id: str | None, parent_id: str | None) -> Self:
        """Set *id* and *parent_id* in one call."""
        self._id = id
        self._parent_id = parent_id
        return self

    def build(self) -> QueryRequest[T]:
        request = QueryRequest(
            self._entity_type,
            id=self._id,
            parent_id=self._parent_id,
            reference_id=self._reference_id,
            context_id=self._context_id,
        )
        logger.debug(
            "request_built",
            operation=request.operation,
            entity_type=type_name(self._entity_type),
        )
        return request


@dataclass(init=False)
class QueryResponse[T](OperationResponse):
    """Outcome of a query.

    *results* is the second positional argument and is always a list:
    ``None`` becomes ``[]`` and any other iterable is copied into a list in
    its original order, both at construction and on later assignment.
    """

    results: list[T] = field(default_factory=list)

    def __init__(
        self,
        status: Status | str | None = None,
        results: Iterable[T] | None = None,
        message: str | None = None,
        metadata: ResultMetadata | None = None,
    ) -> None:
        self.status = status
        self.results = results
        self.message = message
        self.metadata = metadata

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "results":
            value = [] if value is None else list(value)
        super().__setattr__(name, value)

    @classmethod
    def ok(
        cls,
        results: Iterable[T] | None = None,
        *,
        message: str | None = None,
        metadata: ResultMetadata | None = None,
    ) -> Self:
        """Create a successful response carrying *results*."""
        return cls(Status.SUCCESS, message=message, metadata=metadata, results=results)

    def is_empty(self) -> bool:
        return not self.results

    def size(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[T]:
        return iter(self.results)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["results"] = list(self.results)
        d["count"] = len(self.results)
        return d


class QueryOperation:
    """Query request/response pair."""

    Request = QueryRequest
    Builder = QueryRequestBuilder
    Response = QueryResponse


__all__ = [
    "QueryRequest",
    "QueryRequestBuilder",
    "QueryResponse",
    "QueryOperation",
]

"""
Create operation: request, builder, and response.

Example::

    request = OperationRequest.create(User).entity(User(name="ada")).build()
    response = CreateResponse.ok(saved_user)
    if response.is_success():
        print(response.entity)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Self

from requestbuilder.core.logging import get_logger
from requestbuilder.ops.request import OperationRequest, require_entity_type, type_name
from requestbuilder.ops.response import OperationResponse, ResultMetadata, Status

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateRequest[T](OperationRequest[T]):
    """Request to create *entity*."""

    operation: ClassVar[str] = "create"

    entity: T | None = None

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        if self.entity is not None:
            d["entity"] = self.entity
        return d


class CreateRequestBuilder[T]:
    """Fluent builder for :class:`CreateRequest`.

    The entity is held by reference; every ``build()`` snapshots the
    reference current at that moment.
    """

    def __init__(self, entity_type: type[T]) -> None:
        self._entity_type = require_entity_type(entity_type, operation=CreateRequest.operation)
        self._entity: T | None = None

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    def entity(self, entity: T) -> Self:
        """Set the entity to create."""
        self._entity = entity
        return self

    def build(self) -> CreateRequest[T]:
        request = CreateRequest(self._entity_type, self._entity)
        logger.debug(
            "request_built",
            operation=request.operation,
            entity_type=type_name(self._entity_type),
        )
        return request


@dataclass(init=False)
class CreateResponse[T](OperationResponse):
    """Outcome of a create; *entity* is the created entity (usually ``None`` on failure).

    The entity is the second positional argument, so
    ``CreateResponse(Status.SUCCESS, user)`` carries *user*; pass a message
    by keyword: ``CreateResponse(Status.FAILURE, message="duplicate")``.
    """

    entity: T | None = None

    def __init__(
        self,
        status: Status | str | None = None,
        entity: T | None = None,
        message: str | None = None,
        metadata: ResultMetadata | None = None,
    ) -> None:
        self.status = status
        self.entity = entity
        self.message = message
        self.metadata = metadata

    @classmethod
    def ok(
        cls,
        entity: T | None = None,
        *,
        message: str | None = None,
        metadata: ResultMetadata | None = None,
    ) -> Self:
        """Create a successful response carrying the created *entity*."""
        return cls(Status.SUCCESS, message=message, metadata=metadata, entity=entity)

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        if self.entity is not None:
            d["entity"] = self.entity
        return d


class CreateOperation:
    """Create request/response pair."""

    Request = CreateRequest
    Builder = CreateRequestBuilder
    Response = CreateResponse


__all__ = [
    "CreateRequest",
    "CreateRequestBuilder",
    "CreateResponse",
    "CreateOperation",
]

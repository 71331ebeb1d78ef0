"""
Delete operation: request, builder, and response.

Example::

    request = OperationRequest.delete(Comment).id("123").parent_id("post-456").build()
    response = DeleteResponse(Status.FAILURE, "Entity not found")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Self

from requestbuilder.core.logging import get_logger
from requestbuilder.ops.request import OperationRequest, require_entity_type, type_name
from requestbuilder.ops.response import OperationResponse

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeleteRequest[T](OperationRequest[T]):
    """Request to delete the entity identified by *id*.

    Attributes:
        id: Primary identifier of the entity.
        parent_id: Identifier of the owning entity, for hierarchical entities.
    """

    operation: ClassVar[str] = "delete"

    id: str | None = None
    parent_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        if self.id is not None:
            d["id"] = self.id
        if self.parent_id is not None:
            d["parent_id"] = self.parent_id
        return d


class DeleteRequestBuilder[T]:
    """Fluent builder for :class:`DeleteRequest`."""

    def __init__(self, entity_type: type[T]) -> None:
        self._entity_type = require_entity_type(entity_type, operation=DeleteRequest.operation)
        self._id: str | None = None
        self._parent_id: str | None = None

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    def id(self, id: str | None) -> Self:
        """Set the primary identifier of the entity to delete."""
        self._id = id
        return self

    def parent_id(self, parent_id: str | None) -> Self:
        """Set the parent identifier for hierarchical deletes."""
        self._parent_id = parent_id
        return self

    def build(self) -> DeleteRequest[T]:
        request = DeleteRequest(self._entity_type, self._id, self._parent_id)
        logger.debug(
            "request_built",
            operation=request.operation,
            entity_type=type_name(self._entity_type),
        )
        return request


@dataclass
class DeleteResponse[T](OperationResponse):
    """Outcome of a delete."""


class DeleteOperation:
    """Delete request/response pair."""

    Request = DeleteRequest
    Builder = DeleteRequestBuilder
    Response = DeleteResponse


__all__ = [
    "DeleteRequest",
    "DeleteRequestBuilder",
    "DeleteResponse",
    "DeleteOperation",
]

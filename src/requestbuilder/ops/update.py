"""
Update operation: request, builder, and response.

An update request carries the entity with its new values; the response
carries no payload beyond status, message and metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Self

from requestbuilder.core.logging import get_logger
from requestbuilder.ops.request import OperationRequest, require_entity_type, type_name
from requestbuilder.ops.response import OperationResponse

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpdateRequest[T](OperationRequest[T]):
    """Request to update an existing entity to the values of *entity*."""

    operation: ClassVar[str] = "update"

    entity: T | None = None

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        if self.entity is not None:
            d["entity"] = self.entity
        return d


class UpdateRequestBuilder[T]:
    """Fluent builder for :class:`UpdateRequest`."""

    def __init__(self, entity_type: type[T]) -> None:
        self._entity_type = require_entity_type(entity_type, operation=UpdateRequest.operation)
        self._entity: T | None = None

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    def entity(self, entity: T) -> Self:
        """Set the entity holding the updated values."""
        self._entity = entity
        return self

    def build(self) -> UpdateRequest[T]:
        request = UpdateRequest(self._entity_type, self._entity)
        logger.debug(
            "request_built",
            operation=request.operation,
            entity_type=type_name(self._entity_type),
        )
        return request


@dataclass
class UpdateResponse[T](OperationResponse):
    """Outcome of an update."""


class UpdateOperation:
    """Update request/response pair."""

    Request = UpdateRequest
    Builder = UpdateRequestBuilder
    Response = UpdateResponse


__all__ = [
    "UpdateRequest",
    "UpdateRequestBuilder",
    "UpdateResponse",
    "UpdateOperation",
]

"""
Base request type and builder entry points.

Every request names the entity type it concerns.  The four static factories
on :class:`OperationRequest` return a mutable builder for one operation
kind; ``build()`` then produces an immutable request value::

    request = OperationRequest.delete(User).id("123").parent_id("org-9").build()

Requests are frozen dataclasses: two requests built from the same builder
state compare equal, and any attempt to assign to a field raises
``dataclasses.FrozenInstanceError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from requestbuilder.core.errors import InvalidEntityTypeError

if TYPE_CHECKING:
    from requestbuilder.ops.create import CreateRequestBuilder
    from requestbuilder.ops.delete import DeleteRequestBuilder
    from requestbuilder.ops.query import QueryRequestBuilder
    from requestbuilder.ops.update import UpdateRequestBuilder


def require_entity_type[T](entity_type: type[T], *, operation: str) -> type[T]:
    """Return *entity_type* unchanged, or raise if it is not a class."""
    if not isinstance(entity_type, type):
        raise InvalidEntityTypeError(
            f"entity_type must be a class, got {entity_type!r}",
            context={"operation": operation},
        )
    return entity_type


def type_name(entity_type: type | None) -> str | None:
    """Qualified name of *entity_type* for logs (``None`` passes through)."""
    if entity_type is None:
        return None
    return f"{entity_type.__module__}.{entity_type.__qualname__}"


@dataclass(frozen=True)
class OperationRequest[T]:
    """Base for all operation requests.

    Attributes:
        entity_type: Class of the entity the request operates on.  ``None``
            only for a blank request constructed without arguments.
    """

    operation: ClassVar[str] = "operation"

    entity_type: type[T] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (for logging and debugging)."""
        return {"operation": self.operation, "entity_type": type_name(self.entity_type)}

    # ------------------------------------------------------------------ #
    # Builder factories
    # ------------------------------------------------------------------ #

    @staticmethod
    def create[E](entity_type: type[E]) -> CreateRequestBuilder[E]:
        """Start a create request for *entity_type*."""
        from requestbuilder.ops.create import CreateRequestBuilder

        return CreateRequestBuilder(entity_type)

    @staticmethod
    def query[E](entity_type: type[E]) -> QueryRequestBuilder[E]:
        """Start a query request for *entity_type*."""
        from requestbuilder.ops.query import QueryRequestBuilder

        return QueryRequestBuilder(entity_type)

    @staticmethod
    def update[E](entity_type: type[E]) -> UpdateRequestBuilder[E]:
        """Start an update request for *entity_type*."""
        from requestbuilder.ops.update import UpdateRequestBuilder

        return UpdateRequestBuilder(entity_type)

    @staticmethod
    def delete[E](entity_type: type[E]) -> DeleteRequestBuilder[E]:
        """Start a delete request for *entity_type*."""
        from requestbuilder.ops.delete import DeleteRequestBuilder

        return DeleteRequestBuilder(entity_type)


__all__ = [
    "OperationRequest",
    "require_entity_type",
    "type_name",
]

"""
Executor contracts.

requestbuilder never runs an operation.  Whatever does (a repository, a
service client, an in-memory fake in tests) satisfies one of these
protocols: it accepts the request type for one operation kind and returns
the matching response type.

Example:
    >>> class InMemoryUsers:
    ...     def handle(self, request: CreateRequest[User]) -> CreateResponse[User]:
    ...         return CreateResponse.ok(request.entity)
    >>> isinstance(InMemoryUsers(), CreateHandler)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from requestbuilder.ops.create import CreateRequest, CreateResponse
    from requestbuilder.ops.delete import DeleteRequest, DeleteResponse
    from requestbuilder.ops.query import QueryRequest, QueryResponse
    from requestbuilder.ops.update import UpdateRequest, UpdateResponse


@runtime_checkable
class CreateHandler[T](Protocol):
    def handle(self, request: CreateRequest[T]) -> CreateResponse[T]: ...


@runtime_checkable
class QueryHandler[T](Protocol):
    def handle(self, request: QueryRequest[T]) -> QueryResponse[T]: ...


@runtime_checkable
class UpdateHandler[T](Protocol):
    def handle(self, request: UpdateRequest[T]) -> UpdateResponse[T]: ...


@runtime_checkable
class DeleteHandler[T](Protocol):
    def handle(self, request: DeleteRequest[T]) -> DeleteResponse[T]: ...


__all__ = [
    "CreateHandler",
    "QueryHandler",
    "UpdateHandler",
    "DeleteHandler",
]

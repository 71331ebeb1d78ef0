"""
Typed requests and responses for Create, Query, Update, and Delete.

Usage::

    from requestbuilder.ops import OperationRequest, QueryResponse, Status

    request = OperationRequest.query(User).id("42").build()
    response = QueryResponse(Status.SUCCESS, results=[user])
    assert response.is_success() and response.size() == 1

The module-level :func:`create`, :func:`query`, :func:`update` and
:func:`delete` are the same factories as the static methods on
:class:`OperationRequest`.
"""

from requestbuilder.ops.create import (
    CreateOperation,
    CreateRequest,
    CreateRequestBuilder,
    CreateResponse,
)
from requestbuilder.ops.delete import (
    DeleteOperation,
    DeleteRequest,
    DeleteRequestBuilder,
    DeleteResponse,
)
from requestbuilder.ops.query import (
    QueryOperation,
    QueryRequest,
    QueryRequestBuilder,
    QueryResponse,
)
from requestbuilder.ops.request import OperationRequest
from requestbuilder.ops.response import OperationResponse, ResultMetadata, Status
from requestbuilder.ops.update import (
    UpdateOperation,
    UpdateRequest,
    UpdateRequestBuilder,
    UpdateResponse,
)

create = OperationRequest.create
query = OperationRequest.query
update = OperationRequest.update
delete = OperationRequest.delete

__all__ = [
    "OperationRequest",
    "OperationResponse",
    "ResultMetadata",
    "Status",
    "CreateOperation",
    "CreateRequest",
    "CreateRequestBuilder",
    "CreateResponse",
    "DeleteOperation",
    "DeleteRequest",
    "DeleteRequestBuilder",
    "DeleteResponse",
    "QueryOperation",
    "QueryRequest",
    "QueryRequestBuilder",
    "QueryResponse",
    "UpdateOperation",
    "UpdateRequest",
    "UpdateRequestBuilder",
    "UpdateResponse",
    "create",
    "query",
    "update",
    "delete",
]

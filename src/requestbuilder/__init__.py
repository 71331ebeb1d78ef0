"""
requestbuilder: typed request builders and response envelopes for CRUD
operations against arbitrary entity types.

    >>> from requestbuilder import OperationRequest
    >>> request = OperationRequest.delete(User).id("123").build()
    >>> request.id
    '123'

Nothing here executes an operation; executors implement the protocols in
:mod:`requestbuilder.core.protocols`.
"""

from requestbuilder.core.errors import (
    AbstractMetadataError,
    InvalidEntityTypeError,
    InvalidStatusError,
    RequestBuilderError,
)
from requestbuilder.ops import (
    CreateOperation,
    CreateRequest,
    CreateRequestBuilder,
    CreateResponse,
    DeleteOperation,
    DeleteRequest,
    DeleteRequestBuilder,
    DeleteResponse,
    OperationRequest,
    OperationResponse,
    QueryOperation,
    QueryRequest,
    QueryRequestBuilder,
    QueryResponse,
    ResultMetadata,
    Status,
    UpdateOperation,
    UpdateRequest,
    UpdateRequestBuilder,
    UpdateResponse,
    create,
    delete,
    query,
    update,
)

__version__ = "0.1.0"

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
    "RequestBuilderError",
    "InvalidEntityTypeError",
    "InvalidStatusError",
    "AbstractMetadataError",
]

"""Cross-cutting support: errors, settings, logging, and executor protocols."""

from requestbuilder.core.errors import (
    AbstractMetadataError,
    InvalidEntityTypeError,
    InvalidStatusError,
    RequestBuilderError,
)
from requestbuilder.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)
from requestbuilder.core.protocols import (
    CreateHandler,
    DeleteHandler,
    QueryHandler,
    UpdateHandler,
)
from requestbuilder.core.settings import (
    RequestBuilderSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "RequestBuilderError",
    "InvalidEntityTypeError",
    "InvalidStatusError",
    "AbstractMetadataError",
    "LogContext",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "unbind_context",
    "CreateHandler",
    "DeleteHandler",
    "QueryHandler",
    "UpdateHandler",
    "RequestBuilderSettings",
    "clear_settings_cache",
    "get_settings",
]

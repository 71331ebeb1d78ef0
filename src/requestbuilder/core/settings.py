"""Settings for requestbuilder.

The library has no runtime knobs of its own beyond observability, so
``RequestBuilderSettings`` only carries what :func:`configure_logging`
needs.  Values come from ``REQUESTBUILDER_*`` environment variables or a
``.env`` file.

Examples:
    >>> from requestbuilder.core.settings import get_settings
    >>> get_settings().log_level
    'INFO'
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console", "auto"]


class RequestBuilderSettings(BaseSettings):
    """Environment-driven configuration.

    Fields
    ──────
    log_level      : Minimum structlog level
    log_format     : ``json``, ``console``, or ``auto`` (JSON unless stdout is a tty)
    service_name   : Value of the ``service.name`` field on every log event
    log_timestamps : Add an ISO timestamp to every log event
    """

    model_config = SettingsConfigDict(
        env_prefix="REQUESTBUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: LogLevel = Field(default="INFO")
    log_format: LogFormat = Field(default="auto")
    service_name: str = Field(default="requestbuilder", min_length=1)
    log_timestamps: bool = Field(default=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower_format(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @property
    def json_format(self) -> bool | None:
        """``True``/``False`` for an explicit format, ``None`` for auto-detect."""
        if self.log_format == "auto":
            return None
        return self.log_format == "json"


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, RequestBuilderSettings] = {}


def get_settings(*, _force_reload: bool = False) -> RequestBuilderSettings:
    """Load, validate, and cache a :class:`RequestBuilderSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]
    settings = RequestBuilderSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = [
    "RequestBuilderSettings",
    "get_settings",
    "clear_settings_cache",
]

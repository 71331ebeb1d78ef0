"""
Shared pytest fixtures for requestbuilder tests.

This module provides:
- Sample entity instances (classes live in sample_entities.py)
- A concrete ResultMetadata instance
- Isolation of structlog configuration, log context and cached settings
"""

from __future__ import annotations

import pytest
import structlog

from requestbuilder.core.logging import clear_context
from requestbuilder.core.settings import clear_settings_cache
from sample_entities import Comment, SampleMetadata, User


@pytest.fixture(autouse=True)
def _isolate_logging_and_settings(monkeypatch, tmp_path):
    """Reset global logging/settings state and keep stray .env files out."""
    monkeypatch.chdir(tmp_path)
    for key in (
        "REQUESTBUILDER_LOG_LEVEL",
        "REQUESTBUILDER_LOG_FORMAT",
        "REQUESTBUILDER_SERVICE_NAME",
        "REQUESTBUILDER_LOG_TIMESTAMPS",
    ):
        monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    clear_context()
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    clear_context()
    clear_settings_cache()


@pytest.fixture
def user() -> User:
    return User(name="ada", email="ada@example.com")


@pytest.fixture
def comment() -> Comment:
    return Comment(body="first!", post_id="post-456")


@pytest.fixture
def sample_metadata() -> SampleMetadata:
    return SampleMetadata("Test metadata", affected_rows=3)

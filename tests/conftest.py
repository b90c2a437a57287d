"""
Shared fixtures for builder and configuration tests
"""

from collections.abc import Iterator

import pytest
from loguru import logger

from esquery import QueryBuilder
from esquery.config.general import CONFIG


@pytest.fixture
def builder() -> QueryBuilder:
    return QueryBuilder()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted while the test runs."""
    messages: list[str] = []
    logger.enable("esquery")
    sink_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="TRACE")
    yield messages
    logger.remove(sink_id)
    logger.disable("esquery")


@pytest.fixture
def query_defaults(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Override the builder defaults for a single test."""
    monkeypatch.setattr(CONFIG.query, "default_size", 50)
    monkeypatch.setattr(CONFIG.query, "default_from", 7)
    monkeypatch.setattr(CONFIG.query, "default_sort_direction", "asc")
    yield

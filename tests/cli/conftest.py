"""Shared fixtures for CLI tests."""

import logging
from collections.abc import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to CliRunner's streams once a test finishes."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()

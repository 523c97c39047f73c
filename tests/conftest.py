"""Test configuration and fixtures."""

import pytest

from debug_iter import config
from debug_iter.adapters.sink.memory_sink import InMemorySink


@pytest.fixture(autouse=True)
def reset_settings():
    """Restore default settings around every test."""
    config.configure(None)
    yield
    config.configure(None)


@pytest.fixture
def sink() -> InMemorySink:
    return InMemorySink()

"""
Shared fixtures for integration tests.

Provides a full application client backed by the in-memory repository.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.config.settings import Settings


@pytest.fixture
def client(memory_settings: Settings) -> Generator[TestClient, None, None]:
    """Client for the full app; entering the context runs the lifespan."""
    with TestClient(create_app(memory_settings)) as test_client:
        yield test_client

"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings using the in-memory backend
- Mocked use case collaborators
- PostgreSQL connection pool (skipped when no database is reachable)
"""

from collections.abc import Generator
from unittest.mock import Mock

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.postgres import run_migrations
from src.config.settings import Settings, get_settings
from src.domain.models import User


@pytest.fixture
def memory_settings() -> Settings:
    """Settings that need no database."""
    return Settings(repository_backend="memory", email_validator_backend="regex")


@pytest.fixture
def created_user() -> User:
    return User(id="1", email="a@b.com", password="p")


@pytest.fixture
def repository(created_user: User) -> Mock:
    """Repository mock: no existing user, create returns created_user."""
    repo = Mock()
    repo.find_by_email.return_value = None
    repo.create.return_value = created_user
    return repo


@pytest.fixture
def email_validator() -> Mock:
    """Email validator mock that accepts every address."""
    validator = Mock()
    validator.validate.return_value = True
    return validator


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Connection pool against DATABASE_URL with migrations applied."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=False,
    )
    try:
        pool.open(wait=True, timeout=3)
    except PoolTimeout:
        pool.close()
        pytest.skip("PostgreSQL not reachable")
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_pool(pool: ConnectionPool) -> ConnectionPool:
    """Pool with an empty users table."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    return pool

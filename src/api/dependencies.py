"""
FastAPI dependencies - Collaborator construction and injection.

Collaborators are built once at process start (see the lifespan in
src.api.main) and stored in app.state. Routes and the GraphQL context
receive them through Depends() factories instead of module-level globals.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.repository import InMemoryUserRepository, PostgresUserRepository
from src.adapters.validation import LibraryEmailValidator, RegexEmailValidator
from src.config.settings import Settings
from src.domain.ports import EmailValidator, UserRepository
from src.domain.registration import UserRegistration


def build_email_validator(settings: Settings) -> EmailValidator:
    """Select the email validator configured by email_validator_backend."""
    if settings.email_validator_backend == "library":
        return LibraryEmailValidator()
    return RegexEmailValidator()


def build_user_repository(settings: Settings, pool: ConnectionPool | None) -> UserRepository:
    """
    Select the repository configured by repository_backend.

    Args:
        settings: Application settings
        pool: Connection pool, required for the postgres backend

    Raises:
        ValueError: If the postgres backend is selected without a pool
    """
    if settings.repository_backend == "memory":
        return InMemoryUserRepository()
    if pool is None:
        raise ValueError("postgres repository backend requires a connection pool")
    return PostgresUserRepository(pool)


def build_user_registration(settings: Settings, pool: ConnectionPool | None = None) -> UserRegistration:
    """Wire the registration use case with its configured collaborators."""
    return UserRegistration(
        repository=build_user_repository(settings, pool),
        email_validator=build_email_validator(settings),
    )


def get_pool(request: Request) -> ConnectionPool | None:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup; it is None when the
    memory backend is configured.
    """
    return request.app.state.pool


def get_user_registration(request: Request) -> UserRegistration:
    """Get the use case instance built at startup."""
    return request.app.state.user_registration

"""Repository adapters - User persistence implementations."""

from .memory import InMemoryUserRepository
from .postgres import PostgresUserRepository, run_migrations

__all__ = ["InMemoryUserRepository", "PostgresUserRepository", "run_migrations"]

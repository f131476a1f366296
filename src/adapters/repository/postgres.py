"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness
----------
The users table carries a UNIQUE constraint on email. create() inserts with
ON CONFLICT (email) DO NOTHING, so when two registrations for the same email
race past the use case's find_by_email() check, exactly one INSERT returns a
row and the other raises UserAlreadyExists.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

from src.domain.exceptions import UserAlreadyExists
from src.domain.models import NewUser, User

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent.parent.parent.parent / "migrations"


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def create(self, user: NewUser) -> User:
        """
        Insert a new user row.

        Args:
            user: Email and password to store

        Returns:
            The stored user with its database-generated id

        Raises:
            UserAlreadyExists: If the email is already present
        """
        sql = """
            INSERT INTO users (email, password)
            VALUES (%s, %s)
            ON CONFLICT (email) DO NOTHING
            RETURNING id, email, password
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (user.email, user.password))
            row = cursor.fetchone()
            conn.commit()

        if row is None:
            raise UserAlreadyExists()
        return _to_user(row)

    def find_by_email(self, email: str) -> User | None:
        """Fetch the user with this exact email, or None."""
        sql = """
            SELECT id, email, password
            FROM users
            WHERE email = %s
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()

        return _to_user(row) if row is not None else None


def _to_user(row: tuple) -> User:
    # id comes back as uuid.UUID
    return User(id=str(row[0]), email=row[1], password=row[2])


def run_migrations(pool: ConnectionPool, migrations_dir: Path = MIGRATIONS_DIR) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
        migrations_dir: Directory holding the *.sql files

    Raises:
        RuntimeError: If a migration fails (original error chained)
    """
    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e

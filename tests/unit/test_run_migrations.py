"""
Unit tests for run_migrations.

Uses a mocked connection pool, so no database is required.
"""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.adapters.repository.postgres import MIGRATIONS_DIR, run_migrations


def mock_pool() -> tuple[MagicMock, MagicMock]:
    """Pool mock and the connection its context manager yields."""
    pool = MagicMock()
    conn = pool.connection.return_value.__enter__.return_value
    return pool, conn


class TestRunMigrations:
    """Tests for migration discovery, execution and logging."""

    def test_executes_files_in_sorted_order(self, tmp_path: Path) -> None:
        (tmp_path / "002_second.sql").write_text("SELECT 2")
        (tmp_path / "001_first.sql").write_text("SELECT 1")
        pool, conn = mock_pool()

        run_migrations(pool, tmp_path)

        assert [c.args[0] for c in conn.execute.call_args_list] == ["SELECT 1", "SELECT 2"]

    def test_logs_each_migration(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "001_users.sql").write_text("SELECT 1")
        pool, _ = mock_pool()

        with caplog.at_level(logging.INFO):
            run_migrations(pool, tmp_path)

        assert "Running 1 migration(s)" in caplog.text
        assert "Executing migration: 001_users.sql" in caplog.text
        assert "Migration complete: 001_users.sql" in caplog.text

    def test_missing_directory_warns_and_skips(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        pool, _ = mock_pool()
        missing = tmp_path / "absent"

        run_migrations(pool, missing)

        assert f"Migrations directory not found: {missing}" in caplog.text
        pool.connection.assert_not_called()

    def test_empty_directory_skips(self, tmp_path: Path) -> None:
        pool, _ = mock_pool()

        run_migrations(pool, tmp_path)

        pool.connection.assert_not_called()

    def test_failure_raises_runtime_error_with_cause(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (tmp_path / "001_broken.sql").write_text("NOT SQL")
        pool, conn = mock_pool()
        cause = ValueError("syntax error")
        conn.execute.side_effect = cause

        with pytest.raises(RuntimeError, match="001_broken.sql") as exc_info:
            run_migrations(pool, tmp_path)

        assert exc_info.value.__cause__ is cause
        assert "Migration failed: 001_broken.sql - syntax error" in caplog.text

    def test_default_directory_ships_users_table(self) -> None:
        sql_files = sorted(MIGRATIONS_DIR.glob("*.sql"))

        assert sql_files
        assert "CREATE TABLE IF NOT EXISTS users" in sql_files[0].read_text()

"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness Design:
-----------------
Email uniqueness is enforced by the unique index accounts_email_lower_key
on lower(email) (see migrations/001_create_accounts.sql). The insert is a
single statement in its own transaction, so:

1. **No read-then-write gap**: there is no SELECT before the INSERT. Two
   concurrent inserts of the same email are serialized by the index and
   exactly one commits; the other fails with UniqueViolation.

2. **Atomicity**: a failed or interrupted insert is rolled back by the
   connection pool, leaving no partial row behind.

3. **Error translation**: driver errors never leave this module. A
   violation of the email index becomes ConflictError("email"); every
   other psycopg error becomes StorageError.
"""

import logging
from pathlib import Path

import psycopg
from psycopg import errors
from psycopg_pool import ConnectionPool

from src.domain.exceptions import ConflictError, StorageError
from src.domain.models import Account

logger = logging.getLogger(__name__)

# Unique index name -> domain field it protects
_UNIQUE_CONSTRAINT_FIELDS = {
    "accounts_email_lower_key": "email",
}


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

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

    def insert(self, email: str, display_name: str, password_hash: str) -> Account:
        """
        Insert a new account and return the stored row.

        Args:
            email: Email exactly as submitted (compared case-insensitively)
            display_name: Display name exactly as submitted
            password_hash: Opaque password hash

        Returns:
            Account with id, inserted_at and updated_at assigned by the database

        Raises:
            ConflictError: If the email is already taken (any letter case)
            StorageError: On any other database failure
        """
        sql = """
            INSERT INTO accounts (email, display_name, password_hash)
            VALUES (%s, %s, %s)
            RETURNING id, email, display_name, password_hash, inserted_at, updated_at
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email, display_name, password_hash))
                row = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation as e:
            constraint = e.diag.constraint_name or ""
            field = _UNIQUE_CONSTRAINT_FIELDS.get(constraint)
            if field is None:
                raise StorageError(f"Unexpected unique violation: {constraint}") from e
            raise ConflictError(field, constraint) from e
        except psycopg.Error as e:
            logger.debug("Account insert failed: %s", e.__class__.__name__)
            raise StorageError("Account insert failed") from e

        if row is None:
            raise StorageError("Account insert returned no row")

        return Account(
            id=row[0],
            email=row[1],
            display_name=row[2],
            password_hash=row[3],
            inserted_at=row[4],
            updated_at=row[5],
        )


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

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

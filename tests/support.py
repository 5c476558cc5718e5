"""
Test helpers shared across unit, integration and adversarial suites.

Provides:
- A valid registration request builder
- An in-memory account repository mimicking the storage constraint
- Row counting against PostgreSQL
"""

import itertools
import threading
from datetime import UTC, datetime

from psycopg_pool import ConnectionPool

from src.domain.exceptions import ConflictError
from src.domain.models import Account, RegistrationRequest

VALID_PASSWORD = "foobar123123"


class InMemoryAccountRepository:
    """
    Implements AccountRepository protocol in memory.

    Mirrors the unique index on lower(email): the check and the write
    happen under one lock, so concurrent inserts behave like the database.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self.accounts: dict[str, Account] = {}

    def insert(self, email: str, display_name: str, password_hash: str) -> Account:
        key = email.lower()
        with self._lock:
            if key in self.accounts:
                raise ConflictError("email", "accounts_email_lower_key")
            now = datetime.now(UTC)
            account = Account(
                id=next(self._ids),
                email=email,
                display_name=display_name,
                password_hash=password_hash,
                inserted_at=now,
                updated_at=now,
            )
            self.accounts[key] = account
            return account


def make_request(**overrides: str) -> RegistrationRequest:
    """Build a valid registration request, overriding selected fields."""
    fields = {
        "email": "user@example.com",
        "display_name": "Jane",
        "password": VALID_PASSWORD,
        "password_confirmation": VALID_PASSWORD,
    }
    fields.update(overrides)
    return RegistrationRequest(**fields)


def count_accounts(pool: ConnectionPool, email: str) -> int:
    """Count stored accounts matching email case-insensitively."""
    with pool.connection() as conn, conn.cursor() as cursor:
        cursor.execute("SELECT COUNT(*) FROM accounts WHERE lower(email) = lower(%s)", (email,))
        return cursor.fetchone()[0]

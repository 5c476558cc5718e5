"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- An in-memory account repository mimicking the storage constraint
- A fast Argon2id hasher (minimal cost parameters)
- A registration service wired with both
- Database availability checks for integration/adversarial tests
"""

import psycopg
import pytest

from src.adapters.hashing.argon2id import Argon2CredentialHasher
from src.config.settings import get_settings
from src.domain.registration import RegistrationService
from tests.support import InMemoryAccountRepository


@pytest.fixture(scope="session")
def hasher() -> Argon2CredentialHasher:
    """Argon2id hasher with minimal cost to keep tests fast."""
    return Argon2CredentialHasher(time_cost=1, memory_cost=1024, parallelism=1)


@pytest.fixture
def memory_repository() -> InMemoryAccountRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryAccountRepository()


@pytest.fixture
def service(
    memory_repository: InMemoryAccountRepository, hasher: Argon2CredentialHasher
) -> RegistrationService:
    """Registration service over the in-memory repository."""
    return RegistrationService(repository=memory_repository, hasher=hasher)


@pytest.fixture(scope="session")
def database_url() -> str:
    """
    Database URL from settings, skipping the test if PostgreSQL is unreachable.

    Integration and adversarial tests need a running database
    (DATABASE_URL or .env); they are skipped rather than failed without one.
    """
    url = get_settings().database_url
    try:
        with psycopg.connect(url, connect_timeout=2):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    return url

"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from functools import lru_cache

from fastapi import Depends, Request
from psycopg_pool import ConnectionPool

from src.adapters.hashing.argon2id import Argon2CredentialHasher
from src.adapters.repository.postgres import PostgresAccountRepository
from src.config.settings import get_settings
from src.domain.registration import RegistrationService
from src.domain.validation import PasswordPolicy, RegistrationValidator


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresAccountRepository(pool)


@lru_cache
def get_hasher() -> Argon2CredentialHasher:
    """Get Argon2id hasher configured from settings (singleton)."""
    settings = get_settings()
    return Argon2CredentialHasher(
        time_cost=settings.hash_time_cost,
        memory_cost=settings.hash_memory_cost,
        parallelism=settings.hash_parallelism,
        salt_length=settings.hash_salt_length,
        hash_length=settings.hash_length,
    )


@lru_cache
def get_validator() -> RegistrationValidator:
    """Get registration validator configured from settings (singleton)."""
    settings = get_settings()
    policy = PasswordPolicy(
        min_length=settings.min_password_length,
        max_length=settings.max_password_length,
    )
    return RegistrationValidator(policy=policy)


def get_registration_service(
    repository: PostgresAccountRepository = Depends(get_repository),
    hasher: Argon2CredentialHasher = Depends(get_hasher),
    validator: RegistrationValidator = Depends(get_validator),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, hasher and validator for the domain service.
    """
    return RegistrationService(repository=repository, hasher=hasher, validator=validator)

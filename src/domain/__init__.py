"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for account registration.
It defines its own port interfaces for infrastructure abstraction,
ensuring true hexagonal architecture decoupling.
"""

from .exceptions import ConflictError, CredentialHashingError, RegistrationError, StorageError
from .models import (
    Account,
    Fault,
    FieldError,
    FieldErrors,
    Registered,
    RegistrationRequest,
    RegistrationResult,
    Rejected,
)
from .ports import AccountRepository, CredentialHasher
from .registration import RegistrationService
from .validation import PasswordPolicy, RegistrationValidator, ValidationMessages

__all__ = [
    "Account",
    "AccountRepository",
    "ConflictError",
    "CredentialHasher",
    "CredentialHashingError",
    "Fault",
    "FieldError",
    "FieldErrors",
    "PasswordPolicy",
    "Registered",
    "RegistrationError",
    "RegistrationRequest",
    "RegistrationResult",
    "RegistrationService",
    "RegistrationValidator",
    "Rejected",
    "StorageError",
    "ValidationMessages",
]

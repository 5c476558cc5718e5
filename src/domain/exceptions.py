"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
failures without leaking infrastructure details. Adapters translate
driver and library errors into these types.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ConflictError(RegistrationError):
    """A storage uniqueness constraint rejected the insert."""

    def __init__(self, field: str, constraint: str) -> None:
        super().__init__(f"{field} violates unique constraint {constraint}")
        self.field = field
        self.constraint = constraint


class StorageError(RegistrationError):
    """Persistence failed for a reason other than a uniqueness conflict."""

    pass


class CredentialHashingError(RegistrationError):
    """The password hashing engine failed (resources or configuration)."""

    pass

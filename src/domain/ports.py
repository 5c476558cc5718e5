"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import Account


class CredentialHasher(Protocol):
    """Port interface for one-way password hashing."""

    def hash(self, password: str) -> str:
        """
        Derive a salted, self-describing hash of a plaintext password.

        Args:
            password: Plaintext password (already validated)

        Returns:
            Opaque hash string embedding algorithm and parameters

        Raises:
            CredentialHashingError: If the hashing engine fails
        """
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Returns:
            True if the password matches, False otherwise
        """
        ...


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def insert(self, email: str, display_name: str, password_hash: str) -> Account:
        """
        Atomically insert a new account.

        Uniqueness of the email (case-insensitive) is enforced by storage
        at insert time. This is the authoritative check; concurrent inserts
        of the same email result in exactly one success.

        Args:
            email: Email exactly as submitted
            display_name: Display name exactly as submitted
            password_hash: Opaque hash from CredentialHasher

        Returns:
            The created Account with identifier and timestamps assigned

        Raises:
            ConflictError: If the email is already taken
            StorageError: On any other persistence failure
        """
        ...

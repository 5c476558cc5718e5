"""Hashing adapters - Password hashing implementations."""

from .argon2id import Argon2CredentialHasher

__all__ = ["Argon2CredentialHasher"]

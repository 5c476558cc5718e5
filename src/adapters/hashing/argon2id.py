"""
Argon2id credential hasher - Implements CredentialHasher protocol.

This module provides the password hashing adapter using pwdlib's
Argon2 hasher (backed by argon2-cffi) with explicit parameters.

Hash Format:
-----------
Hashes are PHC strings that embed algorithm, version and parameters:

    $argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>

verify() reads the parameters from the stored hash rather than from this
hasher's configuration, so existing hashes keep verifying after the
parameters are tightened.
"""

from argon2.exceptions import HashingError
from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher

from src.domain.exceptions import CredentialHashingError

DEFAULT_TIME_COST = 3
DEFAULT_MEMORY_COST = 65536  # KiB
DEFAULT_PARALLELISM = 4
DEFAULT_SALT_LENGTH = 16
DEFAULT_HASH_LENGTH = 32


class Argon2CredentialHasher:
    """
    Implements CredentialHasher protocol via pwdlib/Argon2id.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Instances are stateless after construction and safe to share
    across threads.
    """

    def __init__(
        self,
        time_cost: int = DEFAULT_TIME_COST,
        memory_cost: int = DEFAULT_MEMORY_COST,
        parallelism: int = DEFAULT_PARALLELISM,
        salt_length: int = DEFAULT_SALT_LENGTH,
        hash_length: int = DEFAULT_HASH_LENGTH,
    ) -> None:
        self._password_hash = PasswordHash(
            (
                Argon2Hasher(
                    time_cost=time_cost,
                    memory_cost=memory_cost,
                    parallelism=parallelism,
                    hash_len=hash_length,
                    salt_len=salt_length,
                ),
            )
        )

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password with a fresh random salt.

        Raises:
            CredentialHashingError: If argon2 cannot compute the hash
        """
        try:
            return self._password_hash.hash(password)
        except HashingError as e:
            raise CredentialHashingError("Password hashing failed") from e

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if password matches; unknown hash formats never match."""
        try:
            return self._password_hash.verify(password, password_hash)
        except UnknownHashError:
            return False

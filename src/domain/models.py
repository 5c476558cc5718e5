"""
Domain models - Registration input, persisted account and results.

RegistrationResult is a tagged union with exactly three variants:

- Registered: account was created
- Rejected: user-correctable field errors (validation or uniqueness)
- Fault: hashing or storage failure, not correctable by the user

Field errors from the validator and from a storage uniqueness conflict
share the same FieldErrors shape, so callers never need to know where
an error originated.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import NamedTuple


class FieldError(NamedTuple):
    """A single violated rule on a single field."""

    rule: str
    message: str


FieldErrors = dict[str, list[FieldError]]


@dataclass(frozen=True)
class RegistrationRequest:
    """Untrusted registration input. Never persisted."""

    email: str
    display_name: str
    password: str = field(repr=False)
    password_confirmation: str = field(repr=False)


@dataclass(frozen=True)
class Account:
    """Persisted account as returned by the repository."""

    id: int
    email: str
    display_name: str
    password_hash: str = field(repr=False)
    inserted_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Registered:
    account: Account


@dataclass(frozen=True)
class Rejected:
    errors: FieldErrors


@dataclass(frozen=True)
class Fault:
    error: Exception


RegistrationResult = Registered | Rejected | Fault

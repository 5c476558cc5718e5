"""
Registration domain service - Account creation pipeline.

This module contains the core business logic for user registration:

    validate -> hash password -> insert account

Outcomes (exactly one per call):
- Registered: the account was inserted
- Rejected: field errors, either from the validator or synthesized from
  a storage uniqueness conflict on the email column
- Fault: the hashing engine or the storage layer failed

Invalid input is rejected before any hashing work is done. A uniqueness
conflict is reported with the same FieldErrors shape as a validation
error, so callers never special-case where a field error came from.

Nothing here retries. Rejections are caller-input problems and faults
are surfaced as-is for a higher layer to decide.

Note: Email uniqueness is enforced by the repository's storage
constraint, not by an application-level lookup or lock. Concurrent
registrations of one email race at the database, and all but one
observe a ConflictError.
"""

import logging
from dataclasses import dataclass, field

from .exceptions import ConflictError, CredentialHashingError, StorageError
from .models import (
    FieldError,
    Fault,
    Registered,
    RegistrationRequest,
    RegistrationResult,
    Rejected,
)
from .ports import AccountRepository, CredentialHasher
from .validation import RegistrationValidator

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: validation, password hashing
    and account persistence, and maps each failure to a result variant.
    """

    repository: AccountRepository
    hasher: CredentialHasher
    validator: RegistrationValidator = field(default_factory=RegistrationValidator)

    def register(self, request: RegistrationRequest) -> RegistrationResult:
        """
        Register a new account.

        This call is blocking: password hashing is deliberately CPU and
        memory intensive. Async callers must run it off the event loop.

        Args:
            request: Untrusted registration input

        Returns:
            Registered, Rejected or Fault
        """
        errors = self.validator.validate(request)
        if errors:
            logger.info("Registration rejected: invalid fields %s", sorted(errors))
            return Rejected(errors)

        try:
            password_hash = self.hasher.hash(request.password)
        except CredentialHashingError as e:
            return Fault(e)

        try:
            account = self.repository.insert(
                request.email, request.display_name, password_hash
            )
        except ConflictError as e:
            logger.warning("Registration rejected: %s already taken", e.field)
            return Rejected({e.field: [self._unique_error()]})
        except StorageError as e:
            return Fault(e)

        logger.info("Account registered: id=%s", account.id)
        return Registered(account)

    def _unique_error(self) -> FieldError:
        """Field error reported when storage rejects a duplicate value."""
        return FieldError("unique", self.validator.messages.unique)

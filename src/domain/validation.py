"""
Registration input validation.

RegistrationValidator checks every field of a RegistrationRequest in a
single pass and reports all violations at once.

Rules per field (in evaluation order):

    email                  required, email
    display_name           required
    password               required, length
    password_confirmation  required, confirmation

A failing "required" rule short-circuits the remaining rules of that
field, so each field carries at most one FieldError. Fields are checked
independently of one another: a mismatched confirmation is reported even
when the password itself is invalid.

Messages are bound to the validator instance, never to module state.
"""

from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email

from .models import FieldError, FieldErrors, RegistrationRequest


@dataclass(frozen=True)
class PasswordPolicy:
    """Inclusive password length bounds, measured in characters."""

    min_length: int = 8
    max_length: int = 80

    def __post_init__(self) -> None:
        if self.min_length < 1 or self.max_length < self.min_length:
            raise ValueError(
                f"Invalid password length bounds: {self.min_length}..{self.max_length}"
            )


@dataclass(frozen=True)
class ValidationMessages:
    """Human-readable message for each rule name."""

    required: str = "can't be blank"
    email: str = "is not a valid email address"
    length: str = "must be between {min} and {max} characters long"
    confirmation: str = "passwords do not match"
    unique: str = "has already been taken"


@dataclass(frozen=True)
class RegistrationValidator:
    """Pure validator for registration requests."""

    policy: PasswordPolicy = field(default_factory=PasswordPolicy)
    messages: ValidationMessages = field(default_factory=ValidationMessages)

    def validate(self, request: RegistrationRequest) -> FieldErrors:
        """
        Validate a registration request.

        Args:
            request: Untrusted registration input

        Returns:
            Mapping of field name to violations; empty if acceptable
        """
        checks = {
            "email": self._check_email(request.email),
            "display_name": self._check_required(request.display_name.strip()),
            "password": self._check_password(request.password),
            "password_confirmation": self._check_confirmation(
                request.password, request.password_confirmation
            ),
        }
        return {name: [error] for name, error in checks.items() if error is not None}

    def _check_required(self, value: str) -> FieldError | None:
        if not value:
            return FieldError("required", self.messages.required)
        return None

    def _check_email(self, email: str) -> FieldError | None:
        if not email.strip():
            return FieldError("required", self.messages.required)
        try:
            # Syntax only; deliverability would require DNS lookups
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return FieldError("email", self.messages.email)
        return None

    def _check_password(self, password: str) -> FieldError | None:
        if not password:
            return FieldError("required", self.messages.required)
        if not self.policy.min_length <= len(password) <= self.policy.max_length:
            message = self.messages.length.format(
                min=self.policy.min_length, max=self.policy.max_length
            )
            return FieldError("length", message)
        return None

    def _check_confirmation(self, password: str, confirmation: str) -> FieldError | None:
        if not confirmation:
            return FieldError("required", self.messages.required)
        if confirmation != password:
            return FieldError("confirmation", self.messages.confirmation)
        return None

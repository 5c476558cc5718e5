"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

_SCALARS = (str, int, float, bool)


class RegisterRequest(BaseModel):
    """
    Request model for user registration.

    Fields are plain strings defaulting to empty: field rules belong to the
    domain validator so every violation is reported in one response. Null
    becomes an empty string and other scalars their string form; only
    structured values (lists, objects) fail model parsing.
    """

    email: str = Field("", description="Email address to register")
    display_name: str = Field("", description="Public display name")
    password: str = Field("", description="Password (8 to 80 characters)")
    password_confirmation: str = Field("", description="Must repeat the password exactly")

    @model_validator(mode="before")
    @classmethod
    def coerce_scalars(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        coerced = dict(data)
        for name in cls.model_fields:
            value = coerced.get(name)
            if value is None:
                coerced[name] = ""
            elif isinstance(value, _SCALARS) and not isinstance(value, str):
                coerced[name] = str(value)
        return coerced


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    id: int
    email: str
    display_name: str
    inserted_at: datetime


class FieldErrorResponse(BaseModel):
    """A single violated rule."""

    rule: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Per-field errors for a rejected registration."""

    errors: dict[str, list[FieldErrorResponse]]


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str

"""
API v1 routes.

Defines REST endpoints for the Account Registration API.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service
from src.api.models import (
    ErrorResponse,
    RegisterRequest,
    RegisterResponse,
    ValidationErrorResponse,
)
from src.domain.models import Registered, RegistrationRequest, Rejected
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"model": ValidationErrorResponse, "description": "Invalid or duplicate fields"},
        500: {"model": ErrorResponse, "description": "Registration failed"},
    },
    summary="Register a new account",
    description="Submit email, display name and password (twice) to create an account. "
    "Field problems, including an email that is already taken, are returned per field.",
)
async def register(
    request_data: RegisterRequest | None = None,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse | JSONResponse:
    """
    Register a new account.

    - **email**: Email address (unique, case-insensitive)
    - **display_name**: Public display name
    - **password**: Password (8 to 80 characters)
    - **password_confirmation**: Same as password
    """
    if request_data is None:
        request_data = RegisterRequest()

    registration = RegistrationRequest(
        email=request_data.email,
        display_name=request_data.display_name,
        password=request_data.password,
        password_confirmation=request_data.password_confirmation,
    )

    # Hashing is intentionally slow; keep it off the event loop
    result = await run_in_threadpool(service.register, registration)

    if isinstance(result, Registered):
        account = result.account
        return RegisterResponse(
            id=account.id,
            email=account.email,
            display_name=account.display_name,
            inserted_at=account.inserted_at,
        )

    if isinstance(result, Rejected):
        body = {
            "errors": {
                name: [{"rule": e.rule, "message": e.message} for e in errors]
                for name, errors in result.errors.items()
            }
        }
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body)

    logger.error("Registration fault", exc_info=result.error)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Registration failed"},
    )

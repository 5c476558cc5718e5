"""
Exception handlers - Request parsing errors in the field-error vocabulary.

Payloads FastAPI cannot parse (wrong JSON structure, non-object body) are
reported with the same {"errors": {field: [{rule, message}]}} shape as
domain validation errors, so clients never branch on where an error came
from. Errors not attributable to a single field are reported under "body".
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

INVALID_RULE = "invalid"
INVALID_MESSAGE = "is invalid"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Re-express FastAPI request validation errors as field errors."""
    errors: dict[str, list[dict[str, str]]] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        field = loc[1] if len(loc) > 1 and isinstance(loc[1], str) else "body"
        entries = errors.setdefault(field, [])
        if not entries:
            entries.append({"rule": INVALID_RULE, "message": INVALID_MESSAGE})

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"errors": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the API's exception handlers on an application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)

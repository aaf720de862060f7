"""Exception handlers that turn validation failures into 400 responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.shared.validators import InvalidInputError

logger = logging.getLogger(__name__)


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    """Handle a validator failure raised directly from a route."""
    logger.debug(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request parsing errors.

    Validator failures raised inside pydantic field validators arrive wrapped
    in RequestValidationError; the original InvalidInputError is unwrapped so
    the response body matches the one produced by ``invalid_input_handler``.
    Only the first error is reported.
    """
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid request"})

    first = errors[0]
    original = (first.get("ctx") or {}).get("error")
    if isinstance(original, InvalidInputError):
        return await invalid_input_handler(request, original)

    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    content = {
        "detail": first.get("msg", "Invalid request"),
        "field": ".".join(loc) or "body",
        "rule": first.get("type", "invalid"),
    }
    logger.debug(f"Rejected {request.method} {request.url.path}: {content['detail']}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Register validation exception handlers on the application."""
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

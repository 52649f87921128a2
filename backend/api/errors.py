"""
Exception handlers.

Translates the exception hierarchy into the API's error envelope. Anything
unexpected is logged with its traceback and reported to the caller as a
generic 500 without internal detail.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    NotFoundError,
    OrderDeskError,
    ValidationError,
)

from .models.errors import ErrorResponse, ValidationErrorDetail, ValidationErrorResponse

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"
INTERNAL_ERROR = "Internal server error"


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


def _validation_error(details: list[dict[str, Any]]) -> JSONResponse:
    body = ValidationErrorResponse(
        error=VALIDATION_FAILED,
        details=[ValidationErrorDetail(**d) for d in details],
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def request_errors_to_details(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """
    Convert FastAPI request-parsing errors to the validation detail shape.

    Example:
        {"loc": ("body", "country"), "msg": "Value error, Country must be 2-50 characters"}
        -> {"field": "country", "message": "Country must be 2-50 characters", "code": "VALUE_ERROR"}
    """
    details = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        message = str(error.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({
            "field": ".".join(loc) or "body",
            "message": message,
            "code": str(error.get("type", "invalid")).upper(),
        })
    return details


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} rejected: {len(exc.issues)} validation issue(s)")
    return _validation_error(exc.issues)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _validation_error(request_errors_to_details(list(exc.errors())))


async def handle_authentication_error(request: Request, exc: AuthenticationError) -> JSONResponse:
    return _error(
        status.HTTP_401_UNAUTHORIZED,
        exc.message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def handle_authorization_error(request: Request, exc: AuthorizationError) -> JSONResponse:
    return _error(status.HTTP_403_FORBIDDEN, exc.message)


async def handle_not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, exc.message)


async def handle_external_service_error(request: Request, exc: ExternalServiceError) -> JSONResponse:
    logger.error(f"External service failure ({exc.service}): {exc.message}")
    return _error(status.HTTP_502_BAD_GATEWAY, "Upstream service unavailable")


async def handle_orderdesk_error(request: Request, exc: OrderDeskError) -> JSONResponse:
    logger.error(f"Unhandled application error: {exc.to_dict()}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return _error(status.HTTP_404_NOT_FOUND, "Route not found")
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} failed")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an application. More specific classes first."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(AuthenticationError, handle_authentication_error)
    app.add_exception_handler(AuthorizationError, handle_authorization_error)
    app.add_exception_handler(NotFoundError, handle_not_found_error)
    app.add_exception_handler(ExternalServiceError, handle_external_service_error)
    app.add_exception_handler(OrderDeskError, handle_orderdesk_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

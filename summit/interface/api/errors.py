"""Mapping of domain errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logfire
import pydantic

from summit.domain.error import (
    AlreadyInStateError,
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

# Most specific first: AlreadyInStateError is a ConflictError but maps to 400
ERROR_STATUS: list[tuple[type[DomainError], int, str]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (AlreadyInStateError, status.HTTP_400_BAD_REQUEST, "already_in_state"),
    (ConflictError, status.HTTP_409_CONFLICT, "conflict"),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST, "invalid_state"),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED, "unauthorized"),
    (ForbiddenError, status.HTTP_403_FORBIDDEN, "forbidden"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "validation_error"),
]


def error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "error": code},
        headers=headers,
    )


def classify(error: DomainError) -> tuple[int, str]:
    """HTTP status and error code for a domain error."""
    for error_type, status_code, code in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code, code
    return status.HTTP_400_BAD_REQUEST, "domain_error"


def format_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic error entries into one readable message."""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query"))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts) or "Invalid request"


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code, code = classify(exc)
    if status_code >= 500:
        logfire.error("Domain error", path=request.url.path, error=str(exc))
    else:
        logfire.warn(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    return error_response(status_code, str(exc), code)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = format_validation_errors(list(exc.errors()))
    logfire.warn("Request validation failed", path=request.url.path, error=detail)
    return error_response(status.HTTP_400_BAD_REQUEST, detail, "validation_error")


async def handle_model_validation_error(
    request: Request, exc: pydantic.ValidationError
) -> JSONResponse:
    detail = format_validation_errors(
        exc.errors(include_url=False, include_context=False)
    )
    logfire.warn("Request validation failed", path=request.url.path, error=detail)
    return error_response(status.HTTP_400_BAD_REQUEST, detail, "validation_error")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "internal_error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(pydantic.ValidationError, handle_model_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from gatehouse.domain.error import (
    ConflictError,
    DomainError,
    ExhaustedError,
    ForbiddenError,
    InvalidOperationError,
    NotFoundError,
)

STATUS_CODES: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidOperationError: status.HTTP_400_BAD_REQUEST,
    ExhaustedError: status.HTTP_410_GONE,
}


def error_body(error: DomainError) -> dict:
    """JSON body for a domain error: message, kind and details."""
    return {"detail": str(error), "error": error.kind, **error.details()}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its status code."""
    status_code = next(
        (code for cls, code in STATUS_CODES.items() if isinstance(exc, cls)),
        status.HTTP_400_BAD_REQUEST,
    )
    logfire.info(
        "Domain error",
        path=request.url.path,
        error=exc.kind,
        status_code=status_code,
        message=str(exc),
    )
    return JSONResponse(status_code=status_code, content=error_body(exc))


async def handle_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Value objects built inside use cases that reject their input."""
    errors = [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
        for err in exc.errors()
    ]
    logfire.info("Invalid input", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": errors[0]["msg"] if errors else "Invalid input",
            "error": InvalidOperationError.kind,
            "errors": errors,
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register one handler per error family on the app."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(ValidationError, handle_validation_error)

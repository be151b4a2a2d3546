"""Translate sales rule errors into JSON error responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from sales_org.errors import (
    DomainError,
    DomainValidationError,
    DuplicateResourceError,
    NotFoundError,
)
from sales_org.schemas.common import ErrorResponse

# Most specific classes first; the first match decides the status.
ERROR_STATUS_CODES: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateResourceError: status.HTTP_409_CONFLICT,
    DomainValidationError: status.HTTP_400_BAD_REQUEST,
}


def status_code_for(exc: DomainError) -> int:
    for error_class, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    """Render any DomainError as ``{"detail": ..., "code": ...}``."""
    body = ErrorResponse(detail=str(exc), code=exc.code)
    return JSONResponse(status_code=status_code_for(exc), content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)

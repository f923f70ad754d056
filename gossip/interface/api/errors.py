"""Mapping of domain errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from gossip.domain.error import (
    ConflictError,
    DomainError,
    NotFoundError,
    TransientStoreError,
    ValidationError,
)

STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, 422),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (TransientStoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error as a JSON error response."""
    status_code = next(
        (code for error, code in STATUS_BY_ERROR if isinstance(exc, error)),
        status.HTTP_400_BAD_REQUEST,
    )
    headers = {"Retry-After": "1"} if isinstance(exc, TransientStoreError) else None
    return JSONResponse(
        status_code=status_code,
        content={"error": str(exc)},
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install domain error handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)

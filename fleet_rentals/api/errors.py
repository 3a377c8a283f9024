"""Traducción de errores de dominio a respuestas HTTP."""

import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fleet_rentals.domain.errors import (
    DomainError,
    DuplicateValueError,
    InvalidIntervalError,
    InvalidTransitionError,
    NotFoundError,
    RecordInUseError,
    RentalConflictError,
    ResourceUnavailableError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Orden relevante: se usa el primer tipo que coincide
STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (InvalidIntervalError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (ResourceUnavailableError, status.HTTP_409_CONFLICT),
    (RentalConflictError, status.HTTP_409_CONFLICT),
    (DuplicateValueError, status.HTTP_409_CONFLICT),
    (RecordInUseError, status.HTTP_409_CONFLICT),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_for(exc: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info(
        "Domain error returned to client",
        extra={
            "code": exc.code,
            "status_code": status_code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    headers = {"Retry-After": "1"} if isinstance(exc, StorageError) else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists.",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

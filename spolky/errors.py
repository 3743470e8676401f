"""
Doménové výjimky a jejich HTTP obsluha / Domain exceptions and HTTP handlers.
Tělo odpovědi má tvar {"detail": "..."} jako HTTPException.
Response body follows the {"detail": "..."} shape of HTTPException.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger("spolky.errors")


class AppError(Exception):
    """Základ doménových chyb / Base for domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(AppError):
    """Neplatný vstup, zjištěno před zápisem / Invalid input, caught before any write."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class StorageError(AppError):
    """Úložiště odmítlo zápis / The store rejected a write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Storage error"


class AuditWriteError(StorageError):
    message = "Audit log write failed"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Převést AppError na JSON / Convert an AppError to JSON."""
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Porušení omezení / Constraint violation (unique, FK)."""
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Constraint violation"})


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Chyba úložiště, detail jen do logu / Storage failure, details go to the log only."""
    logger.error("Storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Storage error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)

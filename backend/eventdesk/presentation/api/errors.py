"""
Pipeline error → HTTP response translation.

ValidationFailedError  → 400 with every field failure
AccessDeniedError      → 403
EntityNotFoundError    → 404
ConflictError          → 409
PersistenceError       → 503, generic message (details stay in the logs)
"""

from logging import getLogger

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from eventdesk.application.common.errors import ValidationFailedError
from eventdesk.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    EntityNotFoundError,
    PersistenceError,
)

logger = getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationFailedError)
    async def validation_failed_handler(request: Request, exc: ValidationFailedError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation failed", "details": exc.errors},
        )

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(request: Request, exc: AccessDeniedError):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN, content={"error": str(exc)}
        )

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"error": str(exc)}
        )

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError):
        logger.error(f"Persistence failure on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "The operation failed, please retry later."},
        )

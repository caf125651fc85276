"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, DI
and pipeline error translation.
"""

from contextlib import asynccontextmanager
from logging import getLogger
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from eventdesk.application.dispatcher import Dispatcher
from eventdesk.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from eventdesk.config.settings import Config, get_config
from eventdesk.presentation.api import (
    events_router,
    metrics_router,
    register_error_handlers,
    reviews_router,
)
from eventdesk.setup.ioc import create_container

logger = getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: resolve the Dispatcher once, so a handler registry with a
    missing request kind stops the app here instead of on a request.
    Shutdown: close the container (drains notifications, disconnects Prisma).
    """
    container: AsyncContainer = app.state.dishka_container
    await container.get(Dispatcher)
    logger.info("EventDesk started. DI container initialized.")
    yield
    await container.close()
    logger.info("EventDesk shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: prebuilt Dishka container; built from Config when omitted

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="EventDesk API",
        description="Events and reviews behind a validated request pipeline",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Dishka adds middleware, so it must be set up before the app starts
    setup_dishka(container or create_container(Config), app)
    app.add_middleware(CorrelationIdMiddleware)

    register_error_handlers(app)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": exc.errors()},
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(events_router)
    app.include_router(reviews_router)
    app.include_router(metrics_router)

    return app


def create_app() -> FastAPI:
    """uvicorn factory entry point: `uvicorn --factory eventdesk.fastapi_app:create_app`."""
    config = get_config()
    setup_logging(config.LOG_LEVEL, config.LOG_PATH or None)
    return create_fastapi_app(create_container(config))

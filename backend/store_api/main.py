"""
Store API - FastAPI Application Entry Point

This module builds the FastAPI application with all middleware, routes,
error handlers and lifecycle event handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from store_api.api.v1 import (
    contacts,
    customers,
    health,
    order_product_suppliers,
    orders,
    product_suppliers,
    products,
    suppliers,
)
from store_api.core.config import Settings, settings as default_settings
from store_api.core.database import Database
from store_api.core.exceptions import NotFoundError
from store_api.core.logging_config import get_logger, setup_logging
from store_api.middleware.content_type import JSONContentTypeMiddleware
from store_api.middleware.request_context import LoggingMiddleware, RequestIDMiddleware


logger = get_logger(__name__)

RESOURCE_ROUTERS = (
    customers.router,
    orders.router,
    contacts.router,
    products.router,
    suppliers.router,
    product_suppliers.router,
    order_product_suppliers.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
        - Set up logging
        - Create missing tables (when auto_migrate is on)

    Shutdown:
        - Close database connections
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(level=settings.log_level, json_format=settings.log_json)

    if settings.auto_migrate:
        await database.create_all()

    logger.info("Application started", extra={"project": settings.project_name})

    yield

    await database.dispose()
    logger.info("Application stopped")


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Storage operation failed",
        exc_info=exc,
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "path": request.url.path,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage operation failed"},
    )


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration (defaults to the environment-loaded settings)
        database: Store handle; built from ``settings`` when omitted. Tests
            pass their own in-memory one.

    Returns:
        Configured FastAPI application. The store handle is available as
        ``app.state.database``.
    """
    settings = settings or default_settings
    database = database or Database.from_settings(settings)

    app = FastAPI(
        title=settings.project_name,
        version="0.1.0",
        description="CRUD API over customers, orders, contacts, products and suppliers",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # Middleware is executed in reverse order of registration
    # (last registered = first executed)

    # Content-type check (runs last, right before routing)
    app.add_middleware(JSONContentTypeMiddleware)

    # Logging middleware (runs after RequestID to access request_id)
    app.add_middleware(LoggingMiddleware)

    # Request ID middleware (sets correlation ID)
    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)

    app.include_router(health.router, prefix=settings.api_prefix)
    for router in RESOURCE_ROUTERS:
        app.include_router(router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root():
        """
        Root endpoint.

        Returns basic API information.
        """
        return {
            "message": settings.project_name,
            "version": "0.1.0",
            "docs": "/docs",
        }

    return app


app = create_app()

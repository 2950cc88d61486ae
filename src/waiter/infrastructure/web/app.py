"""
Application entry point.

Creates the FastAPI application and wires together routers, error
handlers and logging configuration. No business logic belongs here.
"""

from fastapi import FastAPI

from waiter.infrastructure.config import settings
from waiter.infrastructure.logging import configure_logging
from waiter.infrastructure.web.coffee_routes import router as coffee_router
from waiter.infrastructure.web.error_handlers import register_error_handlers
from waiter.infrastructure.web.order_routes import router as order_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(coffee_router)
    app.include_router(order_router)

    return app


app = create_app()

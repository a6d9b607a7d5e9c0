"""
Application entry point.

Creates the FastAPI application and wires together:
- Logging configuration
- Error handlers (centralized domain-to-HTTP mapping)

No business logic belongs here.
"""

from fastapi import FastAPI

from app.core.config import settings
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Returns:
        A FastAPI application with error handlers registered.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    register_error_handlers(app)

    return app


app = create_app()

"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.partier.driving_adapter.http_controller.admin_controller import (
    router as admin_router,
)
from src.service.partier.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from src.service.partier.driving_adapter.http_controller.export_controller import (
    router as export_router,
)
from src.service.partier.driving_adapter.http_controller.scanner_controller import (
    router as scanner_router,
)
from src.service.partier.driving_adapter.http_controller.ticket_controller import (
    router as ticket_router,
)
from src.service.partier.driving_adapter.http_controller.user_controller import (
    router as auth_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Partier - nightlife event ticketing',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Add CORS middleware (cookies need credentials)
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers (paths are absolute, see route_constant)
    app.include_router(auth_router)
    app.include_router(event_router)
    app.include_router(ticket_router)
    app.include_router(scanner_router)
    app.include_router(admin_router)
    app.include_router(export_router)

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

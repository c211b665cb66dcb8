"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Partier] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Partier] Dependency injection wired')

    # Create the engine (connection pool) eagerly so misconfiguration fails at boot
    database = container.database()
    if settings.AUTO_CREATE_TABLES:
        await database.create_tables()

    Logger.base.info('✅ [Partier] Ready to serve requests')

    try:
        yield
    finally:
        Logger.base.info('🛑 [Partier] Shutting down...')

        await database.dispose()
        container.reset_singletons()

        # Unwire DI
        container.unwire()

        Logger.base.info('👋 [Partier] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')

"""
SQLAlchemy async engine and session management

One `Database` per process owns the engine (and therefore the connection
pool) plus the session factory. The DI container holds it as a singleton;
the FastAPI lifespan disposes it on shutdown.

Repositories receive `database.session` as their session factory and open
one short-lived session per operation:

    async with self.session_factory() as session:
        ...
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Database Class (DI singleton)
# =============================================================================


def _engine_options(db_url: str) -> dict[str, Any]:
    # SQLite (tests, local dev): pool sizing is left to the driver defaults
    if make_url(db_url).get_backend_name() == 'sqlite':
        return {'connect_args': {'timeout': 30}}
    return {
        'pool_size': settings.DB_POOL_SIZE,
        'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
        'pool_timeout': settings.DB_POOL_TIMEOUT,
        'pool_recycle': settings.DB_POOL_RECYCLE,
        'pool_pre_ping': settings.DB_POOL_PRE_PING,
    }


class Database:
    def __init__(self, db_url: Optional[str] = None, *, echo: Optional[bool] = None) -> None:
        self.db_url = db_url or settings.DATABASE_URL_ASYNC
        self._engine: AsyncEngine = create_async_engine(
            self.db_url,
            echo=settings.DB_ECHO if echo is None else echo,
            **_engine_options(self.db_url),
        )
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        Logger.base.info(f'🔗 [DB] Engine created for {make_url(self.db_url).render_as_string()}')

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session scope; rolls back on any exception before closing."""
        session: AsyncSession = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create missing tables (dev convenience; deployments use alembic)."""
        # Register every model on Base.metadata
        import src.service.partier.driven_adapter.model  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        Logger.base.info('🗄️  [DB] Tables ensured')

    async def dispose(self) -> None:
        await self._engine.dispose()
        Logger.base.info('🔌 [DB] Engine disposed')

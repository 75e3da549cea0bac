"""Async database engine and session management.

The engine is created once in the application lifespan and stored on
``app.state.database``. Request handlers receive a session through the
``get_db_session`` dependency. When no database URL is configured the
dependency yields ``None`` and services skip persistence.
"""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from dopamine_roi.observability import get_logger
from dopamine_roi.settings import Settings

logger = get_logger(__name__)


class Database:
    """Owns the async engine and the session factory for one application."""

    def __init__(self, url: str, echo: bool = False) -> None:
        """Create the engine and session factory.

        Args:
            url: SQLAlchemy async URL (e.g. postgresql+asyncpg://...).
            echo: Log every SQL statement.
        """
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
        )
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            expire_on_commit=False,
        )

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


def init_database(settings: Settings) -> Database | None:
    """Build the Database for the configured URL, or None if persistence is off.

    Args:
        settings: Service settings.

    Returns:
        Database instance, or None when ``database_url`` is empty.
    """
    if not settings.persistence_enabled:
        logger.warning("Database not configured - assessments will not be persisted")
        return None

    logger.info("Database engine initialised", echo=settings.database_echo)
    return Database(settings.database_url, echo=settings.database_echo)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession | None, None]:
    """FastAPI dependency yielding a session scoped to one request.

    Args:
        request: Incoming request; the Database lives on ``app.state``.

    Yields:
        An AsyncSession, or None when persistence is disabled.
    """
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        yield None
        return

    async with database.session_factory() as session:
        yield session

"""
Async PostgreSQL engine and sessions (SQLAlchemy 2 + asyncpg).

The engine is created lazily on first use and shared by the process.
A session is one unit of work: committed when the caller's block succeeds,
rolled back when it raises.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator
from urllib.parse import quote_plus

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.config.settings import Settings, get_settings
from app.models.db.schemas import DEFAULT_SEARCH_PATH

logger = logging.getLogger(__name__)

_async_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_async_database_url(settings: Settings | None = None) -> str:
    """asyncpg URL with credentials percent-encoded."""
    settings = settings or get_settings()
    if not settings.DB_NAME:
        raise ValueError("Database name is required (DB_NAME)")

    credentials = quote_plus(settings.DB_USER or "postgres")
    if settings.DB_PASSWORD:
        credentials = f"{credentials}:{quote_plus(settings.DB_PASSWORD)}"
    host = settings.DB_HOST or "localhost"
    return f"postgresql+asyncpg://{credentials}@{host}:{settings.DB_PORT or 5432}/{settings.DB_NAME}"


def engine_options(settings: Settings) -> dict[str, Any]:
    """
    Keyword arguments for create_async_engine.

    Development runs without pooling so reloads never hold stale connections.
    """
    options: dict[str, Any] = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,
        "connect_args": {"server_settings": {"search_path": DEFAULT_SEARCH_PATH}},
    }
    if settings.is_development:
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_timeout=settings.DB_POOL_TIMEOUT,
        )
    return options


def create_async_database_engine(settings: Settings | None = None) -> AsyncEngine:
    settings = settings or get_settings()
    options = engine_options(settings)
    logger.info(f"Creating async engine ({'NullPool' if 'poolclass' in options else 'pooled'})")
    return create_async_engine(get_async_database_url(settings), **options)


def get_async_engine() -> AsyncEngine:
    global _async_engine
    if _async_engine is None:
        _async_engine = create_async_database_engine()
    return _async_engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_async_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """Transactional session for code running outside a request (scripts, jobs)."""
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            logger.error(f"Rolling back session: {e}")
            await session.rollback()
            raise


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one transactional session per request."""
    async with session_scope() as session:
        yield session


async def check_database_connection() -> bool:
    try:
        async with get_async_engine().connect() as connection:
            await connection.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database connectivity check failed: {e}")
        return False
    return True


async def dispose_async_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _async_engine, _session_factory
    if _async_engine is None:
        return
    await _async_engine.dispose()
    _async_engine = None
    _session_factory = None

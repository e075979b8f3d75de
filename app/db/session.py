"""Database session configuration"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker

from app.config import (
    DATABASE_URL,
    DB_ECHO,
    DB_MAX_OVERFLOW,
    DB_POOL_RECYCLE,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
)
from app.db.base import Base

logger = logging.getLogger(__name__)


def to_async_url(database_url: str) -> str:
    """
    Convert a database URL to its async driver form.

    postgresql:// and postgresql+asyncpg:// become postgresql+psycopg://,
    sqlite:// becomes sqlite+aiosqlite://.
    """
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+psycopg://", 1)
    if database_url.startswith("postgresql+psycopg://"):
        return database_url
    if database_url.startswith("postgresql+asyncpg://"):
        # Legacy support: convert asyncpg URLs to psycopg
        return database_url.replace("postgresql+asyncpg://", "postgresql+psycopg://", 1)
    if database_url.startswith("sqlite+aiosqlite://"):
        return database_url
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    raise ValueError(f"Unsupported database URL format: {database_url}")


def _register_pool_listeners(target: AsyncEngine) -> None:
    # Async engines only emit pool events on their sync_engine
    @event.listens_for(target.sync_engine, "connect")
    def on_connect(dbapi_conn, connection_record):
        logger.debug("New database connection created")

    @event.listens_for(target.sync_engine, "invalidate")
    def on_invalidate(dbapi_conn, connection_record, exception):
        logger.warning(
            f"Database connection invalidated: {exception}",
            exc_info=exception
        )


def create_engine_from_url(database_url: str, echo: bool = DB_ECHO) -> AsyncEngine:
    """Create an async engine; pool sizing only applies to PostgreSQL."""
    async_url = to_async_url(database_url)
    kwargs: Dict[str, Any] = {"echo": echo}
    if async_url.startswith("postgresql"):
        kwargs.update(
            pool_pre_ping=True,  # Verify connections before using them
            pool_size=DB_POOL_SIZE,
            max_overflow=DB_MAX_OVERFLOW,
            pool_timeout=DB_POOL_TIMEOUT,
            pool_recycle=DB_POOL_RECYCLE,
        )
    new_engine = create_async_engine(async_url, **kwargs)
    _register_pool_listeners(new_engine)
    return new_engine


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


engine = create_engine_from_url(DATABASE_URL)
SessionLocal = create_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function for FastAPI routes.

    Usage:
        @app.get("/example")
        async def example(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with SessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create missing tables. Existing tables are left untouched."""
    import app.db.models  # noqa: F401  registers tables on Base.metadata

    target = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Database tables ensured: {', '.join(Base.metadata.tables)}")


def get_pool_stats(target: AsyncEngine | None = None) -> dict:
    """
    Get current connection pool statistics.

    Returns:
        Dictionary with pool statistics:
        - size: Total pool size
        - checked_in: Connections currently checked in (available)
        - checked_out: Connections currently checked out (in use)
        - overflow: Overflow connections
        - max_overflow: Configured overflow limit
    """
    target = target or engine
    try:
        # For async engines, access the underlying sync pool
        sync_pool = target.sync_engine.pool

        def _call(name: str, default: int) -> int:
            func = getattr(sync_pool, name, None)
            value = func() if callable(func) else default
            return int(value) if value is not None else default

        return {
            "size": _call("size", DB_POOL_SIZE),
            "checked_in": _call("checkedin", 0),
            "checked_out": _call("checkedout", 0),
            # overflow() goes negative while the pool is still warming up
            "overflow": max(0, _call("overflow", 0)),
            "max_overflow": int(getattr(sync_pool, "_max_overflow", DB_MAX_OVERFLOW)),
        }
    except Exception as e:
        logger.warning(f"Error getting pool stats: {e}")
        # Return safe defaults if pool stats can't be accessed
        return {
            "size": DB_POOL_SIZE,
            "checked_in": 0,
            "checked_out": 0,
            "overflow": 0,
            "max_overflow": DB_MAX_OVERFLOW,
        }


def log_pool_stats(context: str = ""):
    """
    Log current connection pool statistics.

    Args:
        context: Optional context string to include in log message
    """
    stats = get_pool_stats()
    total_capacity = stats["size"] + stats["max_overflow"]
    utilization = (stats["checked_out"] / total_capacity * 100) if total_capacity > 0 else 0

    context_str = f" [{context}]" if context else ""
    logger.info(
        f"Connection pool stats{context_str}: "
        f"available={stats['checked_in']}, in_use={stats['checked_out']}, "
        f"overflow={stats['overflow']}, utilization={utilization:.1f}%"
    )

    if utilization > 80:
        logger.warning(
            f"Connection pool utilization is high ({utilization:.1f}%)! "
            f"Consider increasing pool size or investigating slow queries."
        )

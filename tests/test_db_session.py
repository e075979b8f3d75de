from __future__ import annotations

import logging

import pytest

from app.db.session import create_engine_from_url, get_pool_stats, log_pool_stats, to_async_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgresql://u:p@db:5432/postgres", "postgresql+psycopg://u:p@db:5432/postgres"),
        ("postgresql+psycopg://u:p@db/postgres", "postgresql+psycopg://u:p@db/postgres"),
        ("postgresql+asyncpg://u:p@db/postgres", "postgresql+psycopg://u:p@db/postgres"),
        ("sqlite:///./housework.db", "sqlite+aiosqlite:///./housework.db"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_to_async_url(url: str, expected: str) -> None:
    assert to_async_url(url) == expected


def test_unsupported_url_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported database URL format"):
        to_async_url("mysql://root@localhost/houseworks")


def test_pool_stats_never_negative() -> None:
    stats = get_pool_stats()

    assert set(stats) == {"size", "checked_in", "checked_out", "overflow", "max_overflow"}
    assert stats["overflow"] >= 0


@pytest.mark.asyncio
async def test_engine_factory_registers_pool_listeners() -> None:
    engine = create_engine_from_url("sqlite:///./unused.db")
    try:
        assert str(engine.url) == "sqlite+aiosqlite:///./unused.db"
        assert engine.sync_engine.pool.dispatch.invalidate
    finally:
        await engine.dispose()


def test_log_pool_stats_reports_context(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.db.session"):
        log_pool_stats("startup")

    assert "Connection pool stats [startup]" in caplog.text
    assert "utilization=" in caplog.text

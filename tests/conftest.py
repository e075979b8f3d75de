from __future__ import annotations

import asyncio
import os
from pathlib import Path

# Keep the app-level engine off disk and skip startup table creation.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["HOUSEWORK_BACKEND"] = "sql"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from app.db import get_db, init_db  # noqa: E402
from app.db.session import create_session_factory  # noqa: E402
from app.features.houseworks.repository import HouseworkRepository  # noqa: E402
from app.main import app  # noqa: E402

from .fakes import FakeHouseworkRepository  # noqa: E402


def make_test_engine(db_path: Path) -> AsyncEngine:
    # NullPool: every session gets a fresh connection, nothing outlives the event loop
    return create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)


@pytest_asyncio.fixture()
async def db_engine(tmp_path: Path):
    engine = make_test_engine(tmp_path / "houseworks.sqlite3")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture()
async def db_session(db_engine: AsyncEngine):
    async with create_session_factory(db_engine)() as session:
        yield session


@pytest.fixture()
def repository(db_session) -> HouseworkRepository:
    return HouseworkRepository(db_session)


@pytest.fixture()
def fake_repository() -> FakeHouseworkRepository:
    return FakeHouseworkRepository()


@pytest.fixture()
def client(tmp_path: Path):
    """
    TestClient whose get_db dependency points at a throwaway SQLite file.
    """
    engine = make_test_engine(tmp_path / "api.sqlite3")
    asyncio.run(init_db(engine))
    session_factory = create_session_factory(engine)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()

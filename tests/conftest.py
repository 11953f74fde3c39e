"""Shared fixtures for catalog API tests.

Every test gets its own SQLite database file so that tests never share
rows. The application's ``get_session`` dependency is swapped for one
bound to that database.
"""

import os

# Keep the module-level engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_JSON", "false")

from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import catalog_api.catalog.models  # noqa: F401
from catalog_api.infrastructure.database import Base, get_session
from catalog_api.main import app


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    """Create an empty catalog schema in a temporary SQLite file."""
    path = tmp_path / "catalog.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    engine.dispose()
    return path


@pytest.fixture
def session_factory(database_path: Path) -> async_sessionmaker[AsyncSession]:
    """Session factory for the temporary database.

    NullPool opens a fresh connection per session, so sessions can be
    used from whichever event loop the caller runs in.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{database_path}",
        poolclass=NullPool,
    )
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session on the temporary database."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory: async_sessionmaker[AsyncSession]) -> Iterator[TestClient]:
    """Create test client bound to the temporary database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()

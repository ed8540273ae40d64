"""Root conftest — shared test configuration and SQLite-backed fixtures."""

import os

import pytest

# Never touch ./users.db from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from light_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from light_api.infrastructure.user_repository import SqlUserRepository  # noqa: E402

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_manager():
    """Fresh in-memory SQLite database per test."""
    manager = DatabaseSessionManager(MEMORY_URL)
    yield manager
    await manager.close()


@pytest.fixture
async def sql_repository(db_manager):
    repository = SqlUserRepository(db_manager)
    await repository.init_table()
    return repository

"""API test fixtures — FastAPI app + httpx client over ASGITransport.

Invariants:
    - Every test gets a fresh app; the lifespan never runs (ASGITransport
      skips it), so collaborators are injected explicitly
    - memory_client uses the in-memory repository double
    - sql_client uses SqlUserRepository on in-memory SQLite
"""

import pytest
from httpx import ASGITransport, AsyncClient

from light_api.api.dependencies import get_user_repository
from light_api.main import create_app
from tests.api.in_memory_repository import InMemoryUserRepository


@pytest.fixture
def memory_repo():
    return InMemoryUserRepository()


@pytest.fixture
async def memory_client(memory_repo):
    app = create_app()
    app.dependency_overrides[get_user_repository] = lambda: memory_repo
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def sql_client(db_manager, sql_repository):
    app = create_app()
    app.state.db = db_manager
    app.state.user_repository = sql_repository
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

"""DatabaseSessionManager — connectivity probe and rollback semantics."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from light_api.infrastructure.database import DatabaseSessionManager


async def test_health_check_true_for_reachable_database(db_manager):
    assert await db_manager.health_check() is True


async def test_health_check_false_for_unopenable_database(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path}/missing/users.db",
    )
    try:
        assert await manager.health_check() is False
    finally:
        await manager.close()


async def test_session_reraises_driver_errors_untranslated(db_manager):
    with pytest.raises(OperationalError):
        async with db_manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))


async def test_session_rolls_back_on_exception(db_manager):
    async with db_manager.session() as db:
        await db.execute(text("CREATE TABLE t (x INTEGER)"))
        await db.commit()

    with pytest.raises(RuntimeError):
        async with db_manager.session() as db:
            await db.execute(text("INSERT INTO t (x) VALUES (1)"))
            raise RuntimeError("boom")

    async with db_manager.session() as db:
        count = (await db.execute(text("SELECT COUNT(*) FROM t"))).scalar_one()
    assert count == 0


def test_pool_sizing_skipped_for_sqlite():
    # StaticPool rejects pool_size; construction must not raise
    DatabaseSessionManager("sqlite+aiosqlite:///:memory:", pool_size=5, max_overflow=1)

"""SQL User Repository — SQLAlchemy implementation of core UserRepository.

Invariants:
    - Duplicate ids detected from the driver's constraint code on INSERT,
      never by a SELECT-then-INSERT pre-check
    - find_by_id returns None for a missing row; only datastore failures raise
    - Every SQLAlchemyError leaves this module as DuplicateKeyError,
      StorageError or SchemaError, chained to the original

Design Decisions:
    - Takes the DatabaseSessionManager in its constructor: one owned pool,
      swappable for tests
    - init_table uses metadata.create_all(checkfirst) scoped to the users
      table: CREATE TABLE IF NOT EXISTS semantics on every dialect
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from light_api.core.errors import DuplicateKeyError, SchemaError, StorageError
from light_api.infrastructure.database import DatabaseSessionManager
from light_api.models.user import User as UserModel
from light_api.schemas.user import User

logger = logging.getLogger(__name__)

# SQLite extended result names (Python 3.11+ sqlite3) and PostgreSQL SQLSTATE
_SQLITE_KEY_VIOLATIONS = frozenset({
    "SQLITE_CONSTRAINT_PRIMARYKEY", "SQLITE_CONSTRAINT_UNIQUE",
})
_PG_UNIQUE_VIOLATION = "23505"


def is_primary_key_violation(exc: IntegrityError) -> bool:
    """True when the driver reports a primary-key/unique collision."""
    # async adapters may wrap the driver exception
    candidates = (
        exc.orig,
        getattr(exc.orig, "driver_exception", None),
        getattr(exc.orig, "__cause__", None),
    )
    for err in candidates:
        if err is None:
            continue
        if getattr(err, "sqlite_errorname", None) in _SQLITE_KEY_VIOLATIONS:
            return True
        sqlstate = getattr(err, "sqlstate", None) or getattr(err, "pgcode", None)
        if sqlstate == _PG_UNIQUE_VIOLATION:
            return True
    return False


class SqlUserRepository:
    """Persists users in the users table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def init_table(self) -> None:
        try:
            async with self._db.engine.begin() as conn:
                await conn.run_sync(
                    UserModel.metadata.create_all,
                    tables=[UserModel.__table__],
                )
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"Failed to initialize users table: {e}",
                extra={"operation": "init_table", "error_code": "SCHEMA_ERROR"},
            )
            raise SchemaError() from e

    async def create(self, user: User) -> None:
        try:
            async with self._db.session() as db:
                db.add(UserModel(id=user.id, name=user.name, email=user.email))
                await db.commit()
        except IntegrityError as e:
            if is_primary_key_violation(e):
                logger.info(
                    f"Duplicate user id {user.id!r}",
                    extra={"user_id": user.id, "error_code": "DUPLICATE_KEY"},
                )
                raise DuplicateKeyError(user.id) from e
            self._log_storage_failure("create", user.id, e)
            raise StorageError(
                "Failed to create user due to internal error", "create",
            ) from e
        except (SQLAlchemyError, OSError) as e:
            self._log_storage_failure("create", user.id, e)
            raise StorageError(
                "Failed to create user due to internal error", "create",
            ) from e

    async def find_by_id(self, user_id: str) -> User | None:
        try:
            async with self._db.session() as db:
                row = await db.get(UserModel, user_id)
        except (SQLAlchemyError, OSError) as e:
            self._log_storage_failure("find_by_id", user_id, e)
            raise StorageError("Internal database error", "find_by_id") from e
        if row is None:
            return None
        return User.model_validate(row)

    @staticmethod
    def _log_storage_failure(operation: str, user_id: str, exc: Exception) -> None:
        logger.error(
            f"User {operation} failed for {user_id!r}: {exc}",
            exc_info=exc,
            extra={
                "user_id": user_id, "operation": operation,
                "error_code": "STORAGE_ERROR",
            },
        )

"""Request Dependencies — resolve per-request collaborators from app.state.

Invariants:
    - Handlers receive the repository through Depends, never by import
    - app.state is populated by the lifespan before the first request

Design Decisions:
    - app.state over module-level singletons: tests swap the repository with
      app.dependency_overrides and no global is patched
"""

from fastapi import Request

from light_api.core.repository_protocols import UserRepository
from light_api.infrastructure.database import DatabaseSessionManager


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db", None)

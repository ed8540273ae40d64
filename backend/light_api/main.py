"""Light API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LightApiError → JSON envelopes
    - Startup aborts if the database cannot be reached or the users table
      cannot be created; per-request failures never stop the process

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory: tests build isolated apps, module-level `app` serves uvicorn
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from light_api.core.errors import StorageError
from light_api.infrastructure.database import DatabaseSessionManager
from light_api.infrastructure.observability import setup_logging, log_requests
from light_api.infrastructure.user_repository import SqlUserRepository
from light_api.config import get_settings
from light_api.api.error_handlers import register_error_handlers
from light_api.api.routes import health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        if not await db.health_check():
            raise StorageError("Database is unreachable", "connect")
        logger.info("Connected to database")

        repository = SqlUserRepository(db)
        await repository.init_table()
        logger.info("Users table ready")

        app.state.db = db
        app.state.user_repository = repository
        logger.info(f"Light API started on port {settings.port}")
        yield
        logger.info("Light API shutting down")
    finally:
        await db.close()


def create_app() -> FastAPI:
    app = FastAPI(title="Light API", version="1.0.0", lifespan=lifespan)
    app.middleware("http")(log_requests)

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve on HOST:PORT (default 0.0.0.0:8080)."""
    settings = get_settings()
    uvicorn.run(
        "light_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )

"""
greeting_demo.api.app

FastAPI app factory for the Greeting demo service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Open the store and run the seeder before the app serves requests.
- Dispose shared infrastructure (DB engine) on shutdown.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from greeting_demo import __version__
from greeting_demo.api.routers.greetings import router as greetings_router
from greeting_demo.api.routers.health import router as health_router
from greeting_demo.bootstrap import open_store, seed_store
from greeting_demo.db.errors import PersistenceError
from greeting_demo.observability.logging import configure_logging, get_logger
from greeting_demo.observability.middleware import RequestContextMiddleware
from greeting_demo.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        try:
            store = await open_store(settings)
        except Exception:
            log.exception("startup_failed", step="open_store")
            raise
        app.state.engine = store.engine
        app.state.sessionmaker = store.sessionmaker
        try:
            if settings.seed_on_startup:
                await seed_store(store.sessionmaker, get_logger("greeting_demo.seeding"))
        except Exception:
            log.exception("startup_failed", step="seed")
            await store.engine.dispose()
            raise

        yield

        # Dispose the engine to close pools/FDs gracefully.
        await store.engine.dispose()
        log.info("shutdown")

    app = FastAPI(
        title="Greeting Demo",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(greetings_router)

    @app.exception_handler(PersistenceError)
    async def _persistence_error(_: Request, exc: PersistenceError) -> JSONResponse:
        log.error("persistence_error", operation=exc.operation, error=exc.message)
        return JSONResponse(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "persistence store unavailable"},
        )

    return app


# --- Module Notes -----------------------------------------------------------
# Startup order is fixed: open store -> seed -> serve. Any failure before `yield`
# aborts the lifespan, and uvicorn exits with a non-zero status.

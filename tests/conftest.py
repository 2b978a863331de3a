"""
tests.conftest

Shared fixtures: a file-backed SQLite store per test and a capturing logger.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio
import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from structlog.testing import LogCapture

from greeting_demo.bootstrap import Store, open_store
from greeting_demo.db.repositories.greetings import GreetingRepo
from greeting_demo.settings import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="test",
        log_level="DEBUG",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'greetings.db'}",
    )


@pytest_asyncio.fixture
async def store(settings: Settings) -> AsyncIterator[Store]:
    store = await open_store(settings)
    try:
        yield store
    finally:
        await store.engine.dispose()


@pytest_asyncio.fixture
async def session(store: Store) -> AsyncIterator[AsyncSession]:
    async with store.sessionmaker() as session:
        yield session


@pytest.fixture
def repo(session: AsyncSession) -> GreetingRepo:
    return GreetingRepo(session)


@pytest.fixture
def log_capture() -> LogCapture:
    return LogCapture()


@pytest.fixture
def captured_log(log_capture: LogCapture) -> structlog.stdlib.BoundLogger:
    # Same template rendering as production, but events end up in `log_capture`.
    return structlog.stdlib.BoundLogger(
        logging.getLogger("tests.seeding"),
        processors=[structlog.stdlib.PositionalArgumentsFormatter(), log_capture],
        context={},
    )

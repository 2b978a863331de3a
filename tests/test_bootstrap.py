"""
tests.test_bootstrap

Ordered startup steps and process-level failure behaviour.

Responsibilities:
- Seeded rows persist across store reopenings.
- An unreachable store fails `open_store` and makes the service process exit non-zero.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog

from greeting_demo.bootstrap import open_store, seed_store
from greeting_demo.db.errors import PersistenceError
from greeting_demo.db.repositories.greetings import GreetingRepo
from greeting_demo.settings import Settings


@pytest.mark.asyncio
async def test_seeded_rows_survive_reopening_the_store(
    settings: Settings, captured_log: structlog.stdlib.BoundLogger
) -> None:
    store = await open_store(settings)
    try:
        await seed_store(store.sessionmaker, captured_log)
    finally:
        await store.engine.dispose()

    reopened = await open_store(settings)
    try:
        async with reopened.sessionmaker() as session:
            assert await GreetingRepo(session).count() == 4
    finally:
        await reopened.engine.dispose()


@pytest.mark.asyncio
async def test_open_store_reports_unreachable_database(tmp_path: Path) -> None:
    settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'nope' / 'x.db'}")

    with pytest.raises(PersistenceError) as exc_info:
        await open_store(settings)
    assert exc_info.value.operation == "init_db"


def test_service_exits_non_zero_when_store_is_unreachable(tmp_path: Path) -> None:
    env = {
        **os.environ,
        "GREETING_DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'x.db'}",
        "GREETING_API_HOST": "127.0.0.1",
        "GREETING_API_PORT": "0",
    }

    proc = subprocess.run(
        [sys.executable, "-m", "greeting_demo.api"],
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )

    assert proc.returncode != 0
    assert "startup_failed" in proc.stdout


# --- Module Notes -----------------------------------------------------------
# The subprocess test runs the real entry point; uvicorn runs the lifespan
# before binding a socket, so the failure happens without opening a port.

"""
greeting_demo.bootstrap

Ordered startup steps shared by the app lifespan and tests.

Responsibilities:
- Open the store: engine, session factory and schema.
- Run the seeder once in its own session.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from greeting_demo.db.init_db import init_db
from greeting_demo.db.repositories.greetings import GreetingRepo
from greeting_demo.db.session import create_engine, create_sessionmaker
from greeting_demo.seeding.seeder import GreetingSeeder
from greeting_demo.settings import Settings


@dataclass(frozen=True, slots=True)
class Store:
    engine: AsyncEngine
    sessionmaker: async_sessionmaker[AsyncSession]


async def open_store(settings: Settings) -> Store:
    engine = create_engine(settings)
    try:
        await init_db(engine)
    except Exception:
        await engine.dispose()
        raise
    return Store(engine=engine, sessionmaker=create_sessionmaker(engine))


async def seed_store(
    session_factory: async_sessionmaker[AsyncSession],
    log: structlog.stdlib.BoundLogger,
) -> None:
    async with session_factory() as session:
        await GreetingSeeder(GreetingRepo(session), log).run()

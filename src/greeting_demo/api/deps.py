"""
greeting_demo.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide request-scoped DB sessions and repositories.
- Encapsulate app.state access patterns (sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from greeting_demo.db.repositories.greetings import GreetingRepo


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created by the lifespan in `greeting_demo.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


def greeting_repo(session: AsyncSession = Depends(db_session)) -> GreetingRepo:
    return GreetingRepo(session)

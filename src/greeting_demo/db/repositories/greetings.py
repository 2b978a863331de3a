"""
greeting_demo.db.repositories.greetings

Repository for `Greeting` entities.

Responsibilities:
- Save, delete and read back greetings (one committed transaction per write).
- Provide the derived exact-match lookup `find_by_text`.
- Translate SQLAlchemy/driver failures into `PersistenceError`.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from greeting_demo.db.errors import PersistenceError
from greeting_demo.db.models import Greeting


class GreetingRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def _operation(self, name: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            # Leave the session usable for the caller after a failed statement.
            await self._session.rollback()
            raise PersistenceError(name, str(e)) from e

    async def save(self, greeting: Greeting) -> Greeting:
        async with self._operation("save"):
            self._session.add(greeting)
            await self._session.commit()
        return greeting

    async def get(self, greeting_id: int) -> Greeting | None:
        async with self._operation("get"):
            return await self._session.get(Greeting, greeting_id)

    async def find_all(self) -> list[Greeting]:
        stmt = select(Greeting).order_by(Greeting.id)
        async with self._operation("find_all"):
            return list((await self._session.execute(stmt)).scalars().all())

    async def count(self) -> int:
        stmt = select(func.count()).select_from(Greeting)
        async with self._operation("count"):
            return (await self._session.execute(stmt)).scalar_one()

    async def find_by_text(self, text: str | None) -> list[Greeting]:
        # `== None` compiles to IS NULL, so a None lookup finds rows without text.
        stmt = select(Greeting).where(Greeting.text == text).order_by(Greeting.id)
        async with self._operation("find_by_text"):
            return list((await self._session.execute(stmt)).scalars().all())

    async def delete(self, greeting: Greeting) -> None:
        async with self._operation("delete"):
            await self._session.delete(greeting)
            await self._session.commit()

    async def delete_by_id(self, greeting_id: int) -> bool:
        # False when no row has that id; nothing is deleted in that case.
        greeting = await self.get(greeting_id)
        if greeting is None:
            return False
        await self.delete(greeting)
        return True


# --- Module Notes -----------------------------------------------------------
# SQLite compares TEXT with BINARY collation, so `find_by_text` is case-sensitive.

"""
greeting_demo.db.init_db

Schema bootstrap.

Responsibilities:
- Create the `greeting` table from the ORM metadata when it does not exist yet.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from greeting_demo.db.errors import PersistenceError
from greeting_demo.db.models import Base


async def init_db(engine: AsyncEngine) -> None:
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        raise PersistenceError("init_db", str(e)) from e


# --- Module Notes -----------------------------------------------------------
# create_all is idempotent; existing rows survive restarts of a file-backed store.

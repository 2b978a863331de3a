"""
greeting_demo.db.models

Persistence schema for the demo service.

Responsibilities:
- Define the `Greeting` ORM model: a store-assigned integer id and a free-form text.
- Render greetings as `Greeting [id=<id>, text=<text>]` (used verbatim in seeder logs).
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


def _or_null(value: object) -> str:
    return "null" if value is None else str(value)


class Greeting(Base):
    __tablename__ = "greeting"

    id: Mapped[int | None] = mapped_column(primary_key=True, autoincrement=True)
    # Deliberately unconstrained: duplicates, empty strings and NULL are all allowed.
    text: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __init__(self, text: str | None = None) -> None:
        super().__init__()
        self.text = text

    def __str__(self) -> str:
        return f"Greeting [id={_or_null(self.id)}, text={_or_null(self.text)}]"

    __repr__ = __str__


# --- Module Notes -----------------------------------------------------------
# `id` stays None on transient instances and is filled in by the flush that
# first persists the row.

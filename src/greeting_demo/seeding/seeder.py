"""
greeting_demo.seeding.seeder

One-shot startup routine that loads the demo greetings.

Responsibilities:
- Insert the fixed seed rows, in order, one committed save each.
- Log the resulting record count and every stored greeting at debug level.
"""

from __future__ import annotations

import structlog

from greeting_demo.db.models import Greeting
from greeting_demo.db.repositories.greetings import GreetingRepo

# "Hello" appears twice on purpose: it demonstrates non-unique `find_by_text` results.
SEED_TEXTS: tuple[str, ...] = ("Hello", "Hola", "Ohai", "Hello")


class GreetingSeeder:
    """
    Runs against whatever the store already holds; every run adds four rows.
    A `PersistenceError` aborts the run and propagates unchanged, leaving any
    rows saved before the failure in place.
    """

    def __init__(self, repo: GreetingRepo, log: structlog.stdlib.BoundLogger) -> None:
        self._repo = repo
        self._log = log

    async def run(self) -> list[Greeting]:
        self._log.debug("loading database..")

        saved = []
        for text in SEED_TEXTS:
            saved.append(await self._repo.save(Greeting(text)))

        self._log.debug("record count: %s", await self._repo.count())
        for greeting in await self._repo.find_all():
            self._log.debug(str(greeting))
        return saved


# --- Module Notes -----------------------------------------------------------
# The logger is injected so tests can capture the exact lines; production wiring
# lives in `greeting_demo.bootstrap.seed_store`.

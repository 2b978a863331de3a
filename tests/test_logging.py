"""
tests.test_logging

Level handling of `configure_logging`.
"""

from __future__ import annotations

import logging

from greeting_demo.observability.logging import configure_logging


def test_debug_level_is_scoped_to_service_loggers() -> None:
    configure_logging(service_name="greeting-demo", level="DEBUG")

    assert logging.getLogger("greeting_demo.seeding").isEnabledFor(logging.DEBUG)
    assert not logging.getLogger("aiosqlite").isEnabledFor(logging.DEBUG)
    assert not logging.getLogger("sqlalchemy.engine").isEnabledFor(logging.DEBUG)


def test_warning_level_hides_service_info_lines() -> None:
    configure_logging(service_name="greeting-demo", level="WARNING")

    assert not logging.getLogger("greeting_demo.api.app").isEnabledFor(logging.INFO)
    assert logging.getLogger("greeting_demo.api.app").isEnabledFor(logging.ERROR)

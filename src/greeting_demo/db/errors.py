"""
greeting_demo.db.errors

Persistence-layer exceptions.

Responsibilities:
- Give callers one error type for "the store could not complete this operation",
  independent of the SQLAlchemy/driver exception that caused it.
"""

from __future__ import annotations


class PersistenceError(Exception):
    """
    Raised when the store is unreachable or an operation cannot complete.
    The original driver error is kept as `__cause__`.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message


# --- Module Notes -----------------------------------------------------------
# No validation errors exist for greetings (no field constraints), so this is
# the only error the repository and bootstrap raise.

"""
greeting_demo.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the ORM model, engine/session setup, errors and the greeting repository.
"""

# Package marker.

"""
greeting_demo.api.__main__

Entrypoint for running the service via `python -m greeting_demo.api`.

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from greeting_demo.api.app import create_app
from greeting_demo.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    # A failed lifespan startup (store unreachable, seeding error) makes uvicorn
    # exit with a non-zero status after the error has been logged.
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()

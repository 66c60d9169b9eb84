"""
Run the TodoMVC server.

Usage:
    python -m todomvc

Host, port and logging come from the environment (see `todomvc.settings`).
"""
from __future__ import annotations

import logging

import uvicorn

from .logging_setup import setup_logging
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def main() -> None:
    """Configure logging and serve the default application with uvicorn."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    logger.info("Listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        "todomvc.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()

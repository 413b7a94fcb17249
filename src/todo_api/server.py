"""Entry point that serves the application with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from .logging_utils import configure_logging
from .settings import get_settings

logger = logging.getLogger(__name__)

APP_IMPORT_PATH = "todo_api.main:app"


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    reload = not settings.is_production
    logger.info(
        "Starting Todo API on http://%s:%s (env=%s, reload=%s)",
        settings.host,
        settings.port,
        settings.app_env,
        reload,
    )
    uvicorn.run(
        APP_IMPORT_PATH,
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""
Server Entry Point - Main Layer

Runs the FastAPI application with uvicorn using the service settings.
"""

import uvicorn

from heartbeat.main.config import get_settings
from heartbeat.shared import get_logger, update_logging_from_settings

logger = get_logger(__name__)

APP_IMPORT_PATH = "heartbeat.main.app:app"


def main() -> None:
    """Start uvicorn bound to the configured host and port."""
    settings = get_settings()
    update_logging_from_settings(settings)
    logger.info(
        "server.starting",
        host=settings.service.host,
        port=settings.service.port,
        environment=settings.environment.value,
    )
    uvicorn.run(
        APP_IMPORT_PATH,
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_config=None,
    )

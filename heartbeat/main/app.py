"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app and installs the
heartbeat middleware bound to the container's monitor.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from heartbeat.application.models import HeartbeatOptions
from heartbeat.domain.entities.diagnostics import DiagnosticsResults
from heartbeat.domain.ports.heartbeat_monitor import IHeartbeatMonitor
from heartbeat.main.config import get_settings
from heartbeat.main.container import init_container
from heartbeat.presentation.middleware import use_heartbeat
from heartbeat.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

# Update logging with complete settings
update_logging_from_settings(get_settings())

logger = get_logger(__name__)


async def run_monitor(monitor: IHeartbeatMonitor) -> DiagnosticsResults:
    """Heartbeat invocation bound to every resolved monitor."""
    return await monitor.run()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start-up time and log the application lifecycle."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")
    yield
    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    container = init_container(settings)

    app = FastAPI(
        title=settings.service.title,
        description=settings.service.description,
        version=settings.service.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.container = container

    options = HeartbeatOptions.from_settings(settings)
    use_heartbeat(
        app,
        monitor_resolver=container.heartbeat_monitor,
        heartbeat=run_monitor,
        process_info_provider=container.process_info_provider(),
        options=options,
    )
    logger.info(
        "heartbeat.installed",
        route=options.heartbeat_route,
        api_key_required=options.requires_api_key,
    )

    return app


app = create_app()

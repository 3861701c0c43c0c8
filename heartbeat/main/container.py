"""
Dependency container injection module - Main Layer

Composition root wiring the heartbeat runner, the default monitor and the
process information provider from the application settings.
"""

from dependency_injector import containers, providers

from heartbeat.domain.services.diagnostics_runner import DiagnosticsRunner
from heartbeat.infrastructure.monitors import ProbeHeartbeatMonitor
from heartbeat.infrastructure.probes import build_http_probes
from heartbeat.infrastructure.services import PsutilProcessInfoProvider
from heartbeat.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    # Settings
    config = providers.Configuration()

    # Infrastructure
    process_info_provider = providers.Singleton(PsutilProcessInfoProvider)

    http_probes = providers.Callable(
        build_http_probes,
        urls=config.heartbeat.http_checks,
        timeout=config.heartbeat.http_timeout,
        base_url=config.heartbeat.http_base_url,
    )

    # Domain
    diagnostics_runner = providers.Singleton(DiagnosticsRunner)

    # Resolved once per heartbeat request by the middleware
    heartbeat_monitor = providers.Factory(
        ProbeHeartbeatMonitor,
        probes=http_probes,
        runner=diagnostics_runner,
        parallel=config.heartbeat.parallel,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.debug(
        "container.initialized",
        http_checks=len(settings.heartbeat.http_checks),
        parallel=settings.heartbeat.parallel,
    )
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container

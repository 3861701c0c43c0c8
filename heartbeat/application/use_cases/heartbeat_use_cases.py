"""Use case dispatching a heartbeat to the registered monitor."""

from typing import Any, Generic, Optional

from heartbeat.domain.entities.diagnostics import DiagnosticsResults, HeartbeatOutcome
from heartbeat.domain.ports.heartbeat_monitor import (
    HeartbeatFunc,
    MonitorResolver,
    MonitorT,
)
from heartbeat.domain.ports.process_info import IProcessInfoProvider
from heartbeat.shared import get_logger

_default_logger = get_logger(__name__)


class ExecuteHeartbeatUseCase(Generic[MonitorT]):
    """Resolve the monitor, run its diagnostics and stamp process information.

    Errors raised while resolving the monitor, invoking the heartbeat
    function or sampling the process propagate to the caller. Probe errors
    never do: the runner has already turned them into results.
    """

    def __init__(
        self,
        monitor_resolver: MonitorResolver[MonitorT],
        heartbeat: HeartbeatFunc[MonitorT],
        process_info_provider: IProcessInfoProvider,
    ) -> None:
        self._monitor_resolver = monitor_resolver
        self._heartbeat = heartbeat
        self._process_info_provider = process_info_provider

    async def execute(self, logger: Optional[Any] = None) -> HeartbeatOutcome:
        log = logger or _default_logger

        results: Optional[DiagnosticsResults] = None
        monitor = self._monitor_resolver()
        if monitor is not None:
            results = await self._heartbeat(monitor)
        else:
            log.info("heartbeat.monitor.missing")

        outcome = HeartbeatOutcome(
            results=results if results is not None else DiagnosticsResults.empty(),
            executed=results is not None,
        )
        outcome.results.process_information = self._process_info_provider.current()
        return outcome

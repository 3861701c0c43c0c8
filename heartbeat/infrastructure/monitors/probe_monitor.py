"""Heartbeat monitor running a fixed collection of probes."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from heartbeat.domain.entities.diagnostics import DiagnosticsResults
from heartbeat.domain.entities.probe import Probe
from heartbeat.domain.ports.heartbeat_monitor import IHeartbeatMonitor
from heartbeat.domain.services.diagnostics_runner import DiagnosticsRunner, ProbeLike
from heartbeat.shared import get_logger

logger = get_logger(__name__)


class ProbeHeartbeatMonitor(IHeartbeatMonitor):
    """Monitor whose probes are registered once at construction."""

    def __init__(
        self,
        probes: Iterable[ProbeLike] = (),
        runner: Optional[DiagnosticsRunner] = None,
        parallel: bool = True,
    ) -> None:
        self._probes: List[Probe] = [Probe.from_callable(probe) for probe in probes]
        self._runner = runner or DiagnosticsRunner()
        self._parallel = parallel

    @property
    def probes(self) -> Sequence[Probe]:
        return tuple(self._probes)

    async def run(self) -> DiagnosticsResults:
        logger.debug(
            "heartbeat.monitor.run",
            probes=len(self._probes),
            parallel=self._parallel,
        )
        return await self._runner.run(self._probes, parallel=self._parallel)

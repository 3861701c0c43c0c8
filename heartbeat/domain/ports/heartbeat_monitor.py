"""Domain port for components that run the heartbeat diagnostics."""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, Protocol, TypeVar

from heartbeat.domain.entities.diagnostics import DiagnosticsResults


class IHeartbeatMonitor(Protocol):
    """Interface for an object that runs its registered probes."""

    async def run(self) -> DiagnosticsResults:
        """Execute the probes and return the aggregated results."""
        ...


MonitorT = TypeVar("MonitorT")

# Returns the monitor for the current request, or None when none is registered
MonitorResolver = Callable[[], Optional[MonitorT]]

# Invocation bound at configuration time, e.g. ``lambda monitor: monitor.run()``
HeartbeatFunc = Callable[[MonitorT], Awaitable[DiagnosticsResults]]

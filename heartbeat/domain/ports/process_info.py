"""Domain port for sampling information about the running process."""

from __future__ import annotations

from typing import Protocol

from heartbeat.domain.entities.diagnostics import ProcessInformation


class IProcessInfoProvider(Protocol):
    """Interface for retrieving process start time and uptime."""

    def current(self) -> ProcessInformation:
        """Sample the process information at call time."""
        ...

"""Infrastructure implementation sampling the current process with psutil."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Callable, Optional

import psutil

from heartbeat.domain.entities.diagnostics import ProcessInformation
from heartbeat.domain.ports.process_info import IProcessInfoProvider


class PsutilProcessInfoProvider(IProcessInfoProvider):
    """Read the start time of a process and compute its uptime."""

    def __init__(
        self,
        pid: Optional[int] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._pid = pid if pid is not None else os.getpid()
        self._clock = clock

    def current(self) -> ProcessInformation:
        # Not cached: every heartbeat reports a fresh sample
        process = psutil.Process(self._pid)
        start_time = datetime.fromtimestamp(process.create_time(), tz=timezone.utc)
        uptime = self._clock() - start_time
        return ProcessInformation(
            start_time=start_time,
            uptime_milliseconds=max(0, int(uptime.total_seconds() * 1000)),
        )

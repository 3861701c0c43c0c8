from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone

from heartbeat.infrastructure.services.process_info_service import (
    PsutilProcessInfoProvider,
)


class _StubProcess:
    def __init__(self, pid: int, created: float) -> None:
        self.pid = pid
        self._created = created

    def create_time(self) -> float:
        return self._created


def test_current_reports_start_time_and_uptime(monkeypatch) -> None:
    started = datetime(2024, 9, 9, 12, 0, tzinfo=timezone.utc)
    now = started + timedelta(seconds=90, milliseconds=250)
    seen_pids = []

    def _process(pid: int) -> _StubProcess:
        seen_pids.append(pid)
        return _StubProcess(pid, started.timestamp())

    monkeypatch.setattr(
        "heartbeat.infrastructure.services.process_info_service.psutil.Process",
        _process,
    )

    provider = PsutilProcessInfoProvider(pid=1234, clock=lambda: now)
    info = provider.current()

    assert seen_pids == [1234]
    assert info.start_time == started
    assert info.uptime_milliseconds == 90250


def test_uptime_is_never_negative(monkeypatch) -> None:
    started = datetime(2024, 9, 9, 12, 0, tzinfo=timezone.utc)
    monkeypatch.setattr(
        "heartbeat.infrastructure.services.process_info_service.psutil.Process",
        lambda pid: _StubProcess(pid, started.timestamp()),
    )

    provider = PsutilProcessInfoProvider(
        clock=lambda: started - timedelta(seconds=1)
    )

    assert provider.current().uptime_milliseconds == 0


def test_current_process_is_sampled_fresh() -> None:
    provider = PsutilProcessInfoProvider()

    first = provider.current()
    second = provider.current()

    assert first.start_time.tzinfo is not None
    assert first.start_time == second.start_time
    assert second.uptime_milliseconds >= first.uptime_milliseconds
    assert first.start_time <= datetime.now(timezone.utc)
    assert provider._pid == os.getpid()

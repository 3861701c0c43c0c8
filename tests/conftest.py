from __future__ import annotations

import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from heartbeat.domain.entities.diagnostics import ProcessInformation  # noqa: E402

FIXED_START_TIME = datetime(2024, 9, 9, 12, 0, tzinfo=timezone.utc)


class SpyProbe:
    """Callable probe recording every invocation."""

    def __init__(self, name: str = "spy", error: Exception | None = None) -> None:
        self.probe_name = name
        self.error = error
        self.calls = 0

    async def __call__(self) -> None:
        self.calls += 1
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error


class FixedProcessInfoProvider:
    def __init__(self, uptime_milliseconds: int = 1500) -> None:
        self.uptime_milliseconds = uptime_milliseconds
        self.samples = 0

    def current(self) -> ProcessInformation:
        self.samples += 1
        return ProcessInformation(
            start_time=FIXED_START_TIME,
            uptime_milliseconds=self.uptime_milliseconds,
        )


def make_probe(name: str, error: Exception | None = None, delay: float = 0.0):
    async def _probe() -> None:
        if delay:
            await asyncio.sleep(delay)
        if error is not None:
            raise error

    _probe.probe_name = name  # type: ignore[attr-defined]
    return _probe


@pytest.fixture()
def spy_probe() -> SpyProbe:
    return SpyProbe()


@pytest.fixture()
def process_info_provider() -> FixedProcessInfoProvider:
    return FixedProcessInfoProvider()


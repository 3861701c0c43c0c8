"""
Diagnostics domain entities.

Value objects produced by a heartbeat run: one ``ProbeResult`` per executed
probe, the aggregated ``DiagnosticsResults`` envelope and the
``ProcessInformation`` snapshot attached before the response is sent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Outcome of a single probe execution."""

    name: str
    success: bool
    elapsed_milliseconds: int = 0
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.elapsed_milliseconds < 0:
            raise ValueError("elapsed_milliseconds must be non-negative")


@dataclass(frozen=True, slots=True)
class ProcessInformation:
    """Start time and uptime of the running process."""

    start_time: datetime
    uptime_milliseconds: int


@dataclass(slots=True)
class DiagnosticsResults:
    """Aggregated results of a heartbeat run.

    ``success`` is derived from ``results`` on every access so it can never
    disagree with the list contents. ``process_information`` is the only
    attribute expected to be set after construction.
    """

    results: Tuple[ProbeResult, ...] = ()
    process_information: Optional[ProcessInformation] = None

    def __post_init__(self) -> None:
        self.results = tuple(self.results)

    @property
    def success(self) -> bool:
        return all(result.success for result in self.results)

    @property
    def failures(self) -> Tuple[ProbeResult, ...]:
        return tuple(result for result in self.results if not result.success)

    @classmethod
    def empty(cls) -> "DiagnosticsResults":
        return cls(results=())

    @classmethod
    def from_results(cls, results: Iterable[ProbeResult]) -> "DiagnosticsResults":
        return cls(results=tuple(results))


@dataclass(frozen=True, slots=True)
class HeartbeatOutcome:
    """Result of dispatching a heartbeat.

    ``executed`` is False when no monitor could be resolved; the response then
    carries the vacuous ``results`` but is still reported as unhealthy.
    """

    results: DiagnosticsResults = field(default_factory=DiagnosticsResults.empty)
    executed: bool = True

    @property
    def healthy(self) -> bool:
        return self.executed and self.results.success

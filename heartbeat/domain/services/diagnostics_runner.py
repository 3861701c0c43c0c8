"""Domain service executing probes and aggregating their outcomes."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Any, Iterable, List, Union

from heartbeat.domain.entities.diagnostics import DiagnosticsResults, ProbeResult
from heartbeat.domain.entities.probe import Probe, ProbeAction

ProbeLike = Union[Probe, ProbeAction]


def _elapsed_ms(start: float) -> int:
    return max(0, int((perf_counter() - start) * 1000))


def _error_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class _RunState:
    """Tasks spawned by one run and whether the run itself was cancelled."""

    def __init__(self) -> None:
        self.cancelled = False
        self.tasks: List[asyncio.Task] = []

    def spawn(self, coro: Any) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self.tasks.append(task)
        return task

    def cancel(self) -> None:
        self.cancelled = True
        for task in self.tasks:
            task.cancel()


class DiagnosticsRunner:
    """Run a collection of probes and build a ``DiagnosticsResults``.

    Every probe is isolated: an exception raised by one probe, including a
    ``CancelledError`` it did not ask for, is recorded on its own
    ``ProbeResult`` and never reaches sibling probes or the caller.
    No timeout is applied. Probes are cancelled only when the run is.
    """

    async def run(
        self, probes: Iterable[ProbeLike], parallel: bool = False
    ) -> DiagnosticsResults:
        """Execute ``probes`` and aggregate the results.

        Args:
            probes: Probes or bare zero-argument callables.
            parallel: Start every probe at once. Results are then listed in
                completion order instead of input order.

        Raises:
            TypeError: If ``probes`` is None or contains a non-callable.
            asyncio.CancelledError: If the run itself is cancelled. Probes
                still in flight are cancelled with it.
        """
        if probes is None:
            raise TypeError("probes must not be None")

        normalized = [Probe.from_callable(probe) for probe in probes]
        state = _RunState()
        try:
            if parallel:
                results = await self._run_parallel(normalized, state)
            else:
                results = await self._run_sequential(normalized, state)
        except asyncio.CancelledError:
            state.cancel()
            raise

        return DiagnosticsResults.from_results(results)

    async def _run_sequential(
        self, probes: List[Probe], state: _RunState
    ) -> List[ProbeResult]:
        # Shielded so a cancellation of the run lands here, not inside the probe
        return [
            await asyncio.shield(state.spawn(self._execute(probe, state)))
            for probe in probes
        ]

    async def _run_parallel(
        self, probes: List[Probe], state: _RunState
    ) -> List[ProbeResult]:
        tasks = [state.spawn(self._execute(probe, state)) for probe in probes]
        return [await completed for completed in asyncio.as_completed(tasks)]

    async def _execute(self, probe: Probe, state: _RunState) -> ProbeResult:
        start = perf_counter()
        try:
            await probe()
        except asyncio.CancelledError as exc:
            if state.cancelled:
                raise
            return _failed(probe, start, exc)
        except Exception as exc:
            return _failed(probe, start, exc)

        return ProbeResult(
            name=probe.name,
            success=True,
            elapsed_milliseconds=_elapsed_ms(start),
        )


def _failed(probe: Probe, start: float, exc: BaseException) -> ProbeResult:
    return ProbeResult(
        name=probe.name,
        success=False,
        elapsed_milliseconds=_elapsed_ms(start),
        error_message=_error_message(exc),
    )


async def run_diagnostics(
    probes: Iterable[Any], parallel: bool = False
) -> DiagnosticsResults:
    """Run ``probes`` with a default ``DiagnosticsRunner``."""
    return await DiagnosticsRunner().run(probes, parallel=parallel)

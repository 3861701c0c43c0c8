"""Heartbeat diagnostics service."""

from heartbeat.domain.entities import (
    DiagnosticsResults,
    Probe,
    ProbeResult,
    ProcessInformation,
)
from heartbeat.domain.services import DiagnosticsRunner, run_diagnostics

__version__ = "1.0.0"

__all__ = [
    "DiagnosticsResults",
    "DiagnosticsRunner",
    "Probe",
    "ProbeResult",
    "ProcessInformation",
    "run_diagnostics",
]

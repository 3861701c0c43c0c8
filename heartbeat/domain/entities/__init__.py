"""
Domain Entities Package

This package contains the value objects describing probes and their results.
"""

from .diagnostics import (
    DiagnosticsResults,
    HeartbeatOutcome,
    ProbeResult,
    ProcessInformation,
)
from .errors import DomainError, ProbeFailedError
from .probe import Probe, ProbeAction, derive_probe_name

__all__ = [
    "Probe",
    "ProbeAction",
    "derive_probe_name",
    "ProbeResult",
    "DiagnosticsResults",
    "ProcessInformation",
    "HeartbeatOutcome",
    "DomainError",
    "ProbeFailedError",
]

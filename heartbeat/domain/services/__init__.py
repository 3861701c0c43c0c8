"""Domain services package."""

from .diagnostics_runner import DiagnosticsRunner, ProbeLike, run_diagnostics

__all__ = ["DiagnosticsRunner", "ProbeLike", "run_diagnostics"]

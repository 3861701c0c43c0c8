"""
Application Layer Package

This package orchestrates a heartbeat: it resolves the monitor, runs its
diagnostics through the domain runner and shapes the result for transport.
"""

from heartbeat.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]

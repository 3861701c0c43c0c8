"""
Domain Layer Package

This package contains the diagnostics model and the runner that executes
probes. It has no dependencies on web frameworks or infrastructure.
"""

from heartbeat.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]

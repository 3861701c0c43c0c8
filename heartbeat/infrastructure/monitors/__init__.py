"""Heartbeat monitors package."""

from .probe_monitor import ProbeHeartbeatMonitor

__all__ = ["ProbeHeartbeatMonitor"]

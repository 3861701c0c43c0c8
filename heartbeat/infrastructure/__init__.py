"""
Infrastructure Layer Package

This package contains implementations of the domain ports: process
sampling with psutil, HTTP probes built on httpx and the default monitor.
"""

from heartbeat.infrastructure import monitors, probes, services

__all__ = ["monitors", "probes", "services"]

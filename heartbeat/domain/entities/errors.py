"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ProbeFailedError(DomainError):
    """Raised by a probe to report that the checked component is unhealthy."""

    def __init__(
        self, probe_name: str, reason: str, details: Optional[Dict[str, Any]] = None
    ):
        self.probe_name = probe_name
        self.reason = reason
        super().__init__(reason, details)

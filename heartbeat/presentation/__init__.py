"""
Presentation Layer Package

This package contains the HTTP-facing components of the heartbeat service.
"""

from heartbeat.presentation import middleware

__all__ = ["middleware"]

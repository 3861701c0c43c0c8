"""Application-level option models."""

from .heartbeat_options import HeartbeatOptions

__all__ = ["HeartbeatOptions"]

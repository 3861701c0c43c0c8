"""Application use cases package."""

from .heartbeat_use_cases import ExecuteHeartbeatUseCase

__all__ = ["ExecuteHeartbeatUseCase"]

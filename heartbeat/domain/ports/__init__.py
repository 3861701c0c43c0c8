"""Domain ports package."""

from .heartbeat_monitor import HeartbeatFunc, IHeartbeatMonitor, MonitorResolver
from .process_info import IProcessInfoProvider

__all__ = [
    "IHeartbeatMonitor",
    "IProcessInfoProvider",
    "HeartbeatFunc",
    "MonitorResolver",
]

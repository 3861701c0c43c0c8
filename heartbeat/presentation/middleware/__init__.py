"""
Middleware Package - Presentation Layer

ASGI middleware exposed by the heartbeat service. The heartbeat middleware
only claims GET requests on its route and forwards every other request to
the rest of the application.
"""

from .heartbeat_middleware import HeartbeatMiddleware, is_authorized_request, use_heartbeat

__all__ = ["HeartbeatMiddleware", "is_authorized_request", "use_heartbeat"]

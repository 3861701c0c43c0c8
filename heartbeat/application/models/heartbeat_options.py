"""Lightweight option structures consumed by the heartbeat middleware."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from heartbeat.shared.consts import DEFAULT_API_KEY_HEADER_KEY, DEFAULT_HEARTBEAT_ROUTE


@dataclass(frozen=True)
class HeartbeatOptions:
    """Subset of configuration required to serve the heartbeat endpoint.

    An empty or blank ``api_key`` disables the API key check.
    """

    api_key: str = ""
    api_key_header_key: str = DEFAULT_API_KEY_HEADER_KEY
    heartbeat_route: str = DEFAULT_HEARTBEAT_ROUTE

    @property
    def requires_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def from_settings(cls, settings: Any) -> "HeartbeatOptions":
        """Build options from ``AppSettings`` or its ``heartbeat`` section."""
        section = getattr(settings, "heartbeat", settings)
        return cls(
            api_key=section.api_key or "",
            api_key_header_key=section.api_key_header_key,
            heartbeat_route=section.route,
        )

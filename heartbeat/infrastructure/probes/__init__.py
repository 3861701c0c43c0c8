"""Concrete probes package."""

from .http_probe import HttpEndpointProbe, build_http_probes, normalize_url

__all__ = ["HttpEndpointProbe", "build_http_probes", "normalize_url"]

"""HTTP endpoint probe - Infrastructure layer."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional
from urllib.parse import urljoin

import httpx

from heartbeat.domain.entities.errors import ProbeFailedError


class HttpEndpointProbe:
    """Probe that succeeds when a GET on ``url`` answers below HTTP 400.

    Transport errors raised by httpx propagate unchanged so their message
    ends up in the probe result.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 5.0,
        headers: Optional[Dict[str, str]] = None,
        name: Optional[str] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.headers = headers or {}
        self.probe_name = name or f"http:{url}"

    async def __call__(self) -> None:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(self.url, headers=self.headers)

        if response.status_code >= 400:
            raise ProbeFailedError(
                self.probe_name,
                f"HTTP {response.status_code} from {self.url}",
                details={"url": self.url, "status_code": response.status_code},
            )

    def __repr__(self) -> str:
        return f"HttpEndpointProbe(url={self.url!r})"


def normalize_url(base_url: str, path: str) -> str:
    if not path:
        return base_url
    base = base_url if base_url.endswith("/") else f"{base_url}/"
    return urljoin(base, path.lstrip("/"))


def build_http_probes(
    urls: Iterable[str], timeout: float = 5.0, base_url: str = ""
) -> List[HttpEndpointProbe]:
    """Create one probe per configured URL, skipping blank entries.

    Relative entries are resolved against ``base_url`` when it is set.
    """
    probes: List[HttpEndpointProbe] = []
    for url in urls or ():
        url = url.strip()
        if not url:
            continue
        if base_url and "://" not in url:
            url = normalize_url(base_url, url)
        probes.append(HttpEndpointProbe(url, timeout=timeout))
    return probes

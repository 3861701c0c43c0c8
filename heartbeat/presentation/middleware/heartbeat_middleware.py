"""Middleware serving the heartbeat endpoint."""

from __future__ import annotations

import hmac
from time import perf_counter
from typing import Any, Optional

from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp
from structlog.contextvars import bound_contextvars

from heartbeat.application.dtos.heartbeat_dto import DiagnosticsResultsDTO
from heartbeat.application.models import HeartbeatOptions
from heartbeat.application.use_cases.heartbeat_use_cases import (
    ExecuteHeartbeatUseCase,
)
from heartbeat.domain.ports.heartbeat_monitor import HeartbeatFunc, MonitorResolver
from heartbeat.domain.ports.process_info import IProcessInfoProvider
from heartbeat.shared import get_logger
from heartbeat.shared.consts import (
    EXECUTION_TIME_SCOPE,
    HEARTBEAT_SCOPE,
    STATUS_CODE_SCOPE,
)

logger = get_logger(__name__)

JSON_MEDIA_TYPE = "application/json"


def is_authorized_request(api_key: Optional[str], actual_key: Optional[str]) -> bool:
    """A blank ``api_key`` authorizes everyone, otherwise the values must match."""
    if not api_key or not api_key.strip():
        return True
    if actual_key is None:
        return False
    return hmac.compare_digest(api_key.encode("utf-8"), actual_key.encode("utf-8"))


class HeartbeatMiddleware(BaseHTTPMiddleware):
    """Answer GET requests on the heartbeat route, pass everything else on."""

    def __init__(
        self,
        app: ASGIApp,
        use_case: ExecuteHeartbeatUseCase[Any],
        options: Optional[HeartbeatOptions] = None,
    ) -> None:
        super().__init__(app)
        self._use_case = use_case
        self._options = options or HeartbeatOptions()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if (
            _route_key(request.url.path) != _route_key(self._options.heartbeat_route)
            or request.method.upper() != "GET"
        ):
            return await call_next(request)

        with bound_contextvars(**{HEARTBEAT_SCOPE: True}):
            return await self._invoke_heartbeat(request)

    async def _invoke_heartbeat(self, request: Request) -> Response:
        actual_key = request.headers.get(self._options.api_key_header_key)
        if not is_authorized_request(self._options.api_key, actual_key):
            logger.warning(
                "heartbeat.unauthorized",
                **{STATUS_CODE_SCOPE: status.HTTP_401_UNAUTHORIZED},
            )
            return Response(status_code=status.HTTP_401_UNAUTHORIZED)

        request_logger = logger.bind(path=request.url.path)
        start = perf_counter()
        try:
            outcome = await self._use_case.execute(request_logger)
        except Exception as exc:
            request_logger.error(
                "heartbeat.dispatch.failure",
                error=str(exc),
                exc_info=exc,
                **{
                    EXECUTION_TIME_SCOPE: _elapsed_ms(start),
                    STATUS_CODE_SCOPE: status.HTTP_500_INTERNAL_SERVER_ERROR,
                },
            )
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        elapsed = _elapsed_ms(start)
        if outcome.healthy:
            status_code = status.HTTP_200_OK
            event = "heartbeat.success"
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            event = "heartbeat.failure"

        request_logger.info(
            event,
            probes=len(outcome.results.results),
            failed=len(outcome.results.failures),
            **{EXECUTION_TIME_SCOPE: elapsed, STATUS_CODE_SCOPE: status_code},
        )

        body = DiagnosticsResultsDTO.from_domain(outcome.results).to_json()
        return Response(
            content=body, status_code=status_code, media_type=JSON_MEDIA_TYPE
        )


def _route_key(path: str) -> str:
    # Case-insensitive, trailing slash ignored
    return path.rstrip("/").lower()


def _elapsed_ms(start: float) -> int:
    return int((perf_counter() - start) * 1000)


def use_heartbeat(
    app: FastAPI,
    monitor_resolver: MonitorResolver[Any],
    heartbeat: HeartbeatFunc[Any],
    process_info_provider: IProcessInfoProvider,
    options: Optional[HeartbeatOptions] = None,
) -> None:
    """Install the heartbeat middleware on ``app``.

    Args:
        app: Application to install the middleware on.
        monitor_resolver: Called per request; returns the monitor or None.
        heartbeat: Invocation run against the resolved monitor, for example
            ``lambda monitor: monitor.run()``.
        process_info_provider: Samples process start time and uptime.
        options: API key, header name and route.
    """
    use_case = ExecuteHeartbeatUseCase(
        monitor_resolver=monitor_resolver,
        heartbeat=heartbeat,
        process_info_provider=process_info_provider,
    )
    app.add_middleware(
        HeartbeatMiddleware,
        use_case=use_case,
        options=options or HeartbeatOptions(),
    )

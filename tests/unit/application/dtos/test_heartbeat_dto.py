from __future__ import annotations

import json
from datetime import datetime, timezone

from heartbeat.application.dtos.heartbeat_dto import (
    DiagnosticsResultsDTO,
    ProbeResultDTO,
)
from heartbeat.domain.entities.diagnostics import (
    DiagnosticsResults,
    ProbeResult,
    ProcessInformation,
)


def test_probe_result_dto_from_domain() -> None:
    dto = ProbeResultDTO.from_domain(
        ProbeResult(name="db", success=False, elapsed_milliseconds=7, error_message="x")
    )
    assert dto.name == "db"
    assert dto.success is False
    assert dto.elapsed_milliseconds == 7
    assert dto.error_message == "x"


def test_diagnostics_results_dto_serializes_camel_case() -> None:
    domain = DiagnosticsResults.from_results(
        [
            ProbeResult(name="ok", success=True, elapsed_milliseconds=1),
            ProbeResult(
                name="ko", success=False, elapsed_milliseconds=2, error_message="boom"
            ),
        ]
    )
    domain.process_information = ProcessInformation(
        start_time=datetime(2024, 9, 9, 12, 0, tzinfo=timezone.utc),
        uptime_milliseconds=42,
    )

    body = json.loads(DiagnosticsResultsDTO.from_domain(domain).to_json())

    assert body == {
        "results": [
            {
                "name": "ok",
                "success": True,
                "elapsedMilliseconds": 1,
                "errorMessage": None,
            },
            {
                "name": "ko",
                "success": False,
                "elapsedMilliseconds": 2,
                "errorMessage": "boom",
            },
        ],
        "success": False,
        "processInformation": {
            "startTime": "2024-09-09T12:00:00Z",
            "uptimeMilliseconds": 42,
        },
    }


def test_empty_results_dto_without_process_information() -> None:
    body = json.loads(
        DiagnosticsResultsDTO.from_domain(DiagnosticsResults.empty()).to_json()
    )
    assert body == {"results": [], "success": True, "processInformation": None}

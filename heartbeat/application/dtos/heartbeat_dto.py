"""DTOs for the heartbeat response payload."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from heartbeat.domain.entities.diagnostics import (
    DiagnosticsResults,
    ProbeResult,
    ProcessInformation,
)


class ProbeResultDTO(BaseModel):
    """Serializable representation of a single probe outcome."""

    name: str = Field(description="Logical name of the probe")
    success: bool = Field(description="Whether the probe completed without error")
    elapsed_milliseconds: int = Field(
        ge=0,
        alias="elapsedMilliseconds",
        description="Wall-clock duration of the probe",
    )
    error_message: Optional[str] = Field(
        default=None,
        alias="errorMessage",
        description="Message of the error raised by the probe",
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, result: ProbeResult) -> "ProbeResultDTO":
        return cls(
            name=result.name,
            success=result.success,
            elapsed_milliseconds=result.elapsed_milliseconds,
            error_message=result.error_message,
        )


class ProcessInformationDTO(BaseModel):
    """Serializable process start time and uptime."""

    start_time: datetime = Field(alias="startTime", description="Process start time")
    uptime_milliseconds: int = Field(
        ge=0, alias="uptimeMilliseconds", description="Process uptime"
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, info: ProcessInformation) -> "ProcessInformationDTO":
        return cls(
            start_time=info.start_time,
            uptime_milliseconds=info.uptime_milliseconds,
        )


class DiagnosticsResultsDTO(BaseModel):
    """DTO representing the heartbeat response body."""

    results: List[ProbeResultDTO] = Field(
        default_factory=list, description="Per-probe results"
    )
    success: bool = Field(description="True when every probe succeeded")
    process_information: Optional[ProcessInformationDTO] = Field(
        default=None,
        alias="processInformation",
        description="Process metadata sampled for this request",
    )

    @classmethod
    def from_domain(cls, diagnostics: DiagnosticsResults) -> "DiagnosticsResultsDTO":
        process_information = diagnostics.process_information
        return cls(
            results=[ProbeResultDTO.from_domain(item) for item in diagnostics.results],
            success=diagnostics.success,
            process_information=(
                ProcessInformationDTO.from_domain(process_information)
                if process_information is not None
                else None
            ),
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "results": [
                    {
                        "name": "HttpEndpointProbe",
                        "success": True,
                        "elapsedMilliseconds": 12,
                        "errorMessage": None,
                    },
                    {
                        "name": "DatabaseComponent",
                        "success": False,
                        "elapsedMilliseconds": 3,
                        "errorMessage": "connection refused",
                    },
                ],
                "success": False,
                "processInformation": {
                    "startTime": "2024-09-09T12:00:00Z",
                    "uptimeMilliseconds": 3600500,
                },
            }
        },
    )

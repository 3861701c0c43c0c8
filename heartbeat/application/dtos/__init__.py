"""
DTOs Package - Application Layer

This package contains the Data Transfer Objects that shape the heartbeat
JSON payload exchanged with the presentation layer.
"""

from .heartbeat_dto import DiagnosticsResultsDTO, ProbeResultDTO, ProcessInformationDTO

__all__ = ["DiagnosticsResultsDTO", "ProbeResultDTO", "ProcessInformationDTO"]

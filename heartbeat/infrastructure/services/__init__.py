"""Infrastructure services package."""

from .process_info_service import PsutilProcessInfoProvider

__all__ = ["PsutilProcessInfoProvider"]

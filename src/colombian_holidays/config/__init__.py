"""Configuration package."""

from colombian_holidays.config.settings import (
    CalendarSettings,
    ExportSettings,
    Settings,
    settings,
)

__all__ = [
    "CalendarSettings",
    "ExportSettings",
    "Settings",
    "settings",
]

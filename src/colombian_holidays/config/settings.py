"""
Application configuration.

Centralizes environment variables, constants, and settings
using dataclasses for type safety and immutability.
"""

import os
from dataclasses import dataclass, field

from colombian_holidays.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class ExportSettings:
    """iCalendar export settings."""
    
    vendor: str = field(
        default_factory=lambda: os.environ.get("ICAL_VENDOR", "AlejandroGarcia")
    )
    product: str = field(
        default_factory=lambda: os.environ.get("ICAL_PRODUCT", "ColombianHolidayCalendar")
    )
    calendar_label: str = field(
        default_factory=lambda: os.environ.get("ICAL_CALENDAR_LABEL", "Feriados Colombia")
    )
    uid_domain: str = field(
        default_factory=lambda: os.environ.get(
            "ICAL_UID_DOMAIN", "colombian-holidays.agarc.dev"
        ).strip()
    )
    
    def validate(self) -> None:
        """
        Check that every export setting has a value.
        
        Raises:
            ConfigurationError: If a setting is empty.
        """
        for name in ("vendor", "product", "calendar_label", "uid_domain"):
            if not getattr(self, name):
                raise ConfigurationError(name)


@dataclass(frozen=True)
class CalendarSettings:
    """Year range settings."""
    
    # Gregorian Easter is only defined from 1583; datetime.date stops at 9999
    min_year: int = 1583
    max_year: int = 9999
    
    # Year selector offered around the current year
    selector_years_before: int = 5
    selector_years_after: int = 10


@dataclass(frozen=True)
class Settings:
    """Main application settings."""
    
    export: ExportSettings = field(default_factory=ExportSettings)
    calendar: CalendarSettings = field(default_factory=CalendarSettings)
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", 8080)))
    debug: bool = field(default_factory=lambda: os.environ.get("DEBUG", "false").lower() == "true")


# Singleton settings instance
settings = Settings()

"""Core package - Pure holiday calculations with no external dependencies."""

from colombian_holidays.core.catalog import (
    HolidayRecord,
    HolidayType,
    build,
    get_holidays,
)
from colombian_holidays.core.easter import compute, get_easter_sunday
from colombian_holidays.core.emiliani import (
    ShiftedHolidayRecord,
    apply,
    apply_ley_emiliani,
    days_until_monday,
)
from colombian_holidays.core.exceptions import (
    BusinessError,
    ColombianHolidaysError,
    ConfigurationError,
    InfrastructureError,
    ValidationError,
)
from colombian_holidays.core.ical import (
    CalendarExporter,
    ExportableEvent,
    format_ical_date,
    now_utc,
)
from colombian_holidays.core.movable_feasts import (
    CarnivalWindow,
    EasterOffsets,
    derive_carnival,
    derive_easter_offsets,
)

__all__ = [
    # Easter and movable feasts
    "compute",
    "get_easter_sunday",
    "CarnivalWindow",
    "EasterOffsets",
    "derive_carnival",
    "derive_easter_offsets",
    # Catalog and Ley Emiliani
    "HolidayRecord",
    "HolidayType",
    "build",
    "get_holidays",
    "ShiftedHolidayRecord",
    "apply",
    "apply_ley_emiliani",
    "days_until_monday",
    # Export
    "CalendarExporter",
    "ExportableEvent",
    "format_ical_date",
    "now_utc",
    # Exceptions
    "BusinessError",
    "ColombianHolidaysError",
    "ConfigurationError",
    "InfrastructureError",
    "ValidationError",
]

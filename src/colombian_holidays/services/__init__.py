"""
Services Layer.

Orchestration of the holiday engine:
- Year overviews for renderers
- Calendar view rendering
- iCalendar export
"""

from colombian_holidays.services.holiday_calendar import (
    CalendarView,
    HolidayCalendarService,
    YearOverview,
)


__all__ = [
    "CalendarView",
    "HolidayCalendarService",
    "YearOverview",
]

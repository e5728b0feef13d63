"""
Holiday Calendar Service.

Wires the holiday engine to its consumers: the calendar renderer and
the iCalendar exporter.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from colombian_holidays.config import ExportSettings, settings
from colombian_holidays.core import (
    CalendarExporter,
    CarnivalWindow,
    EasterOffsets,
    ExportableEvent,
    HolidayRecord,
    HolidayType,
    ShiftedHolidayRecord,
    apply,
    build,
    derive_carnival,
    derive_easter_offsets,
)
from colombian_holidays.infrastructure.logging import get_logger, log_duration
from colombian_holidays.views import (
    MonthView,
    ViewMode,
    ViewState,
    build_month,
    build_year,
)
from colombian_holidays.views.grid import ASH_WEDNESDAY_TITLE, CARNIVAL_TITLE


logger = get_logger(__name__)


CARNIVAL_EVENT_TYPE = "Festividad Cultural"


@dataclass(frozen=True)
class YearOverview:
    """Everything a renderer needs to draw a year."""
    year: int
    holidays: List[ShiftedHolidayRecord]
    carnival: CarnivalWindow
    easter: EasterOffsets


@dataclass(frozen=True)
class CalendarView:
    """Rendered months for a view state."""
    state: ViewState
    months: List[MonthView]


class HolidayCalendarService:
    """
    Service for computing and exporting holiday calendars.
    
    Responsible for:
    - Building the shifted holiday list and Carnival window of a year
    - Rendering annual and monthly views from a ViewState
    - Producing iCalendar documents
    
    Holds no per-year state; every call recomputes.
    """
    
    def __init__(
        self,
        export_settings: Optional[ExportSettings] = None,
        exporter: Optional[CalendarExporter] = None,
    ) -> None:
        self._exporter = exporter or CalendarExporter.from_settings(
            export_settings or settings.export
        )
    
    def catalog(self, year: int) -> List[HolidayRecord]:
        """Holidays of the year before Ley Emiliani."""
        return build(year)
    
    def year_overview(self, year: int) -> YearOverview:
        """
        Compute the display data of a year.
        
        Args:
            year: The calendar year.
            
        Returns:
            YearOverview with shifted holidays and the Carnival window.
        """
        return YearOverview(
            year=year,
            holidays=apply(build(year)),
            carnival=derive_carnival(year),
            easter=derive_easter_offsets(year),
        )
    
    @log_duration("render_calendar")
    def render(self, state: ViewState, today: Optional[date] = None) -> CalendarView:
        """
        Render the months selected by a view state.
        
        Args:
            state: Year, month and view mode to render.
            today: Day highlighted as today.
            
        Returns:
            CalendarView with twelve months (annual) or one (monthly).
        """
        overview = self.year_overview(state.year)
        
        if state.view_mode == ViewMode.ANNUAL:
            months = build_year(state.year, overview.holidays, overview.carnival, today)
        else:
            months = [
                build_month(
                    state.year,
                    state.month,
                    overview.holidays,
                    overview.carnival,
                    today,
                )
            ]
        
        return CalendarView(state=state, months=months)
    
    def export_events(self, year: int) -> List[ExportableEvent]:
        """
        Events exported for a year.
        
        Shifted holidays first, then the Carnival days and Ash
        Wednesday. Overlapping dates are kept as separate events.
        """
        overview = self.year_overview(year)
        
        events = [
            ExportableEvent(
                name=holiday.name,
                date=holiday.date,
                type=holiday.type.value,
                original_date=holiday.original_date,
                moved=holiday.moved,
            )
            for holiday in overview.holidays
        ]
        events.extend(
            ExportableEvent(name=CARNIVAL_TITLE, date=day, type=CARNIVAL_EVENT_TYPE)
            for day in overview.carnival.carnival_days
        )
        events.append(
            ExportableEvent(
                name=ASH_WEDNESDAY_TITLE,
                date=overview.carnival.ash_wednesday,
                type=HolidayType.CATHOLIC.value,
            )
        )
        
        return events
    
    @log_duration("export_ical")
    def export_ical(self, year: int, generated_at: Optional[datetime] = None) -> str:
        """
        Build the iCalendar document of a year.
        
        Args:
            year: The calendar year.
            generated_at: DTSTAMP of every event; defaults to now.
            
        Returns:
            The document text.
        """
        events = self.export_events(year)
        
        logger.info(
            f"Exporting {len(events)} events for {year}",
            extra={"extra_fields": {"year": year, "event_count": len(events)}}
        )
        
        return self._exporter.export(year, events, generated_at=generated_at)

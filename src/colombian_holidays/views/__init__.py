"""
Views Layer.

Renderer-facing view models built on top of the holiday engine:
- Immutable view state and navigation commands
- Month and year grids of styled day cells
"""

from colombian_holidays.views.grid import (
    DAY_NAMES_LONG,
    DAY_NAMES_SHORT,
    MONTH_NAMES,
    DayCell,
    MonthView,
    build_month,
    build_year,
    classify_day,
)
from colombian_holidays.views.state import (
    ViewMode,
    ViewState,
    go_to_today,
    initial_state,
    next_month,
    parse_view_mode,
    previous_month,
    select_view,
    select_year,
    year_selector_range,
)


__all__ = [
    "DAY_NAMES_LONG",
    "DAY_NAMES_SHORT",
    "MONTH_NAMES",
    "DayCell",
    "MonthView",
    "build_month",
    "build_year",
    "classify_day",
    "ViewMode",
    "ViewState",
    "go_to_today",
    "initial_state",
    "next_month",
    "parse_view_mode",
    "previous_month",
    "select_view",
    "select_year",
    "year_selector_range",
]

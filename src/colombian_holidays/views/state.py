"""
Calendar view state.

The state a renderer needs (year, month, annual or monthly view) as an
immutable value. Every UI command is a function from the current state
to a new one.
"""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import List, Optional

from colombian_holidays.config import settings
from colombian_holidays.core.exceptions import ValidationError


class ViewMode(str, Enum):
    """Calendar layout."""
    ANNUAL = "annual"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class ViewState:
    """
    What the calendar is showing.
    
    Attributes:
        year: Displayed year.
        month: Displayed month, 1-12. Kept in annual view so that
            switching back to monthly returns to the same month.
        view_mode: Annual or monthly layout.
    """
    year: int
    month: int
    view_mode: ViewMode = ViewMode.ANNUAL
    
    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValidationError("month", f"must be between 1 and 12, got {self.month}")


def initial_state(today: Optional[date] = None) -> ViewState:
    """State shown on first load: the current year and month, annual view."""
    today = today or date.today()
    return ViewState(year=today.year, month=today.month)


def parse_view_mode(value: str) -> ViewMode:
    """
    Parse a view mode name.
    
    Raises:
        ValidationError: If the name is not a known view mode.
    """
    try:
        return ViewMode(value)
    except ValueError:
        raise ValidationError(
            "view", f"must be one of {[mode.value for mode in ViewMode]}"
        ) from None


def select_year(state: ViewState, year: int) -> ViewState:
    return replace(state, year=year)


def select_view(state: ViewState, view_mode: ViewMode) -> ViewState:
    return replace(state, view_mode=view_mode)


def previous_month(state: ViewState) -> ViewState:
    """Go back one month, wrapping January to December of the previous year."""
    if state.month == 1:
        return replace(state, year=state.year - 1, month=12)
    return replace(state, month=state.month - 1)


def next_month(state: ViewState) -> ViewState:
    """Go forward one month, wrapping December to January of the next year."""
    if state.month == 12:
        return replace(state, year=state.year + 1, month=1)
    return replace(state, month=state.month + 1)


def go_to_today(state: ViewState, today: Optional[date] = None) -> ViewState:
    """Jump to the current month in the monthly view."""
    today = today or date.today()
    return ViewState(year=today.year, month=today.month, view_mode=ViewMode.MONTHLY)


def year_selector_range(
    base_year: int,
    years_before: Optional[int] = None,
    years_after: Optional[int] = None,
) -> List[int]:
    """
    Years offered by the year selector around `base_year`.
    
    The span defaults to the calendar settings.
    """
    if years_before is None:
        years_before = settings.calendar.selector_years_before
    if years_after is None:
        years_after = settings.calendar.selector_years_after
    return list(range(base_year - years_before, base_year + years_after + 1))

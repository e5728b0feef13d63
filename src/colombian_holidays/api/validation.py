"""
API Request Validation.

Uses Pydantic for path and query parameter validation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from colombian_holidays.config import settings
from colombian_holidays.views.state import ViewMode


class YearRequest(BaseModel):
    """Year path parameter shared by every calendar endpoint."""
    
    year: int = Field(
        ...,
        ge=settings.calendar.min_year,
        le=settings.calendar.max_year,
        description="Gregorian calendar year",
    )


class CalendarViewRequest(YearRequest):
    """Query parameters of the /calendar/<year> endpoint."""
    
    view: ViewMode = Field(
        default=ViewMode.ANNUAL,
        description="annual or monthly layout",
    )
    month: Optional[int] = Field(
        default=None,
        ge=1,
        le=12,
        description="Month shown in the monthly view, defaults to the current month",
    )

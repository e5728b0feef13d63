"""
Calendar grid view model.

Turns the holiday engine output into month grids of styled day cells.
Cells are matched to holidays by date equality only.
"""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Tuple

from colombian_holidays.core.emiliani import ShiftedHolidayRecord, sunday_based_weekday
from colombian_holidays.core.movable_feasts import CarnivalWindow


MONTH_NAMES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)
DAY_NAMES_SHORT = ("Dom", "Lun", "Mar", "Mié", "Jue", "Vie", "Sáb")
DAY_NAMES_LONG = ("Domingo", "Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado")

ASH_WEDNESDAY_TITLE = "Miércoles de Ceniza"
CARNIVAL_TITLE = "Carnaval de Barranquilla"


@dataclass(frozen=True)
class DayCell:
    """A rendered day: CSS classes and tooltip title."""
    date: date
    classes: Tuple[str, ...]
    title: str = ""
    
    @property
    def day(self) -> int:
        return self.date.day


@dataclass(frozen=True)
class MonthView:
    """
    One month of the calendar.
    
    Attributes:
        year: Year of the month.
        month: Month number, 1-12.
        name: Spanish month name.
        leading_blanks: Empty cells before day 1 in a Sunday-first grid.
        cells: One DayCell per day of the month.
    """
    year: int
    month: int
    name: str
    leading_blanks: int
    cells: Tuple[DayCell, ...]


def format_moved_from(day: date) -> str:
    """Format a date as d/m/yyyy."""
    return f"{day.day}/{day.month}/{day.year}"


def find_holiday(
    day: date,
    holidays: Sequence[ShiftedHolidayRecord],
) -> Optional[ShiftedHolidayRecord]:
    """First holiday observed on `day`, if any."""
    return next((holiday for holiday in holidays if holiday.date == day), None)


def classify_day(
    day: date,
    holidays: Sequence[ShiftedHolidayRecord],
    carnival: CarnivalWindow,
    today: Optional[date] = None,
) -> DayCell:
    """
    Work out the styling of a single day.
    
    Carnival and Ash Wednesday styling wins over holiday styling; a
    holiday on such a day is only appended to the title.
    
    Args:
        day: Day to classify.
        holidays: Shifted holidays of the year.
        carnival: Carnival window of the year.
        today: Current date, highlighted when given.
        
    Returns:
        DayCell for the day.
    """
    classes: List[str] = []
    title = ""
    
    if sunday_based_weekday(day) == 0:
        classes.append("sunday")
    
    if day == carnival.ash_wednesday:
        classes.append("ash-wednesday")
        title = ASH_WEDNESDAY_TITLE
    
    if day in carnival:
        classes.append("carnival")
        title = CARNIVAL_TITLE
    
    holiday = find_holiday(day, holidays)
    if holiday:
        moved_suffix = ""
        if holiday.moved:
            moved_suffix = f" (Movido desde: {format_moved_from(holiday.original_date)})"
        
        if "carnival" in classes or "ash-wednesday" in classes:
            title += f" / {holiday.name}{moved_suffix}"
        elif holiday.moved:
            classes.append("emiliani-holiday")
            title = f"{holiday.name}{moved_suffix}"
        else:
            classes.append("holiday")
            title = holiday.name
    
    if today is not None and day == today:
        classes.append("today")
    
    return DayCell(date=day, classes=tuple(classes), title=title)


def build_month(
    year: int,
    month: int,
    holidays: Sequence[ShiftedHolidayRecord],
    carnival: CarnivalWindow,
    today: Optional[date] = None,
) -> MonthView:
    """Build the grid of one month."""
    days_in_month = calendar.monthrange(year, month)[1]
    cells = tuple(
        classify_day(date(year, month, day), holidays, carnival, today)
        for day in range(1, days_in_month + 1)
    )
    
    return MonthView(
        year=year,
        month=month,
        name=MONTH_NAMES[month - 1],
        leading_blanks=sunday_based_weekday(date(year, month, 1)),
        cells=cells,
    )


def build_year(
    year: int,
    holidays: Sequence[ShiftedHolidayRecord],
    carnival: CarnivalWindow,
    today: Optional[date] = None,
) -> List[MonthView]:
    """Build the twelve month grids of a year."""
    return [
        build_month(year, month, holidays, carnival, today)
        for month in range(1, 13)
    ]

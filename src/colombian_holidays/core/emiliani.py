"""
Ley Emiliani.

Moves the holidays that are not exempt to the following Monday.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Union

from colombian_holidays.core.catalog import HolidayRecord, HolidayType


MONDAY = 1


@dataclass(frozen=True)
class ShiftedHolidayRecord:
    """
    A holiday after the Ley Emiliani rule.
    
    Attributes:
        name: Holiday name.
        original_date: Date before shifting.
        date: Date the holiday is observed on.
        moved: True when `date` differs from `original_date`.
        fixed: Copied from the source record.
        type: Copied from the source record.
    """
    name: str
    original_date: date
    date: date
    moved: bool
    fixed: bool
    type: HolidayType


def sunday_based_weekday(day: date) -> int:
    """Weekday number with Sunday=0 and Saturday=6."""
    return (day.weekday() + 1) % 7


def days_until_monday(day: date) -> int:
    """Days to add to reach the next Monday; 0 if `day` is a Monday."""
    return (MONDAY - sunday_based_weekday(day) + 7) % 7


def shift_record(
    record: Union[HolidayRecord, ShiftedHolidayRecord],
) -> ShiftedHolidayRecord:
    """
    Apply the Monday rule to a single holiday.
    
    Args:
        record: Catalog record, or an already shifted record.
        
    Returns:
        ShiftedHolidayRecord for the holiday.
    """
    original_date = record.date
    observed = original_date
    moved = False
    
    if not record.fixed:
        delta = days_until_monday(original_date)
        if delta:
            observed = original_date + timedelta(days=delta)
            moved = True
    
    return ShiftedHolidayRecord(
        name=record.name,
        original_date=original_date,
        date=observed,
        moved=moved,
        fixed=record.fixed,
        type=record.type,
    )


def apply(
    records: Iterable[Union[HolidayRecord, ShiftedHolidayRecord]],
) -> List[ShiftedHolidayRecord]:
    """
    Apply the Ley Emiliani rule to a list of holidays.
    
    Order is preserved and every input yields exactly one output.
    
    Args:
        records: Holidays to process.
        
    Returns:
        List of ShiftedHolidayRecord.
    """
    return [shift_record(record) for record in records]


apply_ley_emiliani = apply

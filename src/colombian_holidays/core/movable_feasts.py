"""
Movable feasts.

Dates that sit at a fixed distance from Easter Sunday, and the
four-day Carnival window that ends the day before Ash Wednesday.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Tuple

from colombian_holidays.core.easter import compute as compute_easter


# Day offsets relative to Easter Sunday
HOLY_THURSDAY_OFFSET = -3
GOOD_FRIDAY_OFFSET = -2
ASH_WEDNESDAY_OFFSET = -46
ASCENSION_OFFSET = 39
CORPUS_CHRISTI_OFFSET = 60
SACRED_HEART_OFFSET = 68

CARNIVAL_LENGTH = 4


@dataclass(frozen=True)
class EasterOffsets:
    """All Easter-anchored dates of a year."""
    easter: date
    holy_thursday: date
    good_friday: date
    ash_wednesday: date
    ascension: date
    corpus_christi: date
    sacred_heart: date


@dataclass(frozen=True)
class CarnivalWindow:
    """
    Carnival days and the Ash Wednesday that closes them.
    
    Attributes:
        ash_wednesday: First day of Lent.
        carnival_days: Saturday, Sunday, Monday and Tuesday before
            Ash Wednesday, in chronological order.
    """
    ash_wednesday: date
    carnival_days: Tuple[date, ...]
    
    def __contains__(self, day: object) -> bool:
        return day in self.carnival_days


def easter_offset(easter: date, days: int) -> date:
    """Return the date `days` away from Easter Sunday."""
    return easter + timedelta(days=days)


def derive_easter_offsets(year: int) -> EasterOffsets:
    """
    Derive every Easter-dependent date for a year.
    
    Args:
        year: The calendar year.
        
    Returns:
        EasterOffsets for the year.
    """
    easter = compute_easter(year)
    
    return EasterOffsets(
        easter=easter,
        holy_thursday=easter_offset(easter, HOLY_THURSDAY_OFFSET),
        good_friday=easter_offset(easter, GOOD_FRIDAY_OFFSET),
        ash_wednesday=easter_offset(easter, ASH_WEDNESDAY_OFFSET),
        ascension=easter_offset(easter, ASCENSION_OFFSET),
        corpus_christi=easter_offset(easter, CORPUS_CHRISTI_OFFSET),
        sacred_heart=easter_offset(easter, SACRED_HEART_OFFSET),
    )


def derive_carnival(year: int) -> CarnivalWindow:
    """
    Calculate the Carnival days and Ash Wednesday for a year.
    
    Args:
        year: The calendar year.
        
    Returns:
        CarnivalWindow with the four Carnival days (Saturday to Tuesday).
    """
    ash_wednesday = easter_offset(compute_easter(year), ASH_WEDNESDAY_OFFSET)
    carnival_days = tuple(
        ash_wednesday - timedelta(days=days_before)
        for days_before in range(CARNIVAL_LENGTH, 0, -1)
    )
    
    return CarnivalWindow(
        ash_wednesday=ash_wednesday,
        carnival_days=carnival_days,
    )

"""
Colombian holiday catalog.

The authoritative table of public holidays for a year, before the
Ley Emiliani rule is applied.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List

from colombian_holidays.core.movable_feasts import derive_easter_offsets


class HolidayType(str, Enum):
    """Kind of holiday, as shown to users."""
    CIVIC = "Feriado Cívico"
    CATHOLIC = "Religioso (Católico)"
    CHRISTIAN = "Religioso (Cristiano)"


@dataclass(frozen=True)
class HolidayRecord:
    """
    A single holiday of a given year.
    
    Attributes:
        name: Holiday name, unique within a year.
        date: Date the holiday is celebrated on before any shifting.
        fixed: True when the Ley Emiliani rule never moves it. Holy
            Thursday and Good Friday depend on Easter but are fixed.
        type: Civic or religious classification.
    """
    name: str
    date: date
    fixed: bool
    type: HolidayType


# (name, month, day, type) for holidays on a fixed civil date
FIXED_DATE_HOLIDAYS = (
    ("Año Nuevo", 1, 1, HolidayType.CIVIC),
    ("Día del Trabajo", 5, 1, HolidayType.CIVIC),
    ("Día de la Independencia", 7, 20, HolidayType.CIVIC),
    ("Batalla de Boyacá", 8, 7, HolidayType.CIVIC),
    ("Inmaculada Concepción", 12, 8, HolidayType.CATHOLIC),
    ("Navidad", 12, 25, HolidayType.CHRISTIAN),
)

# Civil-date holidays moved to Monday by Ley Emiliani
MOVABLE_DATE_HOLIDAYS = (
    ("Epifanía", 1, 6, HolidayType.CATHOLIC),
    ("San José", 3, 19, HolidayType.CATHOLIC),
    ("San Pedro y San Pablo", 6, 29, HolidayType.CATHOLIC),
    ("Asunción de la Virgen", 8, 15, HolidayType.CATHOLIC),
    ("Día de la Raza", 10, 12, HolidayType.CIVIC),
    ("Día de Todos los Santos", 11, 1, HolidayType.CATHOLIC),
    ("Independencia de Cartagena", 11, 11, HolidayType.CIVIC),
)


def build(year: int) -> List[HolidayRecord]:
    """
    Build the list of Colombian holidays for a year.
    
    Order is stable: civil-date fixed holidays, Holy Week, then the
    holidays eligible for the Monday rule.
    
    Args:
        year: The calendar year (1583 onwards).
        
    Returns:
        List of HolidayRecord, one per holiday.
    """
    offsets = derive_easter_offsets(year)
    
    holidays = [
        HolidayRecord(name, date(year, month, day), True, holiday_type)
        for name, month, day, holiday_type in FIXED_DATE_HOLIDAYS
    ]
    
    # Holy Week is Easter-dependent but never moves
    holidays.append(
        HolidayRecord("Jueves Santo", offsets.holy_thursday, True, HolidayType.CATHOLIC)
    )
    holidays.append(
        HolidayRecord("Viernes Santo", offsets.good_friday, True, HolidayType.CATHOLIC)
    )
    
    movable = {
        name: HolidayRecord(name, date(year, month, day), False, holiday_type)
        for name, month, day, holiday_type in MOVABLE_DATE_HOLIDAYS
    }
    
    holidays.extend([
        movable["Epifanía"],
        movable["San José"],
        HolidayRecord("Ascensión de Jesús", offsets.ascension, False, HolidayType.CATHOLIC),
        HolidayRecord("Corpus Christi", offsets.corpus_christi, False, HolidayType.CATHOLIC),
        HolidayRecord("Sagrado Corazón", offsets.sacred_heart, False, HolidayType.CATHOLIC),
        movable["San Pedro y San Pablo"],
        movable["Asunción de la Virgen"],
        movable["Día de la Raza"],
        movable["Día de Todos los Santos"],
        movable["Independencia de Cartagena"],
    ])
    
    return holidays


get_holidays = build

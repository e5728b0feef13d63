"""
Tests for the Holiday Catalog.

Tests the Colombian holiday table before Ley Emiliani.
"""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from colombian_holidays.core.catalog import HolidayType, build, get_holidays


def _by_name(year):
    return {record.name: record for record in build(year)}


class TestBuild:
    """Tests for build function."""
    
    def test_returns_eighteen_unique_holidays(self):
        """Every year has the same 18 holidays with unique names."""
        for year in range(1990, 2060):
            records = build(year)
            assert len(records) == 18
            assert len({r.name for r in records}) == 18
    
    def test_fixed_and_movable_split(self):
        """Eight holidays are exempt from shifting, ten are movable."""
        records = build(2024)
        
        assert sum(1 for r in records if r.fixed) == 8
        assert sum(1 for r in records if not r.fixed) == 10
    
    def test_fixed_holidays(self):
        """Should include the civil-date fixed holidays."""
        holidays = _by_name(2024)
        
        assert holidays["Año Nuevo"].date == date(2024, 1, 1)
        assert holidays["Día del Trabajo"].date == date(2024, 5, 1)
        assert holidays["Día de la Independencia"].date == date(2024, 7, 20)
        assert holidays["Batalla de Boyacá"].date == date(2024, 8, 7)
        assert holidays["Inmaculada Concepción"].date == date(2024, 12, 8)
        assert holidays["Navidad"].date == date(2024, 12, 25)
    
    def test_holy_week_is_easter_dependent_but_fixed(self):
        """Holy Thursday and Good Friday follow Easter and never move."""
        holidays = _by_name(2024)
        
        assert holidays["Jueves Santo"].date == date(2024, 3, 28)
        assert holidays["Jueves Santo"].fixed is True
        assert holidays["Viernes Santo"].date == date(2024, 3, 29)
        assert holidays["Viernes Santo"].fixed is True
    
    def test_movable_holidays_before_shifting(self):
        """Movable holidays keep their nominal dates in the catalog."""
        holidays = _by_name(2024)
        
        assert holidays["Epifanía"].date == date(2024, 1, 6)
        assert holidays["San José"].date == date(2024, 3, 19)
        assert holidays["Ascensión de Jesús"].date == date(2024, 5, 9)
        assert holidays["Corpus Christi"].date == date(2024, 5, 30)
        assert holidays["Sagrado Corazón"].date == date(2024, 6, 7)
        assert holidays["San Pedro y San Pablo"].date == date(2024, 6, 29)
        assert holidays["Asunción de la Virgen"].date == date(2024, 8, 15)
        assert holidays["Día de la Raza"].date == date(2024, 10, 12)
        assert holidays["Día de Todos los Santos"].date == date(2024, 11, 1)
        assert holidays["Independencia de Cartagena"].date == date(2024, 11, 11)
        assert not any(
            holidays[name].fixed
            for name in ("Epifanía", "Corpus Christi", "Día de la Raza")
        )
    
    def test_holiday_types(self):
        """Types follow the civic / Catholic / Christian classification."""
        holidays = _by_name(2024)
        
        assert holidays["Batalla de Boyacá"].type == HolidayType.CIVIC
        assert holidays["Inmaculada Concepción"].type == HolidayType.CATHOLIC
        assert holidays["Navidad"].type == HolidayType.CHRISTIAN
        assert holidays["Día de la Raza"].type == HolidayType.CIVIC
        assert holidays["Independencia de Cartagena"].type == HolidayType.CIVIC
        assert holidays["Sagrado Corazón"].type == HolidayType.CATHOLIC
        assert HolidayType.CIVIC.value == "Feriado Cívico"
    
    def test_order_is_stable(self):
        """Order starts with New Year and ends with Cartagena."""
        names = [r.name for r in build(2030)]
        
        assert names[0] == "Año Nuevo"
        assert names[6:8] == ["Jueves Santo", "Viernes Santo"]
        assert names[-1] == "Independencia de Cartagena"
    
    def test_recomputing_is_idempotent(self):
        """Two builds of the same year are equal."""
        assert build(2027) == build(2027)
        assert get_holidays(2027) == build(2027)
    
    def test_records_are_immutable(self):
        """Assigning a field of a built record raises."""
        record = build(2024)[0]
        
        with pytest.raises(FrozenInstanceError):
            record.name = "Otro"
        with pytest.raises(FrozenInstanceError):
            record.date = date(2024, 1, 2)

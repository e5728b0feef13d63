"""
Test Configuration and Fixtures.

Provides shared fixtures for all tests.
"""

from datetime import date

import pytest
from flask import Flask
from flask.testing import FlaskClient

from colombian_holidays.app import create_app
from colombian_holidays.core import (
    CalendarExporter,
    ExportableEvent,
    HolidayRecord,
    HolidayType,
)


@pytest.fixture
def app() -> Flask:
    """Create test Flask application."""
    test_config = {
        "TESTING": True,
    }
    return create_app(test_config)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create test client."""
    return app.test_client()


@pytest.fixture
def exporter() -> CalendarExporter:
    """Exporter with the default identity."""
    return CalendarExporter(
        vendor="AlejandroGarcia",
        product="ColombianHolidayCalendar",
        calendar_label="Feriados Colombia",
        uid_domain="colombian-holidays.agarc.dev",
    )


@pytest.fixture
def san_jose_2025() -> HolidayRecord:
    """Movable holiday on Wednesday, March 19, 2025."""
    return HolidayRecord(
        name="San José",
        date=date(2025, 3, 19),
        fixed=False,
        type=HolidayType.CATHOLIC,
    )


@pytest.fixture
def christmas_2024() -> HolidayRecord:
    """Fixed holiday on Wednesday, December 25, 2024."""
    return HolidayRecord(
        name="Navidad",
        date=date(2024, 12, 25),
        fixed=True,
        type=HolidayType.CHRISTIAN,
    )


@pytest.fixture
def new_year_event() -> ExportableEvent:
    """Export event for New Year 2024."""
    return ExportableEvent(
        name="Año Nuevo",
        date=date(2024, 1, 1),
        type="Feriado Cívico",
    )

"""
Tests for iCalendar Export.

Tests the VCALENDAR document layout and event fields.
"""

from datetime import date, datetime, timedelta, timezone

from freezegun import freeze_time

from colombian_holidays.config.settings import ExportSettings
from colombian_holidays.core.ical import (
    CalendarExporter,
    ExportableEvent,
    escape_text,
    format_ical_date,
    format_ical_timestamp,
    format_short_spanish_date,
    sanitize_uid_part,
)


GENERATED_AT = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


class TestFormatting:
    """Tests for formatting helpers."""
    
    def test_format_ical_date(self):
        """Dates are zero padded YYYYMMDD."""
        assert format_ical_date(date(2024, 1, 1)) == "20240101"
        assert format_ical_date(date(2024, 3, 5)) == "20240305"
        assert format_ical_date(date(2023, 12, 31)) == "20231231"
    
    def test_format_short_spanish_date(self):
        """Short Spanish weekday and month with trailing dots."""
        assert format_short_spanish_date(date(2025, 3, 19)) == "mié., 19 mar."
        assert format_short_spanish_date(date(2024, 9, 1)) == "dom., 1 sept."
    
    def test_sanitize_uid_part_strips_non_alphanumerics(self):
        """Accents, spaces and punctuation are removed, not escaped."""
        assert sanitize_uid_part("Año Nuevo") == "AoNuevo"
        assert sanitize_uid_part("Día de la Raza!") == "DadelaRaza"
    
    def test_format_ical_timestamp_converts_aware_datetimes(self):
        """Aware datetimes are converted to UTC before stamping."""
        bogota = timezone(timedelta(hours=-5))
        
        assert format_ical_timestamp(datetime(2024, 1, 15, 5, 30, tzinfo=bogota)) == "20240115T103000Z"
        assert format_ical_timestamp(GENERATED_AT) == "20240115T103000Z"
    
    def test_format_ical_timestamp_treats_naive_as_utc(self):
        """Naive datetimes are stamped as given, without a local time shift."""
        assert format_ical_timestamp(datetime(2024, 1, 15, 10, 30)) == "20240115T103000Z"
    
    def test_escape_text(self):
        """Newlines become literal backslash-n."""
        assert escape_text("a\nb\r\nc") == "a\\nb\\nc"


class TestCalendarExporter:
    """Tests for CalendarExporter."""
    
    def test_single_event_document(self, exporter, new_year_event):
        """Should contain the calendar header and one complete event."""
        document = exporter.export(2024, [new_year_event], generated_at=GENERATED_AT)
        
        assert document.startswith("BEGIN:VCALENDAR\r\n")
        assert document.endswith("END:VCALENDAR\r\n")
        assert "VERSION:2.0\r\n" in document
        assert "PRODID:-//AlejandroGarcia//ColombianHolidayCalendar//NONSGML v1.0//ES\r\n" in document
        assert "CALSCALE:GREGORIAN\r\n" in document
        assert "X-WR-CALNAME:Feriados Colombia 2024\r\n" in document
        assert "UID:20240101-AoNuevo@colombian-holidays.agarc.dev\r\n" in document
        assert "DTSTAMP:20240115T103000Z\r\n" in document
        assert "DTSTART;VALUE=DATE:20240101\r\n" in document
        assert "DTEND;VALUE=DATE:20240102\r\n" in document
        assert "SUMMARY:Año Nuevo\r\n" in document
        assert "DESCRIPTION:Feriado Cívico\r\n" in document
        assert document.count("BEGIN:VEVENT") == 1
        assert document.count("END:VEVENT") == 1
    
    def test_every_line_is_crlf_terminated(self, exporter, new_year_event):
        """No bare line feeds."""
        document = exporter.export(2024, [new_year_event], generated_at=GENERATED_AT)
        
        assert "\n" not in document.replace("\r\n", "")
    
    def test_moved_event_description(self, exporter):
        """Moved events mention their original date and Ley Emiliani."""
        event = ExportableEvent(
            name="San José",
            date=date(2025, 3, 24),
            type="Religioso (Católico)",
            original_date=date(2025, 3, 19),
            moved=True,
        )
        
        document = exporter.export(2025, [event], generated_at=GENERATED_AT)
        
        assert (
            "DESCRIPTION:Religioso (Católico) (Originalmente: mié., 19 mar.)."
            " Movido por Ley Emiliani.\r\n"
        ) in document
        assert "DTSTART;VALUE=DATE:20250324\r\n" in document
        assert "DTEND;VALUE=DATE:20250325\r\n" in document
    
    def test_end_date_rolls_over_year(self, exporter):
        """An event on December 31 ends on January 1 of the next year."""
        event = ExportableEvent(name="Fin", date=date(2024, 12, 31), type="x")
        
        document = exporter.export(2024, [event], generated_at=GENERATED_AT)
        
        assert "DTEND;VALUE=DATE:20250101\r\n" in document
    
    def test_multiple_events(self, exporter, new_year_event):
        """One VEVENT block per event, in order."""
        labour_day = ExportableEvent(
            name="Día del Trabajo",
            date=date(2024, 5, 1),
            type="Conmemoración",
        )
        
        document = exporter.export(
            2024,
            [new_year_event, labour_day],
            generated_at=GENERATED_AT,
        )
        
        assert document.count("BEGIN:VEVENT") == 2
        assert document.count("END:VEVENT") == 2
        assert document.index("SUMMARY:Año Nuevo") < document.index("SUMMARY:Día del Trabajo")
    
    def test_description_newlines_are_escaped(self, exporter):
        """Multi-line types stay on one DESCRIPTION line."""
        event = ExportableEvent(name="X", date=date(2024, 2, 2), type="uno\ndos")
        
        document = exporter.export(2024, [event], generated_at=GENERATED_AT)
        
        assert "DESCRIPTION:uno\\ndos\r\n" in document
    
    def test_empty_event_list(self, exporter):
        """A calendar without events is still well formed."""
        document = exporter.export(2024, [], generated_at=GENERATED_AT)
        
        assert "BEGIN:VEVENT" not in document
        assert document.endswith("CALSCALE:GREGORIAN\r\nX-WR-CALNAME:Feriados Colombia 2024\r\nEND:VCALENDAR\r\n")
    
    @freeze_time("2024-06-01 08:05:09")
    def test_dtstamp_defaults_to_now(self, exporter, new_year_event):
        """Without generated_at the current UTC time is used."""
        document = exporter.export(2024, [new_year_event])
        
        assert "DTSTAMP:20240601T080509Z\r\n" in document
    
    def test_from_settings(self, new_year_event):
        """Identity fields come from ExportSettings."""
        exporter = CalendarExporter.from_settings(ExportSettings(
            vendor="Acme",
            product="Festivos",
            calendar_label="Festivos",
            uid_domain="example.org",
        ))
        
        document = exporter.export(2024, [new_year_event], generated_at=GENERATED_AT)
        
        assert "PRODID:-//Acme//Festivos//NONSGML v1.0//ES\r\n" in document
        assert "X-WR-CALNAME:Festivos 2024\r\n" in document
        assert "UID:20240101-AoNuevo@example.org\r\n" in document
    
    def test_prodid_is_written_to_the_document(self, exporter, new_year_event):
        """The PRODID line uses the exporter's prodid value."""
        document = exporter.export(2024, [new_year_event], generated_at=GENERATED_AT)
        
        assert exporter.prodid == "-//AlejandroGarcia//ColombianHolidayCalendar//NONSGML v1.0//ES"
        assert f"PRODID:{exporter.prodid}\r\n" in document

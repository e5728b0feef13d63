"""
iCalendar export.

Serializes dated events (holidays, Carnival days) into an RFC 5545
style VCALENDAR document of all-day events.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional


CRLF = "\r\n"

# Abbreviations as printed by es-ES short date formatting
WEEKDAY_ABBREVIATIONS = ("lun.", "mar.", "mié.", "jue.", "vie.", "sáb.", "dom.")
MONTH_ABBREVIATIONS = (
    "ene.", "feb.", "mar.", "abr.", "may.", "jun.",
    "jul.", "ago.", "sept.", "oct.", "nov.", "dic.",
)

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def now_utc() -> datetime:
    """Get the current UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ExportableEvent:
    """
    An all-day event ready for export.
    
    Attributes:
        name: Event summary.
        date: Day of the event.
        type: Description text, e.g. "Feriado Cívico".
        original_date: Date before Ley Emiliani, when it was moved.
        moved: Whether the event was moved to a Monday.
    """
    name: str
    date: date
    type: str
    original_date: Optional[date] = None
    moved: bool = False


def format_ical_date(day: date) -> str:
    """Format a date as YYYYMMDD."""
    return f"{day.year:04d}{day.month:02d}{day.day:02d}"


def format_ical_timestamp(moment: datetime) -> str:
    """
    Format a datetime as a UTC YYYYMMDDTHHMMSSZ stamp.
    
    Aware datetimes are converted to UTC. Naive datetimes are taken to be
    UTC already, as `datetime.utcnow` returns them.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y%m%dT%H%M%SZ")


def format_short_spanish_date(day: date) -> str:
    """Format a date like "mié., 19 mar."."""
    weekday = WEEKDAY_ABBREVIATIONS[day.weekday()]
    month = MONTH_ABBREVIATIONS[day.month - 1]
    return f"{weekday}, {day.day} {month}"


def sanitize_uid_part(name: str) -> str:
    """Strip every character outside [A-Za-z0-9]."""
    return _NON_ALPHANUMERIC.sub("", name)


def escape_text(value: str) -> str:
    """Escape line breaks as literal \\n sequences."""
    return value.replace("\r\n", "\\n").replace("\n", "\\n").replace("\r", "\\n")


class CalendarExporter:
    """
    Builds iCalendar documents.
    
    Stateless apart from its identity settings; safe to share between
    threads.
    """
    
    def __init__(
        self,
        vendor: str,
        product: str,
        calendar_label: str,
        uid_domain: str,
    ) -> None:
        self._vendor = vendor
        self._product = product
        self._calendar_label = calendar_label
        self._uid_domain = uid_domain
    
    @classmethod
    def from_settings(cls, export_settings) -> "CalendarExporter":
        """Create an exporter from an ExportSettings instance."""
        return cls(
            vendor=export_settings.vendor,
            product=export_settings.product,
            calendar_label=export_settings.calendar_label,
            uid_domain=export_settings.uid_domain,
        )
    
    @property
    def prodid(self) -> str:
        """PRODID value identifying the calendar producer."""
        return f"-//{self._vendor}//{self._product}//NONSGML v1.0//ES"
    
    def describe(self, event: ExportableEvent) -> str:
        """Build the DESCRIPTION text of an event."""
        description = event.type
        if event.moved and event.original_date is not None:
            description += (
                f" (Originalmente: {format_short_spanish_date(event.original_date)})."
                " Movido por Ley Emiliani."
            )
        return escape_text(description)
    
    def event_lines(self, event: ExportableEvent, stamp: str) -> List[str]:
        """Build the VEVENT block of a single event."""
        start = format_ical_date(event.date)
        end = format_ical_date(event.date + timedelta(days=1))
        uid = f"{start}-{sanitize_uid_part(event.name)}@{self._uid_domain}"
        
        return [
            "BEGIN:VEVENT",
            f"UID:{uid}",
            f"DTSTAMP:{stamp}",
            f"DTSTART;VALUE=DATE:{start}",
            f"DTEND;VALUE=DATE:{end}",
            f"SUMMARY:{event.name}",
            f"DESCRIPTION:{self.describe(event)}",
            "END:VEVENT",
        ]
    
    def export(
        self,
        year: int,
        events: Iterable[ExportableEvent],
        generated_at: Optional[datetime] = None,
    ) -> str:
        """
        Serialize events into a calendar document.
        
        Args:
            year: Year shown in the calendar name.
            events: Events to include, in output order.
            generated_at: DTSTAMP value; defaults to the current UTC time.
            
        Returns:
            The document text with CRLF-terminated lines.
        """
        stamp = format_ical_timestamp(generated_at or now_utc())
        
        lines = [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            f"PRODID:{self.prodid}",
            "CALSCALE:GREGORIAN",
            f"X-WR-CALNAME:{self._calendar_label} {year}",
        ]
        for event in events:
            lines.extend(self.event_lines(event, stamp))
        lines.append("END:VCALENDAR")
        
        return CRLF.join(lines) + CRLF

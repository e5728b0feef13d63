"""
Flask API Routes.

Defines all HTTP endpoints for the holiday calendar service.
"""

from datetime import date
from typing import Any, Dict, Tuple, Type

from flask import Blueprint, Response, request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from colombian_holidays import __version__
from colombian_holidays.api.validation import CalendarViewRequest, YearRequest
from colombian_holidays.core import HolidayRecord, ShiftedHolidayRecord
from colombian_holidays.core.exceptions import ValidationError
from colombian_holidays.infrastructure.logging import get_logger
from colombian_holidays.infrastructure.metrics import get_metrics, metrics_endpoint
from colombian_holidays.services import HolidayCalendarService
from colombian_holidays.views import (
    DAY_NAMES_LONG,
    DAY_NAMES_SHORT,
    ViewMode,
    ViewState,
    initial_state,
    parse_view_mode,
    year_selector_range,
)


logger = get_logger(__name__)


api_bp = Blueprint("api", __name__)


def _error_response(
    message: str,
    status_code: int,
    error_type: str = "error",
) -> Tuple[Dict[str, Any], int]:
    """Create standardized error response."""
    return {
        "success": False,
        "error": message,
        "error_type": error_type,
    }, status_code


def _success_response(
    data: Dict[str, Any],
    status_code: int = 200,
) -> Tuple[Dict[str, Any], int]:
    """Create standardized success response."""
    return {
        "success": True,
        **data,
    }, status_code


def _validate(model: Type[BaseModel], **values: Any) -> BaseModel:
    """
    Validate request parameters with a Pydantic model.
    
    Raises:
        ValidationError: With the first failing field.
    """
    try:
        return model(**values)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "request"
        raise ValidationError(field, first["msg"]) from None


@api_bp.errorhandler(ValidationError)
def handle_validation_error(e: ValidationError) -> Tuple[Dict[str, Any], int]:
    logger.warning(
        str(e),
        extra={"extra_fields": {"field": e.field, "error_type": "validation_error"}}
    )
    return _error_response(str(e), 400, "validation_error")


@api_bp.errorhandler(Exception)
def handle_unexpected_error(e: Exception) -> Tuple[Dict[str, Any], int]:
    logger.exception(
        f"Unexpected error: {e}",
        extra={"extra_fields": {"error_type": type(e).__name__}}
    )
    return _error_response("An unexpected error occurred", 500, "internal_error")


def _serialize_record(record: HolidayRecord) -> Dict[str, Any]:
    return {
        "name": record.name,
        "date": record.date.isoformat(),
        "fixed": record.fixed,
        "type": record.type.value,
    }


def _serialize_shifted(record: ShiftedHolidayRecord) -> Dict[str, Any]:
    return {
        "name": record.name,
        "date": record.date.isoformat(),
        "original_date": record.original_date.isoformat(),
        "moved": record.moved,
        "fixed": record.fixed,
        "type": record.type.value,
    }


# ============================================================================
# Health Check
# ============================================================================

@api_bp.route("/health", methods=["GET"])
def health_check() -> Tuple[Dict[str, Any], int]:
    """
    Health check endpoint for startup and liveness probes.
    
    Returns:
        Health status response.
    """
    return _success_response({
        "status": "healthy",
        "service": "colombian-holidays",
        "version": __version__,
    })


@api_bp.route("/", methods=["GET"])
def root() -> Tuple[Dict[str, Any], int]:
    """
    Root endpoint - same payload as /health.
    """
    return health_check()


@api_bp.route("/metrics", methods=["GET"])
def metrics() -> Response:
    """
    Prometheus metrics endpoint.
    """
    return metrics_endpoint()


# ============================================================================
# Holiday Endpoints
# ============================================================================

@api_bp.route("/holidays/<int:year>", methods=["GET"])
def holidays(year: int) -> Tuple[Dict[str, Any], int]:
    """
    Holidays of a year after Ley Emiliani.
    
    Path Parameters:
        year (int): Calendar year.
        
    Returns:
        Shifted holidays in catalog order.
    """
    validated = _validate(YearRequest, year=year)
    
    overview = HolidayCalendarService().year_overview(validated.year)
    get_metrics().holiday_lookups_total.inc(kind="shifted")
    
    return _success_response({
        "year": overview.year,
        "count": len(overview.holidays),
        "holidays": [_serialize_shifted(h) for h in overview.holidays],
    })


@api_bp.route("/holidays/<int:year>/raw", methods=["GET"])
def raw_holidays(year: int) -> Tuple[Dict[str, Any], int]:
    """
    Holidays of a year before Ley Emiliani.
    """
    validated = _validate(YearRequest, year=year)
    
    records = HolidayCalendarService().catalog(validated.year)
    get_metrics().holiday_lookups_total.inc(kind="raw")
    
    return _success_response({
        "year": validated.year,
        "count": len(records),
        "holidays": [_serialize_record(r) for r in records],
    })


@api_bp.route("/carnival/<int:year>", methods=["GET"])
def carnival(year: int) -> Tuple[Dict[str, Any], int]:
    """
    Carnival window and Easter-dependent dates of a year.
    """
    validated = _validate(YearRequest, year=year)
    
    overview = HolidayCalendarService().year_overview(validated.year)
    get_metrics().holiday_lookups_total.inc(kind="carnival")
    easter = overview.easter
    
    return _success_response({
        "year": overview.year,
        "ash_wednesday": overview.carnival.ash_wednesday.isoformat(),
        "carnival_days": [d.isoformat() for d in overview.carnival.carnival_days],
        "easter": {
            "easter": easter.easter.isoformat(),
            "holy_thursday": easter.holy_thursday.isoformat(),
            "good_friday": easter.good_friday.isoformat(),
            "ash_wednesday": easter.ash_wednesday.isoformat(),
            "ascension": easter.ascension.isoformat(),
            "corpus_christi": easter.corpus_christi.isoformat(),
            "sacred_heart": easter.sacred_heart.isoformat(),
        },
    })


# ============================================================================
# Calendar Endpoints
# ============================================================================

@api_bp.route("/calendar/<int:year>", methods=["GET"])
def calendar_view(year: int) -> Tuple[Dict[str, Any], int]:
    """
    Rendered calendar view model.
    
    Query Parameters:
        view (str): "annual" (default) or "monthly".
        month (int): Month of the monthly view, defaults to the current one.
        
    Returns:
        Month grids with styled day cells and the years offered by the
        year selector.
    """
    view = parse_view_mode(request.args.get("view", ViewMode.ANNUAL.value))
    params = {"month": request.args["month"]} if "month" in request.args else {}
    validated = _validate(CalendarViewRequest, year=year, view=view, **params)
    
    today = date.today()
    state = ViewState(
        year=validated.year,
        month=validated.month or initial_state(today).month,
        view_mode=validated.view,
    )
    rendered = HolidayCalendarService().render(state, today=today)
    get_metrics().holiday_lookups_total.inc(kind="view")
    
    day_names = DAY_NAMES_SHORT if state.view_mode == ViewMode.ANNUAL else DAY_NAMES_LONG
    
    return _success_response({
        "year": state.year,
        "month": state.month,
        "view": state.view_mode.value,
        "day_names": list(day_names),
        "years": year_selector_range(today.year),
        "months": [
            {
                "month": month.month,
                "name": month.name,
                "leading_blanks": month.leading_blanks,
                "days": [
                    {
                        "day": cell.day,
                        "date": cell.date.isoformat(),
                        "classes": list(cell.classes),
                        "title": cell.title,
                    }
                    for cell in month.cells
                ],
            }
            for month in rendered.months
        ],
    })


@api_bp.route("/calendar/<int:year>.ics", methods=["GET"])
def calendar_export(year: int) -> Response:
    """
    iCalendar download of holidays, Carnival days and Ash Wednesday.
    """
    validated = _validate(YearRequest, year=year)
    
    document = HolidayCalendarService().export_ical(validated.year)
    get_metrics().ical_exports_total.inc()
    
    response = Response(document, mimetype="text/calendar")
    response.headers["Content-Disposition"] = (
        f'attachment; filename="feriados-colombia-{validated.year}.ics"'
    )
    return response

"""calsys public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    SUPPORTED_CALENDAR_TYPES,
    get_calendar_system,
    supported_calendar_types,
    is_supported,
    list_systems,
    make_system,
    register_system,
    to_gregorian,
    from_gregorian,
    format_date,
    months_in_year,
    days_in_month,
    year_range,
)
from .core.engine import CalendarSystem
from .core.errors import (
    CalsysError,
    InvalidDateError,
    OccurrenceNotFoundError,
    UnsupportedYearError,
)
from .core.types import CalendarDate, GregorianDate, MonthOption
from .recurrence import next_occurrence
from .records import StoredDate, display_date

__all__ = [
    "SUPPORTED_CALENDAR_TYPES",
    "get_calendar_system",
    "supported_calendar_types",
    "is_supported",
    "list_systems",
    "make_system",
    "register_system",
    "to_gregorian",
    "from_gregorian",
    "format_date",
    "months_in_year",
    "days_in_month",
    "year_range",
    "next_occurrence",
    "display_date",
    "StoredDate",
    "CalendarSystem",
    "CalendarDate",
    "GregorianDate",
    "MonthOption",
    "CalsysError",
    "InvalidDateError",
    "OccurrenceNotFoundError",
    "UnsupportedYearError",
]

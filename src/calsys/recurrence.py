"""
Yearly recurrence of dates kept in their native calendar.

A lunar birthday moves around the Gregorian year, so the next reminder is
found by re-anchoring the native (month, day) in the current and following
native years and taking the first Gregorian date after the reference day.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from .api import get_calendar_system
from .core.engine import CalendarSystem
from .core.errors import OccurrenceNotFoundError, UnsupportedYearError
from .core.types import CalendarDate, GregorianDate

logger = logging.getLogger(__name__)


def resolve_in_year(system: CalendarSystem, original: CalendarDate, year: int) -> Optional[CalendarDate]:
    """
    Place original's month and day in the given native year.

    A leap month falls back to its regular month when the year has no such
    leap month; a day past the end of the month is moved to its last day.
    Returns None when the month cannot be placed at all.
    """
    values = [opt.value for opt in system.get_months(year)]
    if original.month in values:
        month = original.month
    elif original.abs_month in values:
        month = original.abs_month
    else:
        return None
    day = min(original.day, system.get_days_in_month(year, month))
    return CalendarDate(day=day, month=month, year=year)


def next_occurrence(calendar_type: Optional[str], original: CalendarDate, after: date) -> GregorianDate:
    """First Gregorian date strictly after `after` on which original recurs."""
    if isinstance(after, datetime):
        after = after.date()
    system = get_calendar_system(calendar_type)

    try:
        native_year = system.from_gregorian(CalendarDate.from_date(after)).year
    except UnsupportedYearError:
        native_year = after.year

    for year in (native_year, native_year + 1):
        try:
            native = resolve_in_year(system, original, year)
            if native is None:
                logger.debug("%s month %d has no place in %d", system.type, original.month, year)
                continue
            candidate = system.to_gregorian(native)
        except UnsupportedYearError as e:
            logger.debug("Skipping %s year %d: %s", system.type, year, e)
            continue
        if candidate.to_date() > after:
            return candidate

    raise OccurrenceNotFoundError(
        f"Cannot find next occurrence of {system.type} date "
        f"{original.month}/{original.day} after {after.isoformat()}"
    )

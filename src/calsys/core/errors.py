class CalsysError(Exception):
    """Base error."""

class UnsupportedYearError(CalsysError, ValueError):
    """Raised when a date falls outside the years a calendar system covers."""

class InvalidDateError(CalsysError, ValueError):
    """Raised when a month or day does not exist in the given year."""

class OccurrenceNotFoundError(CalsysError):
    """Raised when a yearly date has no occurrence within the supported range."""

class CalnepError(Exception):
    """Base error."""

class OutOfRangeError(CalnepError):
    """Raised when a year has no entry in the month-length table."""

class TableError(CalnepError):
    """Raised when a month-length table is malformed."""

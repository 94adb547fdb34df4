"""Calendar arithmetic on timezone-free YYYY-MM-DD day strings.

Day strings are fixed width and zero padded, so lexicographic order equals
chronological order and plain string comparison is used throughout.
"""

import calendar
import re
from datetime import date

from seasons.domain.errors import InvalidDateError

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def _check_month(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"{year:04d}-{month:02d}")


def days_in_month(year: int, month: int) -> int:
    _check_month(year, month)
    return calendar.monthrange(year, month)[1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def first_weekday_of_month(year: int, month: int) -> int:
    """Weekday of the 1st of the month, Monday = 0 through Sunday = 6."""
    _check_month(year, month)
    return calendar.weekday(year, month, 1)


def format_date(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_date(value: str) -> tuple[int, int, int]:
    """Split a day string into (year, month, day).

    Raises:
        InvalidDateError: If the string is not YYYY-MM-DD or names a
            day that does not exist.
    """
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        raise InvalidDateError(str(value))
    year, month, day = (int(part) for part in value.split("-"))
    try:
        date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(value) from exc
    return year, month, day


def next_day(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Return the calendar day after the given one, rolling month and year."""
    if day < days_in_month(year, month):
        return year, month, day + 1
    if month < 12:
        return year, month + 1, 1
    return year + 1, 1, 1


def next_date_string(value: str) -> str:
    return format_date(*next_day(*parse_date(value)))


def shift_date_by_years(value: str, delta: int) -> str:
    """Move a day string by ``delta`` years.

    February 29 lands on February 28 when the target year is not a leap
    year. Every other month has a fixed length, so no other clamping occurs.
    """
    year, month, day = parse_date(value)
    target = year + delta
    if not 1 <= target <= 9999:
        raise InvalidDateError(value)
    return format_date(target, month, min(day, days_in_month(target, month)))

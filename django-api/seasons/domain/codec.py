"""Conversion between sparse range lists and dense day sets.

``collapse`` is the canonicalizer: whatever it returns is sorted and no two
ranges overlap or touch.
"""

from typing import Iterable

from seasons.domain.dates import format_date, next_date_string, next_day, parse_date
from seasons.domain.errors import InvalidRangeError
from seasons.domain.value_objects import DateRange

# Roughly ten years of days.
MAX_RANGE_DAYS = 3660


def expand(ranges: Iterable[DateRange]) -> set[str]:
    """Return every day covered by ``ranges``, bounds included.

    Raises:
        InvalidRangeError: If a range spans more than MAX_RANGE_DAYS days.
    """
    days: set[str] = set()
    for date_range in ranges:
        current = parse_date(date_range.start)
        day = date_range.start
        for _ in range(MAX_RANGE_DAYS):
            days.add(day)
            if day == date_range.end:
                break
            current = next_day(*current)
            day = format_date(*current)
        else:
            raise InvalidRangeError(
                date_range.start,
                date_range.end,
                f"range exceeds {MAX_RANGE_DAYS} days",
            )
    return days


def collapse(days: Iterable[str]) -> list[DateRange]:
    """Merge a set of days into the minimal sorted list of ranges."""
    ordered = sorted(set(days))
    if not ordered:
        return []

    ranges: list[DateRange] = []
    start = previous = ordered[0]
    for day in ordered[1:]:
        if day != next_date_string(previous):
            ranges.append(DateRange(start=start, end=previous))
            start = day
        previous = day
    ranges.append(DateRange(start=start, end=previous))
    return ranges


def canonicalize(ranges: Iterable[DateRange]) -> list[DateRange]:
    return collapse(expand(ranges))


def is_canonical(ranges: Iterable[DateRange]) -> bool:
    ranges = list(ranges)
    return ranges == canonicalize(ranges)

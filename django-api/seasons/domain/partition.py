"""Season partition engine.

Keeps every day of a year assigned to at most one season. Painting a range
onto a season evicts those days from every other season of the same year.
Collections loaded with overlaps are left as they are; ``find_overlaps``
reports them without repairing anything.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Mapping

from seasons.domain.codec import collapse, expand
from seasons.domain.dates import parse_date
from seasons.domain.errors import InvalidRangeError, SeasonNotFoundError
from seasons.domain.models import Season, SeasonCollection
from seasons.domain.value_objects import DateRange


@dataclass(frozen=True)
class Overlap:
    """Days claimed by two seasons at once."""

    first_season_id: str
    second_season_id: str
    days: tuple[str, ...]


def ensure_within_season_year(season: Season, from_day: str, to_day: str) -> None:
    """Reject bounds that fall outside the year the season belongs to.

    Raises:
        InvalidDateError: If a bound is malformed.
        InvalidRangeError: If a bound lies in another year.
    """
    for day in (from_day, to_day):
        year, _, _ = parse_date(day)
        if year != season.year:
            raise InvalidRangeError(from_day, to_day, f"outside season year {season.year}")


def paint_range(
    seasons: Mapping[str, Season],
    target_season_id: str,
    from_day: str,
    to_day: str,
) -> SeasonCollection:
    """Assign ``from_day..to_day`` to the target season.

    The caller orders the bounds. Seasons whose days do not change are
    returned as the very same objects.

    Raises:
        SeasonNotFoundError: If the target is not in the collection.
        InvalidRangeError: If the bounds are reversed, malformed or outside
            the target season's year.
    """
    if target_season_id not in seasons:
        raise SeasonNotFoundError(target_season_id)

    target = seasons[target_season_id]
    span = DateRange(start=from_day, end=to_day)
    ensure_within_season_year(target, from_day, to_day)
    painted = expand([span])

    result: SeasonCollection = {}
    for season_id, season in seasons.items():
        if season_id == target_season_id:
            result[season_id] = season.with_ranges(
                collapse(expand(season.date_ranges) | painted)
            )
            continue
        if season.year != target.year:
            result[season_id] = season
            continue
        days = expand(season.date_ranges)
        if days.isdisjoint(painted):
            result[season_id] = season
        else:
            result[season_id] = season.with_ranges(collapse(days - painted))
    return result


def remove_day(season: Season, day: str) -> Season:
    """Unassign a single day from ``season``.

    Raises:
        InvalidDateError: If ``day`` is malformed.
        InvalidRangeError: If ``day`` lies outside the season's year.
    """
    ensure_within_season_year(season, day, day)
    days = expand(season.date_ranges)
    if day not in days:
        return season
    days.discard(day)
    return season.with_ranges(collapse(days))


def find_overlaps(seasons: Mapping[str, Season]) -> list[Overlap]:
    """Report every pair of same-year seasons that share days."""
    expanded = {season_id: expand(season.date_ranges) for season_id, season in seasons.items()}
    overlaps = []
    for first_id, second_id in combinations(sorted(seasons), 2):
        if seasons[first_id].year != seasons[second_id].year:
            continue
        shared = expanded[first_id] & expanded[second_id]
        if shared:
            overlaps.append(Overlap(first_id, second_id, tuple(sorted(shared))))
    return overlaps


def changed_seasons(
    before: Mapping[str, Season], after: Mapping[str, Season]
) -> list[str]:
    """Ids present in ``after`` whose season differs from ``before``."""
    return [
        season_id
        for season_id, season in after.items()
        if before.get(season_id) != season
    ]

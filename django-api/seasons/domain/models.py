"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in seasons/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from typing import Iterable, Self

from seasons.domain.value_objects import DateRange

COLOR_PALETTE = (
    "#EF4444", "#F97316", "#F59E0B", "#EAB308",
    "#22C55E", "#14B8A6", "#3B82F6", "#6366F1",
    "#8B5CF6", "#EC4899", "#78716C", "#0EA5E9",
)


@dataclass(frozen=True)
class Season:
    """Domain representation of a Season.

    ``date_ranges`` is kept in canonical form by the partition engine:
    sorted, with at least one free day between consecutive ranges.
    """

    id: str
    year: int
    name: str
    color: str
    date_ranges: tuple[DateRange, ...] = ()

    def with_ranges(self, ranges: Iterable[DateRange]) -> Self:
        return replace(self, date_ranges=tuple(ranges))

    def renamed(self, name: str | None = None, color: str | None = None) -> Self:
        return replace(
            self,
            name=self.name if name is None else name,
            color=self.color if color is None else color,
        )


# Keyed by season id, scoped to one (host, year).
SeasonCollection = dict[str, Season]


def next_unused_color(seasons: dict[str, Season]) -> str:
    """First palette colour no season uses yet, else the first palette entry."""
    used = {season.color.upper() for season in seasons.values()}
    for color in COLOR_PALETTE:
        if color not in used:
            return color
    return COLOR_PALETTE[0]

"""Two-click range selection over a season calendar.

The first click on a day anchors a range, the second click paints the range
between the two days onto the selected season. A single click on a day
that already belongs to the selected season unassigns that day instead.

Every transition returns a new ``Selection``; the collection is only ever
changed by returning an updated copy.
"""

from dataclasses import dataclass, replace
from typing import Mapping, Self

from seasons.domain.codec import expand
from seasons.domain.models import Season, SeasonCollection
from seasons.domain.partition import ensure_within_season_year, paint_range, remove_day
from seasons.domain.value_objects import DateRange


@dataclass(frozen=True)
class Selection:
    selected_season_id: str | None = None
    anchor: str | None = None

    @property
    def is_idle(self) -> bool:
        return self.anchor is None

    def click(
        self, day: str, seasons: Mapping[str, Season]
    ) -> tuple[Self, SeasonCollection]:
        """Apply a click on ``day``; return the next state and collection.

        Raises:
            InvalidDateError: If ``day`` is malformed.
            InvalidRangeError: If ``day`` lies outside the selected season's year.
        """
        season_id = self.selected_season_id
        if season_id is None or season_id not in seasons:
            return self, dict(seasons)

        season = seasons[season_id]
        ensure_within_season_year(season, day, day)
        if self.anchor is None:
            if day in expand(season.date_ranges):
                return self, {**seasons, season_id: remove_day(season, day)}
            return replace(self, anchor=day), dict(seasons)

        from_day, to_day = min(self.anchor, day), max(self.anchor, day)
        painted = paint_range(seasons, season_id, from_day, to_day)
        return replace(self, anchor=None), painted

    def preview(self, hover_day: str) -> set[str]:
        """Days a second click on ``hover_day`` would paint."""
        if self.anchor is None or self.selected_season_id is None:
            return set()
        start, end = min(self.anchor, hover_day), max(self.anchor, hover_day)
        return expand([DateRange(start=start, end=end)])

    def escape(self) -> Self:
        return replace(self, anchor=None)

    def select_season(self, season_id: str | None) -> Self:
        return type(self)(selected_season_id=season_id)

    def change_year(self) -> Self:
        return replace(self, anchor=None)

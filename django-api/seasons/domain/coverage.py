"""Per-season day counts for one year."""

from dataclasses import dataclass
from typing import Mapping

from seasons.domain.codec import expand
from seasons.domain.dates import days_in_year
from seasons.domain.models import Season


@dataclass(frozen=True)
class CoverageReport:
    year: int
    total_days: int
    day_counts: dict[str, int]
    assigned_days: int
    unassigned_days: int
    integrity_warning: bool = False


def coverage_report(seasons: Mapping[str, Season], year: int) -> CoverageReport:
    """Count the days each season of ``year`` covers and the days left over.

    Seasons never overlap after painting, so counts are summed rather than
    unioned. Overlapping data loaded from elsewhere would push the remainder
    below zero; it is clamped and ``integrity_warning`` is set.
    """
    total = days_in_year(year)
    counts = {
        season_id: len(expand(season.date_ranges))
        for season_id, season in seasons.items()
        if season.year == year
    }
    assigned = sum(counts.values())
    remainder = total - assigned
    return CoverageReport(
        year=year,
        total_days=total,
        day_counts=counts,
        assigned_days=assigned,
        unassigned_days=max(0, remainder),
        integrity_warning=remainder < 0,
    )

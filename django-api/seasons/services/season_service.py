"""Season service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Run the calendar engine on a snapshot loaded from the store
- Persist only the seasons the engine changed
- Return domain models or raise domain errors
"""

import logging

from seasons.domain import Season, SeasonCollection, SeasonId, next_unused_color
from seasons.domain.coverage import CoverageReport, coverage_report
from seasons.domain.dates import parse_date
from seasons.domain.errors import SeasonAlreadyExistsError, SeasonNotFoundError
from seasons.domain.lookup import DEFAULT_MIN_STAY, Rates, rates_for_date, season_for_date
from seasons.domain.partition import Overlap, changed_seasons, find_overlaps, paint_range, remove_day
from seasons.domain.value_objects import validate_color, validate_year
from seasons.domain.year_copy import CopyPolicy, CopyResult, copy_year, merge_copied
from seasons.stores.interfaces import SeasonStore

logger = logging.getLogger(__name__)


class SeasonService:
    """Service for season calendar operations."""

    def __init__(self, store: SeasonStore) -> None:
        self._store = store

    def list_seasons(self, host_id: str, year: int | None = None) -> SeasonCollection:
        """Return the host's seasons, optionally for a single year."""
        if year is not None:
            validate_year(year)
        return self._store.list_seasons(host_id, year)

    def get_season(self, host_id: str, season_id: str) -> Season:
        """Return a season by ID.

        Raises:
            SeasonNotFoundError: If the season does not exist.
        """
        season = self._store.get_season(host_id, season_id)
        if season is None:
            raise SeasonNotFoundError(season_id)
        return season

    def create_season(
        self, host_id: str, year: int, name: str, color: str | None = None
    ) -> Season:
        """Create an empty season for ``year``.

        The id is derived from the name and never changes afterwards. When
        no color is given the first palette color unused in that year is
        picked.

        Raises:
            InvalidYearError, InvalidSeasonNameError, InvalidColorError
            SeasonAlreadyExistsError: If the derived id is taken.
        """
        season_id = str(SeasonId.from_name(year, name))
        if self._store.season_exists(host_id, season_id):
            raise SeasonAlreadyExistsError(season_id)
        if color is None:
            color = next_unused_color(self._store.list_seasons(host_id, year))
        season = Season(
            id=season_id,
            year=year,
            name=name.strip(),
            color=validate_color(color),
        )
        self._store.save_season(host_id, season)
        logger.info("Created season %s for host %s", season_id, host_id)
        return season

    def update_season(
        self,
        host_id: str,
        season_id: str,
        name: str | None = None,
        color: str | None = None,
    ) -> Season:
        """Rename or recolor a season. The id stays the same."""
        season = self.get_season(host_id, season_id)
        if name is not None:
            # Same rule as creation: the name must slugify to something.
            SeasonId.from_name(season.year, name)
            name = name.strip()
        if color is not None:
            validate_color(color)
        updated = season.renamed(name=name, color=color)
        if updated != season:
            self._store.save_season(host_id, updated)
        return updated

    def delete_season(self, host_id: str, season_id: str) -> None:
        """Delete a season. Other seasons are not affected."""
        if not self._store.season_exists(host_id, season_id):
            raise SeasonNotFoundError(season_id)
        self._store.delete_season(host_id, season_id)
        logger.info("Deleted season %s for host %s", season_id, host_id)

    def paint_range(
        self, host_id: str, season_id: str, from_day: str, to_day: str
    ) -> SeasonCollection:
        """Assign a range of days to a season, evicting them from the others.

        Returns the updated collection of the season's year.

        Raises:
            SeasonNotFoundError: If the season does not exist.
            InvalidRangeError: If the bounds are reversed or malformed,
                or outside the season's year.
        """
        season = self.get_season(host_id, season_id)
        before = self._store.list_seasons(host_id, season.year)
        after = paint_range(before, season_id, from_day, to_day)
        written = self._persist_changes(host_id, before, after)
        logger.info(
            "Painted %s..%s onto %s for host %s, %d season(s) written",
            from_day,
            to_day,
            season_id,
            host_id,
            len(written),
        )
        return after

    def remove_day(self, host_id: str, season_id: str, day: str) -> Season:
        """Unassign one day from a season."""
        season = self.get_season(host_id, season_id)
        updated = remove_day(season, day)
        if updated != season:
            self._store.save_season(host_id, updated)
        return updated

    def copy_year(
        self,
        host_id: str,
        from_year: int,
        to_year: int,
        policy: CopyPolicy = CopyPolicy.SKIP_EXISTING,
    ) -> CopyResult:
        """Copy every season of ``from_year`` into ``to_year``.

        By default seasons already present in the target year are kept and
        the copies with the same id are skipped. ``CopyPolicy.OVERWRITE``
        replaces them instead.
        """
        validate_year(from_year)
        validate_year(to_year)
        source = self._store.list_seasons(host_id, from_year)
        existing = self._store.list_seasons(host_id, to_year)
        result = merge_copied(existing, copy_year(source, from_year, to_year), policy)
        self._store.save_seasons(
            host_id, [result.seasons[season_id] for season_id in result.written]
        )
        logger.info(
            "Copied seasons %d -> %d for host %s: created=%d overwritten=%d skipped=%d",
            from_year,
            to_year,
            host_id,
            len(result.created),
            len(result.overwritten),
            len(result.skipped),
        )
        return result

    def coverage(self, host_id: str, year: int) -> CoverageReport:
        validate_year(year)
        report = coverage_report(self._store.list_seasons(host_id, year), year)
        if report.integrity_warning:
            logger.warning(
                "Seasons of host %s overlap in %d: %d days assigned out of %d",
                host_id,
                year,
                report.assigned_days,
                report.total_days,
            )
        return report

    def validate(self, host_id: str, year: int) -> list[Overlap]:
        """Report days claimed by more than one season. Nothing is repaired."""
        validate_year(year)
        overlaps = find_overlaps(self._store.list_seasons(host_id, year))
        for overlap in overlaps:
            logger.warning(
                "Seasons %s and %s of host %s share %d day(s)",
                overlap.first_season_id,
                overlap.second_season_id,
                host_id,
                len(overlap.days),
            )
        return overlaps

    def season_for_date(self, host_id: str, day: str) -> Season | None:
        year, _, _ = parse_date(day)
        return season_for_date(self._store.list_seasons(host_id, year), day)

    def rates_for_date(
        self,
        host_id: str,
        day: str,
        prices: dict,
        default_price: float,
        min_stays: dict | None = None,
        default_min_stay: int = DEFAULT_MIN_STAY,
    ) -> Rates:
        """Nightly price and minimum stay for ``day`` from per-season overrides.

        Overrides are keyed by season id. A price counts only when it is a
        positive number and a minimum stay only when it is at least 1;
        otherwise the next covering season is tried, then the default.
        """
        year, _, _ = parse_date(day)
        return rates_for_date(
            self._store.list_seasons(host_id, year),
            day,
            prices,
            default_price,
            min_stays,
            default_min_stay,
        )

    def _persist_changes(
        self, host_id: str, before: SeasonCollection, after: SeasonCollection
    ) -> list[str]:
        written = changed_seasons(before, after)
        if written:
            self._store.save_seasons(host_id, [after[season_id] for season_id in written])
        return written

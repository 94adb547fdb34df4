"""Propagation of a year's seasons into another year."""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from seasons.domain.codec import canonicalize
from seasons.domain.dates import shift_date_by_years
from seasons.domain.models import Season, SeasonCollection
from seasons.domain.value_objects import DateRange, validate_year


class CopyPolicy(Enum):
    """How copied seasons treat ids that already exist in the target year."""

    SKIP_EXISTING = "skip_existing"
    OVERWRITE = "overwrite"


@dataclass(frozen=True)
class CopyResult:
    seasons: SeasonCollection
    created: tuple[str, ...] = ()
    overwritten: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()

    @property
    def written(self) -> tuple[str, ...]:
        return self.created + self.overwritten


def shift_season_id(season_id: str, from_year: int, to_year: int) -> str:
    prefix = f"{from_year}-"
    if season_id.startswith(prefix):
        return f"{to_year}-{season_id[len(prefix):]}"
    return f"{to_year}-{season_id}"


def copy_year(
    source: Mapping[str, Season], from_year: int, to_year: int
) -> SeasonCollection:
    """Clone the ``from_year`` seasons of ``source`` into ``to_year``.

    Every bound moves by the year delta (February 29 clamps to the 28th in
    non-leap targets) and the shifted ranges are re-canonicalized, since a
    clamp can make two ranges touch. Seasons of other years are ignored.
    Existing seasons of the target year are not consulted here; see
    ``merge_copied``.
    """
    validate_year(from_year)
    validate_year(to_year)
    delta = to_year - from_year

    copied: SeasonCollection = {}
    for season in source.values():
        if season.year != from_year:
            continue
        new_id = shift_season_id(season.id, from_year, to_year)
        shifted = [
            DateRange(
                start=shift_date_by_years(r.start, delta),
                end=shift_date_by_years(r.end, delta),
            )
            for r in season.date_ranges
        ]
        copied[new_id] = Season(
            id=new_id,
            year=to_year,
            name=season.name,
            color=season.color,
            date_ranges=tuple(canonicalize(shifted)),
        )
    return copied


def merge_copied(
    existing: Mapping[str, Season],
    copied: Mapping[str, Season],
    policy: CopyPolicy = CopyPolicy.SKIP_EXISTING,
) -> CopyResult:
    """Fold copied seasons into the target year's collection.

    With SKIP_EXISTING a copied season whose id is already present is
    dropped. With OVERWRITE it replaces the existing season wholesale.
    Ids are processed in sorted order.
    """
    merged: SeasonCollection = dict(existing)
    created, overwritten, skipped = [], [], []
    for season_id in sorted(copied):
        if season_id in existing:
            if policy is CopyPolicy.SKIP_EXISTING:
                skipped.append(season_id)
                continue
            overwritten.append(season_id)
        else:
            created.append(season_id)
        merged[season_id] = copied[season_id]
    return CopyResult(
        seasons=merged,
        created=tuple(created),
        overwritten=tuple(overwritten),
        skipped=tuple(skipped),
    )

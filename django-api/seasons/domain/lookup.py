"""Resolve which season covers a given day, and the per-season rates for it."""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping

from seasons.domain.codec import expand
from seasons.domain.dates import parse_date
from seasons.domain.models import Season

DEFAULT_MIN_STAY = 1


@dataclass(frozen=True)
class Rates:
    """Nightly price and minimum stay in effect on one day."""

    day: str
    nightly_price: float
    min_stay: int


def build_day_map(seasons: Mapping[str, Season]) -> dict[str, str]:
    """Map every assigned day to its season id.

    With overlapping data the season iterated last wins the day.
    """
    day_map: dict[str, str] = {}
    for season_id, season in seasons.items():
        for day in expand(season.date_ranges):
            day_map[day] = season_id
    return day_map


def _covering(seasons: Mapping[str, Season], day: str) -> Iterator[Season]:
    parse_date(day)
    for season in seasons.values():
        if any(r.start <= day <= r.end for r in season.date_ranges):
            yield season


def season_for_date(seasons: Mapping[str, Season], day: str) -> Season | None:
    return next(_covering(seasons, day), None)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_price(value: Any) -> bool:
    return _is_number(value) and value > 0


def is_valid_min_stay(value: Any) -> bool:
    return _is_number(value) and value >= 1


def resolve_override(
    seasons: Mapping[str, Season],
    overrides: Mapping[str, Any],
    day: str,
    default: Any,
    is_valid: Callable[[Any], bool] = is_valid_price,
) -> Any:
    """Per-season value (nightly price, minimum stay) for ``day``.

    Every season covering the day is tried in turn; the first override that
    passes ``is_valid`` wins. Missing, non-numeric or out-of-range values
    are skipped, and ``default`` is returned when nothing qualifies.
    """
    for season in _covering(seasons, day):
        value = overrides.get(season.id)
        if is_valid(value):
            return value
    return default


def rates_for_date(
    seasons: Mapping[str, Season],
    day: str,
    prices: Mapping[str, Any],
    default_price: float,
    min_stays: Mapping[str, Any] | None = None,
    default_min_stay: int = DEFAULT_MIN_STAY,
) -> Rates:
    return Rates(
        day=day,
        nightly_price=resolve_override(seasons, prices, day, default_price, is_valid_price),
        min_stay=resolve_override(
            seasons, min_stays or {}, day, default_min_stay, is_valid_min_stay
        ),
    )

"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self

from seasons.domain.dates import parse_date
from seasons.domain.errors import (
    InvalidColorError,
    InvalidDateError,
    InvalidRangeError,
    InvalidSeasonNameError,
    InvalidYearError,
)

MIN_YEAR = 1900
MAX_YEAR = 2999

_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase ``text`` and collapse every non-alphanumeric run into '-'."""
    return _SLUG_SEPARATORS.sub("-", text.lower()).strip("-")


def validate_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(year)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(year)
    return year


def validate_color(color: str) -> str:
    if not isinstance(color, str) or not _COLOR_PATTERN.match(color):
        raise InvalidColorError(str(color))
    return color


@dataclass(frozen=True, order=True)
class DateRange:
    """Inclusive span of days; ``start`` never falls after ``end``."""

    start: str
    end: str

    def __post_init__(self) -> None:
        try:
            parse_date(self.start)
            parse_date(self.end)
        except InvalidDateError as exc:
            raise InvalidRangeError(
                str(self.start), str(self.end), "bounds must be YYYY-MM-DD days"
            ) from exc
        if self.start > self.end:
            raise InvalidRangeError(self.start, self.end, "start is after end")

    @classmethod
    def single(cls, day: str) -> Self:
        return cls(start=day, end=day)

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        return cls(start=data["start"], end=data["end"])

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class SeasonId:
    """Identifier of a season, ``"{year}-{slug}"``.

    Derived from the season name once, at creation time. Renaming a
    season never changes its id.
    """

    year: int
    slug: str

    def __post_init__(self) -> None:
        validate_year(self.year)
        if not self.slug:
            raise InvalidSeasonNameError()

    @classmethod
    def from_name(cls, year: int, name: str) -> Self:
        return cls(year=year, slug=slugify(name))

    def __str__(self) -> str:
        return f"{self.year}-{self.slug}"

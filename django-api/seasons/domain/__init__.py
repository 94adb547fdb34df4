from seasons.domain.models import COLOR_PALETTE, Season, SeasonCollection, next_unused_color
from seasons.domain.value_objects import DateRange, SeasonId, slugify

__all__ = [
    "Season",
    "SeasonCollection",
    "SeasonId",
    "DateRange",
    "COLOR_PALETTE",
    "next_unused_color",
    "slugify",
]

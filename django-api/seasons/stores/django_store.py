"""Django ORM implementation of the SeasonStore."""

from typing import Iterable

from django.db import transaction

from seasons import models
from seasons.domain import DateRange, Season, SeasonCollection
from seasons.stores.interfaces import SeasonStore


def to_domain(row: models.Season) -> Season:
    return Season(
        id=row.season_id,
        year=row.year,
        name=row.name,
        color=row.color,
        date_ranges=tuple(DateRange.from_dict(r) for r in row.date_ranges),
    )


class DjangoSeasonStore(SeasonStore):
    """Database-backed season store using Django ORM."""

    def list_seasons(self, host_id: str, year: int | None = None) -> SeasonCollection:
        rows = models.Season.objects.filter(host_id=host_id)
        if year is not None:
            rows = rows.filter(year=year)
        return {row.season_id: to_domain(row) for row in rows}

    def get_season(self, host_id: str, season_id: str) -> Season | None:
        row = models.Season.objects.filter(host_id=host_id, season_id=season_id).first()
        return to_domain(row) if row is not None else None

    def save_season(self, host_id: str, season: Season) -> None:
        # save() per row rather than a bulk update so post_save fires
        row, _ = models.Season.objects.get_or_create(
            host_id=host_id,
            season_id=season.id,
            defaults={"year": season.year, "name": season.name, "color": season.color},
        )
        row.year = season.year
        row.name = season.name
        row.color = season.color
        row.date_ranges = [r.to_dict() for r in season.date_ranges]
        row.save()

    def save_seasons(self, host_id: str, seasons: Iterable[Season]) -> None:
        with transaction.atomic():
            for season in seasons:
                self.save_season(host_id, season)

    def delete_season(self, host_id: str, season_id: str) -> None:
        row = models.Season.objects.filter(host_id=host_id, season_id=season_id).first()
        if row is not None:
            row.delete()

    def season_exists(self, host_id: str, season_id: str) -> bool:
        return models.Season.objects.filter(host_id=host_id, season_id=season_id).exists()

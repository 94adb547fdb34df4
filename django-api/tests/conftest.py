"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from seasons.domain import DateRange, Season, SeasonCollection
from seasons.services.season_service import SeasonService
from seasons.stores.interfaces import SeasonStore


def make_season(season_id: str, *ranges: tuple[str, str], color: str = "#EF4444") -> Season:
    year, _, slug = season_id.partition("-")
    return Season(
        id=season_id,
        year=int(year),
        name=slug.replace("-", " ").title(),
        color=color,
        date_ranges=tuple(DateRange(start=start, end=end) for start, end in ranges),
    )


class InMemorySeasonStore(SeasonStore):
    """Dict-backed store that records every write."""

    def __init__(self) -> None:
        self.seasons: dict[str, SeasonCollection] = {}
        self.saved: list[str] = []
        self.batches: list[list[str]] = []
        self.deleted: list[str] = []

    def add(self, host_id: str, *seasons: Season) -> None:
        for season in seasons:
            self.seasons.setdefault(host_id, {})[season.id] = season

    def list_seasons(self, host_id: str, year: int | None = None) -> SeasonCollection:
        return {
            season_id: season
            for season_id, season in self.seasons.get(host_id, {}).items()
            if year is None or season.year == year
        }

    def get_season(self, host_id: str, season_id: str) -> Season | None:
        return self.seasons.get(host_id, {}).get(season_id)

    def save_season(self, host_id: str, season: Season) -> None:
        self.seasons.setdefault(host_id, {})[season.id] = season
        self.saved.append(season.id)

    def save_seasons(self, host_id: str, seasons) -> None:
        seasons = list(seasons)
        self.batches.append([season.id for season in seasons])
        for season in seasons:
            self.save_season(host_id, season)

    def delete_season(self, host_id: str, season_id: str) -> None:
        self.seasons.get(host_id, {}).pop(season_id, None)
        self.deleted.append(season_id)

    def season_exists(self, host_id: str, season_id: str) -> bool:
        return season_id in self.seasons.get(host_id, {})


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemorySeasonStore:
    return InMemorySeasonStore()


@pytest.fixture
def service(store: InMemorySeasonStore) -> SeasonService:
    return SeasonService(store)


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()

"""Integration tests for the Django ORM season store.

Run with: pytest tests/test_stores.py -v
"""

import pytest
from django.db import DatabaseError

from seasons.domain import DateRange
from seasons.models import Season
from seasons.services.season_service import SeasonService
from seasons.stores.django_store import DjangoSeasonStore

from conftest import make_season

HOST = "host-1"


@pytest.fixture
def django_store() -> DjangoSeasonStore:
    return DjangoSeasonStore()


@pytest.fixture
def failing_second_save(monkeypatch):
    """Make the second row write of a batch fail."""
    original = DjangoSeasonStore.save_season
    calls = []

    def save_season(self, host_id, season):
        calls.append(season.id)
        if len(calls) == 2:
            raise DatabaseError("write failed")
        original(self, host_id, season)

    monkeypatch.setattr(DjangoSeasonStore, "save_season", save_season)
    return calls


def create_row(season_id: str, *ranges: tuple[str, str]) -> Season:
    return Season.objects.create(
        host_id=HOST,
        season_id=season_id,
        year=int(season_id.split("-", 1)[0]),
        name=season_id.split("-", 1)[1].title(),
        color="#EF4444",
        date_ranges=[{"start": start, "end": end} for start, end in ranges],
    )


def stored_ranges(season_id: str) -> list[dict]:
    return Season.objects.get(host_id=HOST, season_id=season_id).date_ranges


@pytest.mark.django_db
class TestDjangoSeasonStore:
    """Tests for DjangoSeasonStore."""

    def test_save_and_load_round_trip(self, django_store):
        season = make_season("2026-high", ("2026-07-01", "2026-07-31"))
        django_store.save_season(HOST, season)
        assert django_store.get_season(HOST, "2026-high") == season
        assert django_store.list_seasons(HOST, 2026) == {"2026-high": season}
        assert django_store.list_seasons(HOST, 2025) == {}

    def test_save_replaces_existing_row(self, django_store):
        django_store.save_season(HOST, make_season("2026-high", ("2026-07-01", "2026-07-31")))
        django_store.save_season(HOST, make_season("2026-high"))
        assert Season.objects.filter(host_id=HOST).count() == 1
        assert stored_ranges("2026-high") == []

    def test_save_seasons_writes_all(self, django_store):
        django_store.save_seasons(
            HOST, [make_season("2026-high"), make_season("2026-low")]
        )
        assert sorted(django_store.list_seasons(HOST)) == ["2026-high", "2026-low"]

    def test_save_seasons_is_all_or_nothing(self, django_store, failing_second_save):
        with pytest.raises(DatabaseError):
            django_store.save_seasons(
                HOST, [make_season("2026-high"), make_season("2026-low")]
            )
        assert not Season.objects.filter(host_id=HOST).exists()


@pytest.mark.django_db
class TestAtomicWrites:
    """A failed write during paint or copy leaves the database as it was."""

    def test_failed_paint_keeps_previous_partition(self, django_store, failing_second_save):
        create_row("2026-high", ("2026-06-01", "2026-06-10"))
        create_row("2026-low")
        service = SeasonService(django_store)

        with pytest.raises(DatabaseError):
            service.paint_range(HOST, "2026-low", "2026-06-05", "2026-06-15")

        assert stored_ranges("2026-high") == [{"start": "2026-06-01", "end": "2026-06-10"}]
        assert stored_ranges("2026-low") == []
        assert service.validate(HOST, 2026) == []

    def test_failed_copy_writes_nothing(self, django_store, failing_second_save):
        create_row("2025-high", ("2025-12-20", "2025-12-31"))
        create_row("2025-low", ("2025-01-01", "2025-01-31"))

        with pytest.raises(DatabaseError):
            SeasonService(django_store).copy_year(HOST, 2025, 2026)

        assert django_store.list_seasons(HOST, 2026) == {}

    def test_successful_paint_persists_every_change(self, django_store):
        create_row("2026-high", ("2026-06-01", "2026-06-10"))
        create_row("2026-low")

        SeasonService(django_store).paint_range(HOST, "2026-low", "2026-06-05", "2026-06-15")

        assert django_store.get_season(HOST, "2026-high").date_ranges == (
            DateRange("2026-06-01", "2026-06-04"),
        )
        assert stored_ranges("2026-low") == [{"start": "2026-06-05", "end": "2026-06-15"}]

"""Unit tests for coverage reporting and day lookup.

Run with: pytest tests/test_coverage.py -v
"""

import pytest

from seasons.domain.coverage import coverage_report
from seasons.domain.errors import InvalidDateError
from seasons.domain.lookup import (
    build_day_map,
    is_valid_min_stay,
    rates_for_date,
    resolve_override,
    season_for_date,
)
from seasons.domain.partition import paint_range, remove_day

from conftest import make_season


class TestCoverageReport:
    """Tests for coverage_report."""

    def test_empty_collection(self):
        report = coverage_report({}, 2026)
        assert report.total_days == 365
        assert report.unassigned_days == 365
        assert report.day_counts == {}

    def test_counts_per_season(self):
        seasons = {
            "2024-high": make_season("2024-high", ("2024-06-01", "2024-06-30")),
            "2024-low": make_season("2024-low", ("2024-01-01", "2024-01-10")),
        }
        report = coverage_report(seasons, 2024)
        assert report.total_days == 366
        assert report.day_counts == {"2024-high": 30, "2024-low": 10}
        assert report.assigned_days == 40
        assert report.unassigned_days == 326
        assert not report.integrity_warning

    def test_conservation_after_paint_and_remove(self):
        seasons = {"2026-high": make_season("2026-high"), "2026-low": make_season("2026-low")}
        seasons = paint_range(seasons, "2026-high", "2026-03-01", "2026-09-30")
        seasons = paint_range(seasons, "2026-low", "2026-09-01", "2026-12-31")
        seasons["2026-low"] = remove_day(seasons["2026-low"], "2026-12-24")

        report = coverage_report(seasons, 2026)
        assert sum(report.day_counts.values()) + report.unassigned_days == report.total_days

    def test_other_years_excluded(self):
        seasons = {"2025-high": make_season("2025-high", ("2025-06-01", "2025-06-30"))}
        assert coverage_report(seasons, 2026).day_counts == {}

    def test_overlapping_data_clamps_and_warns(self):
        seasons = {
            "2026-a": make_season("2026-a", ("2026-01-01", "2026-12-31")),
            "2026-b": make_season("2026-b", ("2026-01-01", "2026-01-31")),
        }
        report = coverage_report(seasons, 2026)
        assert report.unassigned_days == 0
        assert report.integrity_warning


class TestLookup:
    """Tests for day lookup helpers."""

    def setup_method(self):
        self.seasons = {
            "2026-high": make_season("2026-high", ("2026-07-01", "2026-08-31")),
            "2026-low": make_season("2026-low", ("2026-01-01", "2026-03-31")),
        }

    def test_season_for_date(self):
        assert season_for_date(self.seasons, "2026-08-31").id == "2026-high"
        assert season_for_date(self.seasons, "2026-05-01") is None

    def test_season_for_date_rejects_malformed(self):
        with pytest.raises(InvalidDateError):
            season_for_date(self.seasons, "2026-5-1")

    def test_build_day_map(self):
        day_map = build_day_map(self.seasons)
        assert day_map["2026-07-15"] == "2026-high"
        assert day_map["2026-02-01"] == "2026-low"
        assert len(day_map) == 62 + 90

    def test_resolve_override(self):
        prices = {"2026-high": 240}
        assert resolve_override(self.seasons, prices, "2026-07-04", 150) == 240
        assert resolve_override(self.seasons, prices, "2026-02-01", 150) == 150
        assert resolve_override(self.seasons, prices, "2026-05-01", 150) == 150

    def test_zero_price_falls_back_to_default(self):
        assert resolve_override(self.seasons, {"2026-high": 0}, "2026-07-04", 150) == 150

    @pytest.mark.parametrize("value", [-20, "240", None, True])
    def test_unusable_price_falls_back_to_default(self, value):
        assert resolve_override(self.seasons, {"2026-high": value}, "2026-07-04", 150) == 150

    def test_next_covering_season_is_tried(self):
        """With overlapping data an unusable override does not hide a usable one."""
        seasons = {
            "2026-a": make_season("2026-a", ("2026-07-01", "2026-07-31")),
            "2026-b": make_season("2026-b", ("2026-07-01", "2026-07-10")),
        }
        prices = {"2026-a": 0, "2026-b": 210}
        assert resolve_override(seasons, prices, "2026-07-04", 150) == 210

    def test_min_stay_rule(self):
        stays = {"2026-high": 0.5}
        assert resolve_override(self.seasons, stays, "2026-07-04", 2, is_valid_min_stay) == 2
        stays = {"2026-high": 1}
        assert resolve_override(self.seasons, stays, "2026-07-04", 2, is_valid_min_stay) == 1

    def test_rates_for_date(self):
        rates = rates_for_date(
            self.seasons, "2026-07-04", {"2026-high": 240}, 150, {"2026-high": 3}
        )
        assert rates.nightly_price == 240
        assert rates.min_stay == 3

    def test_rates_for_unassigned_date_use_defaults(self):
        rates = rates_for_date(self.seasons, "2026-05-01", {"2026-high": 240}, 150)
        assert rates.nightly_price == 150
        assert rates.min_stay == 1

    def test_rates_reject_malformed_date(self):
        with pytest.raises(InvalidDateError):
            rates_for_date(self.seasons, "July 4", {}, 150)

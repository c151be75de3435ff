"""Tests for the tier calculator."""

import math
from decimal import Decimal

import pytest

from rewardman.tiers import (
    DEFAULT_TIER_SCHEDULE,
    TierInfo,
    TierSchedule,
    default_schedule,
    tier_for,
    tier_info,
)


@pytest.fixture
def three_tiers():
    return TierSchedule([("Bronze", 0), ("Silver", 100), ("Gold", 300)])


class TestTierSchedule:
    """Tests for TierSchedule construction."""

    def test_names_and_lowest(self, three_tiers):
        assert three_tiers.names == ["Bronze", "Silver", "Gold"]
        assert three_tiers.lowest == "Bronze"
        assert len(three_tiers) == 3

    def test_empty_schedule_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            TierSchedule([])

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            TierSchedule([("Bronze", 0), ("Bronze", 100)])

    def test_unsorted_bounds_rejected(self):
        with pytest.raises(ValueError, match="ascending"):
            TierSchedule([("Bronze", 0), ("Gold", 300), ("Silver", 100)])

    def test_equal_bounds_rejected(self):
        with pytest.raises(ValueError, match="ascending"):
            TierSchedule([("Bronze", 0), ("Silver", 0)])

    @pytest.mark.parametrize("bound", [float("nan"), Decimal("NaN")])
    def test_nan_bound_rejected(self, bound):
        with pytest.raises(ValueError, match="NaN"):
            TierSchedule([("Bronze", 0), ("Silver", bound), ("Gold", 300)])

    @pytest.mark.parametrize("bound", ["100", None, True])
    def test_non_numeric_bound_rejected(self, bound):
        with pytest.raises(ValueError, match="must be a number"):
            TierSchedule([("Bronze", 0), ("Silver", bound)])

    def test_decimal_bounds_accepted(self):
        schedule = TierSchedule([("Bronze", Decimal("0")), ("Silver", Decimal("99.5"))])
        assert tier_for(100, schedule) == "Silver"

    def test_default_schedule_from_settings(self):
        schedule = default_schedule()
        assert list(schedule) == DEFAULT_TIER_SCHEDULE

    def test_schedule_override(self, settings):
        settings.REWARDMAN = {"TIER_SCHEDULE": [("Member", 0), ("VIP", 50)]}
        assert tier_for(60) == "VIP"
        assert tier_for(10) == "Member"


class TestTierInfo:
    """Tests for the metric -> tier evaluation."""

    def test_reference_examples(self, three_tiers):
        assert tier_for(0, three_tiers) == "Bronze"
        assert tier_for(99, three_tiers) == "Bronze"
        assert tier_for(100, three_tiers) == "Silver"

        info = tier_info(299, three_tiers)
        assert info.tier == "Silver"
        assert info.next_tier == "Gold"
        assert info.remaining == 1
        assert info.progress_percent == pytest.approx(99.5)

        top = tier_info(300, three_tiers)
        assert top.tier == "Gold"
        assert top.next_tier is None

    def test_lowest_tier_progress(self, three_tiers):
        info = tier_info(50, three_tiers)
        assert info == TierInfo(tier="Bronze", next_tier="Silver", remaining=50, progress_percent=50.0)

    def test_boundary_belongs_to_higher_tier(self, three_tiers):
        for name, lower in three_tiers:
            assert tier_for(lower, three_tiers) == name

    def test_top_tier_is_capped(self, three_tiers):
        for metric in (300, 301, 10_000, 10**9):
            info = tier_info(metric, three_tiers)
            assert info.next_tier is None
            assert info.progress_percent == 100.0
            assert info.remaining == 0

    def test_monotonic_non_decreasing(self, three_tiers):
        ranks = [three_tiers.names.index(tier_for(m, three_tiers)) for m in range(0, 700, 7)]
        assert ranks == sorted(ranks)

    def test_progress_within_bounds(self, three_tiers):
        for metric in [0, 0.5, 1, 99.99, 100, 150, 299.9, 300, 5000]:
            progress = tier_info(metric, three_tiers).progress_percent
            assert 0.0 <= progress <= 100.0

    @pytest.mark.parametrize("metric", [None, -1, -500.5, float("nan"), Decimal("-3"), Decimal("NaN")])
    def test_invalid_metric_counts_as_zero(self, three_tiers, metric):
        info = tier_info(metric, three_tiers)
        assert info.tier == "Bronze"
        assert info.remaining == 100
        assert info.progress_percent == 0.0

    def test_decimal_metric(self, three_tiers):
        info = tier_info(Decimal("150.50"), three_tiers)
        assert info.tier == "Silver"
        assert info.remaining == Decimal("149.50")
        assert info.progress_percent == pytest.approx(25.25)

    def test_decimal_metric_with_float_bounds(self):
        schedule = TierSchedule([("Bronze", 0), ("Silver", 100.5), ("Gold", 300)])
        info = tier_info(Decimal("50"), schedule)
        assert info.tier == "Bronze"
        assert info.remaining == pytest.approx(50.5)
        assert info.progress_percent == pytest.approx(50 / 100.5 * 100)

    def test_float_metric_with_decimal_bounds(self):
        schedule = TierSchedule([("Bronze", Decimal("0")), ("Silver", Decimal("100.5"))])
        info = tier_info(25.125, schedule)
        assert info.tier == "Bronze"
        assert info.remaining == pytest.approx(75.375)

    def test_idempotent(self, three_tiers):
        assert tier_info(123, three_tiers) == tier_info(123, three_tiers)

    def test_lowest_bound_above_zero(self):
        schedule = TierSchedule([("Starter", 10), ("Regular", 20)])
        info = tier_info(0, schedule)
        assert info.tier == "Starter"
        assert info.progress_percent == 0.0

    def test_single_tier_schedule(self):
        info = tier_info(42, TierSchedule([("Member", 0)]))
        assert info.tier == "Member"
        assert info.next_tier is None
        assert info.progress_percent == 100.0

    def test_default_four_tiers(self):
        assert tier_for(0) == "Bronze"
        assert tier_for(100) == "Silver"
        assert tier_for(300) == "Gold"
        assert tier_for(600) == "Platinum"

        info = tier_info(450)
        assert info.next_tier == "Platinum"
        assert info.remaining == 150
        assert info.progress_percent == pytest.approx(50.0)

    def test_as_dict(self, three_tiers):
        data = tier_info(200, three_tiers).as_dict()
        assert data == {
            "tier": "Silver",
            "next_tier": "Gold",
            "remaining": 100,
            "progress_percent": 50.0,
        }
        assert not math.isnan(data["progress_percent"])

"""
Tier calculator.

Maps a cumulative metric (lifetime points earned) to a named tier and the
progress towards the next one. Pure and stateless: no models, no I/O.

Usage:
    from rewardman.tiers import TierSchedule, tier_info

    schedule = TierSchedule([("Bronze", 0), ("Silver", 100), ("Gold", 300)])
    info = tier_info(299, schedule)
    info.tier              # "Silver"
    info.next_tier         # "Gold"
    info.remaining         # 1
    info.progress_percent  # 99.5
"""

import math
from dataclasses import dataclass
from decimal import Decimal

DEFAULT_TIER_SCHEDULE = [
    ("Bronze", 0),
    ("Silver", 100),
    ("Gold", 300),
    ("Platinum", 600),
]


@dataclass(frozen=True)
class TierInfo:
    """Tier evaluation result."""

    tier: str
    next_tier: str | None
    remaining: float
    progress_percent: float

    def as_dict(self) -> dict:
        return {
            "tier": self.tier,
            "next_tier": self.next_tier,
            "remaining": self.remaining,
            "progress_percent": self.progress_percent,
        }


class TierSchedule:
    """
    Ordered tier table of (name, lower_bound) pairs.

    Lower bounds are inclusive and must be strictly ascending. Decimal
    bounds and metrics are evaluated as floats.
    """

    def __init__(self, tiers):
        tiers = [(str(name), _coerce_bound(name, lower)) for name, lower in tiers]
        if not tiers:
            raise ValueError("Tier schedule cannot be empty")

        names = [name for name, _ in tiers]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate tier names in schedule: {names}")

        bounds = [lower for _, lower in tiers]
        if any(b <= a for a, b in zip(bounds, bounds[1:])):
            raise ValueError(f"Tier bounds must be strictly ascending: {bounds}")

        self._tiers = tuple(tiers)

    def __iter__(self):
        return iter(self._tiers)

    def __len__(self):
        return len(self._tiers)

    def __repr__(self):
        return f"TierSchedule({list(self._tiers)!r})"

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self._tiers]

    @property
    def lowest(self) -> str:
        return self._tiers[0][0]

    def index_for(self, metric) -> int:
        """Index of the highest tier whose lower bound is <= metric."""
        index = 0
        for i, (_, lower) in enumerate(self._tiers):
            if metric >= lower:
                index = i
            else:
                break
        return index

    def evaluate(self, metric) -> TierInfo:
        metric = _coerce_metric(metric)
        index = self.index_for(metric)
        name, lower = self._tiers[index]

        if index == len(self._tiers) - 1:
            return TierInfo(tier=name, next_tier=None, remaining=0, progress_percent=100.0)

        next_name, next_lower = self._tiers[index + 1]
        progress = float(metric - lower) / float(next_lower - lower) * 100
        progress = min(100.0, max(0.0, progress))

        return TierInfo(
            tier=name,
            next_tier=next_name,
            remaining=next_lower - metric,
            progress_percent=progress,
        )


def _coerce_bound(name, lower):
    if isinstance(lower, bool) or not isinstance(lower, (int, float, Decimal)):
        raise ValueError(f"Tier {name!r} bound must be a number: {lower!r}")
    if isinstance(lower, Decimal):
        if lower.is_nan():
            raise ValueError(f"Tier {name!r} bound cannot be NaN")
        return float(lower)
    if isinstance(lower, float) and math.isnan(lower):
        raise ValueError(f"Tier {name!r} bound cannot be NaN")
    return lower


def _coerce_metric(metric):
    # Missing, negative and NaN metrics count as zero
    if metric is None:
        return 0
    if isinstance(metric, Decimal):
        if metric.is_nan() or metric < 0:
            return 0
        return float(metric)
    if isinstance(metric, float) and math.isnan(metric):
        return 0
    return metric if metric > 0 else 0


def default_schedule() -> TierSchedule:
    """Schedule from REWARDMAN["TIER_SCHEDULE"]."""
    from rewardman.conf import rewardman_settings

    return TierSchedule(rewardman_settings.TIER_SCHEDULE)


def tier_info(metric, schedule: TierSchedule | None = None) -> TierInfo:
    """Evaluate metric against schedule (configured schedule by default)."""
    if schedule is None:
        schedule = default_schedule()
    return schedule.evaluate(metric)


def tier_for(metric, schedule: TierSchedule | None = None) -> str:
    """Tier name for metric."""
    return tier_info(metric, schedule).tier

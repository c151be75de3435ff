"""Customer protocols."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CustomerProfile:
    """Customer card shown on the profile and loyalty screens."""

    email: str
    full_name: str
    mobile: str
    status: str
    points: int
    wallet: Decimal
    tier: str
    next_tier: str | None
    points_to_next_tier: float
    tier_progress_percent: float
    lifetime_points: int
    favorite_category: str | None = None

    def as_dict(self) -> dict:
        return {
            "email": self.email,
            "full_name": self.full_name,
            "mobile": self.mobile,
            "status": self.status,
            "points": self.points,
            "wallet": str(self.wallet),
            "tier": self.tier,
            "next_tier": self.next_tier,
            "points_to_next_tier": self.points_to_next_tier,
            "tier_progress_percent": self.tier_progress_percent,
            "lifetime_points": self.lifetime_points,
            "favorite_category": self.favorite_category,
        }

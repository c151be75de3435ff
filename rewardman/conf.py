"""
Rewardman configuration.

Usage in settings.py:
    REWARDMAN = {
        "TIER_SCHEDULE": [("Bronze", 0), ("Silver", 100), ("Gold", 300)],
        "WALLET_POINTS_DIVISOR": 100,
    }
"""

from dataclasses import dataclass, field
from typing import Any

from django.conf import settings

from rewardman.tiers import DEFAULT_TIER_SCHEDULE


@dataclass
class RewardmanSettings:
    """Rewardman configuration settings."""

    # (name, lower_bound) pairs over lifetime points earned
    TIER_SCHEDULE: list = field(default_factory=lambda: list(DEFAULT_TIER_SCHEDULE))

    # Currency units per reward point on wallet purchases
    WALLET_POINTS_DIVISOR: int = 100

    # Local mobile format (11 digits starting with 09)
    MOBILE_PATTERN: str = r"^09\d{9}$"

    # Verification backend (empty disables verification mail)
    VERIFICATION_BACKEND: str = "rewardman.adapters.mail.MailVerificationBackend"
    DEFAULT_FROM_EMAIL: str = ""

    # Default page size for history listings
    HISTORY_LIMIT: int = 50


def get_rewardman_settings() -> RewardmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "REWARDMAN", {})
    return RewardmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_rewardman_settings(), name)


rewardman_settings = _LazySettings()

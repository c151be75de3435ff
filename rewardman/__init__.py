"""
Rewardman - Café loyalty program.

Usage:
    from rewardman import RewardsService, tier_info
    from rewardman.gates import Gates, GateError, GateResult

    cust = RewardsService.get("ana@example.com")
    status = RewardsService.tier_status("ana@example.com")
    order = RewardsService.place_order("ana@example.com", item_id=3)

    # Pure tier calculator
    tier_info(250).tier  # "Silver"
"""


def __getattr__(name):
    if name == "RewardsService":
        from rewardman.service import RewardsService

        return RewardsService
    if name == "RewardmanError":
        from rewardman.exceptions import RewardmanError

        return RewardmanError
    if name in ("tier_info", "tier_for", "TierInfo", "TierSchedule"):
        from rewardman import tiers

        return getattr(tiers, name)
    if name in ("Gates", "GateError", "GateResult"):
        from rewardman import gates

        return getattr(gates, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "RewardsService",
    "RewardmanError",
    "tier_info",
    "tier_for",
    "TierInfo",
    "TierSchedule",
    "Gates",
    "GateError",
    "GateResult",
]
__version__ = "0.1.0"

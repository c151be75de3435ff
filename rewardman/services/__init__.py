"""Rewardman services.

One module per area; the RewardsService facade in rewardman.service
re-exports the customer-facing operations.
"""

from rewardman.services import customer
from rewardman.services import catalog
from rewardman.services import history
from rewardman.services import orders
from rewardman.services import wallet
from rewardman.services import promotions
from rewardman.services import notifications
from rewardman.services import insights

__all__ = [
    "customer",
    "catalog",
    "history",
    "orders",
    "wallet",
    "promotions",
    "notifications",
    "insights",
]

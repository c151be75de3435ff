"""Insight service - favorite category from completed orders."""

import logging
from collections import Counter

from rewardman.models import OrderItem, OrderStatus
from rewardman.services import customer as customer_service

logger = logging.getLogger(__name__)


def category_counts(email: str) -> Counter:
    """Item quantities per category over the customer's completed orders."""
    counts = Counter()
    items = OrderItem.objects.filter(
        order__customer__email__iexact=(email or "").strip(),
        order__status=OrderStatus.COMPLETED,
    ).exclude(category="")
    for item in items:
        counts[item.category] += item.qty
    return counts


def update_favorite_category(email: str) -> tuple[str | None, str | None]:
    """
    Store the customer's most and second most ordered categories.

    Leaves the customer untouched when no completed order has a
    categorized item.

    Returns:
        (favorite, secondary); secondary is None with a single category

    Raises:
        RewardmanError: CUSTOMER_NOT_FOUND
    """
    cust = customer_service.require(email)
    ranked = category_counts(cust.email).most_common(2)

    if not ranked:
        logger.info("No favorite category found for %s", cust.email)
        return None, None

    favorite = ranked[0][0]
    secondary = ranked[1][0] if len(ranked) > 1 else None

    cust.favorite_category = favorite
    cust.secondary_category = secondary or ""
    cust.save(update_fields=["favorite_category", "secondary_category", "updated_at"])

    logger.info("Favorite category for %s: %s (secondary: %s)", cust.email, favorite, secondary)
    return favorite, secondary

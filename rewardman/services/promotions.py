"""Promotion service - tier-targeted offers and claims."""

import logging

from django.db import transaction
from django.utils import timezone

from rewardman.exceptions import RewardmanError
from rewardman.gates import GateError, Gates
from rewardman.models import ClaimedPromotion, Promotion
from rewardman.services import customer as customer_service
from rewardman.signals import promotion_claimed

logger = logging.getLogger(__name__)


def _running(now):
    return [p for p in Promotion.objects.all() if not p.is_expired(now)]


def available_for(email: str, now=None) -> list[Promotion]:
    """
    Promotions the customer can claim now.

    A promotion is listed when it targets the customer's (freshly
    recomputed) tier, has no category or the customer's favorite category,
    and has not expired.
    """
    cust = customer_service.require(email)
    now = now or timezone.now()

    return [
        p for p in _running(now)
        if p.applies_to_tier(cust.tier)
        and (not p.category or p.category == cust.favorite_category)
    ]


def has_new_promotions(email: str, now=None) -> bool:
    """True when any running promotion targets the customer's tier."""
    cust = customer_service.require(email)
    now = now or timezone.now()
    return any(p.applies_to_tier(cust.tier) for p in _running(now))


def claim(email: str, promotion_id, now=None) -> ClaimedPromotion:
    """
    Claim a promotion.

    Idempotent per (customer, promotion): claiming twice returns the
    existing claim. Staff redeem it by scanning ClaimedPromotion.qr_payload.

    Raises:
        RewardmanError: CUSTOMER_NOT_FOUND, PROMOTION_NOT_FOUND,
            PROMOTION_EXPIRED or PROMOTION_NOT_ELIGIBLE
    """
    cust = customer_service.require(email)
    try:
        promo = Promotion.objects.get(pk=promotion_id)
    except (Promotion.DoesNotExist, ValueError):
        raise RewardmanError("PROMOTION_NOT_FOUND", promotion_id=promotion_id)

    try:
        Gates.promotion_claimable(promo, cust.tier, now=now)
    except GateError as e:
        code = "PROMOTION_EXPIRED" if e.details.get("reason") == "expired" else "PROMOTION_NOT_ELIGIBLE"
        logger.warning("Claim of promotion %s by %s rejected: %s", promo.pk, cust.email, e.message)
        raise RewardmanError(code, promotion_id=promo.pk, tier=cust.tier) from e

    with transaction.atomic():
        claimed, created = ClaimedPromotion.objects.get_or_create(
            customer=cust,
            promotion=promo,
            defaults={
                "title": promo.title,
                "description": promo.description,
                "price": promo.price,
                "promo_type": promo.promo_type or "global",
                "start_date": promo.start_date,
                "end_date": promo.end_date,
            },
        )

    if created:
        logger.info("Promotion %s claimed by %s", promo.pk, cust.email)
        promotion_claimed.send(sender=ClaimedPromotion, claim=claimed)

    return claimed


def list_claimed(email: str) -> list[ClaimedPromotion]:
    """Customer's claimed promotions, newest first."""
    return list(
        ClaimedPromotion.objects.filter(customer__email__iexact=(email or "").strip())
        .select_related("customer")
    )


def get_claimed(email: str, promotion_id) -> ClaimedPromotion | None:
    try:
        return ClaimedPromotion.objects.select_related("customer").get(
            customer__email__iexact=(email or "").strip(),
            promotion_id=promotion_id,
        )
    except (ClaimedPromotion.DoesNotExist, ValueError):
        return None


def mark_used(email: str, promotion_id) -> ClaimedPromotion:
    """
    Staff redemption of a claimed promotion.

    Raises:
        RewardmanError: PROMOTION_NOT_FOUND or PROMOTION_ALREADY_USED
    """
    with transaction.atomic():
        try:
            claimed = ClaimedPromotion.objects.select_for_update().get(
                customer__email__iexact=(email or "").strip(),
                promotion_id=promotion_id,
            )
        except (ClaimedPromotion.DoesNotExist, ValueError):
            raise RewardmanError("PROMOTION_NOT_FOUND", promotion_id=promotion_id)

        if claimed.is_used:
            raise RewardmanError("PROMOTION_ALREADY_USED", promotion_id=promotion_id)

        claimed.is_used = True
        claimed.used_at = timezone.now()
        claimed.save(update_fields=["is_used", "used_at"])

    return claimed

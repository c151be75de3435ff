"""Promotion models: tier-targeted offers and customer claims."""

import json

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Promotion(models.Model):
    """
    Offer visible to customers of the listed tiers.

    An empty category targets everyone; otherwise only customers whose
    favorite category matches see it. No end_date means it never expires.
    """

    title = models.CharField(_("title"), max_length=200)
    description = models.TextField(_("description"), blank=True)
    applicable_tiers = models.JSONField(
        _("applicable tiers"),
        default=list,
        blank=True,
        help_text=_('Tier names, e.g. ["Silver", "Gold"]'),
    )
    category = models.CharField(_("category"), max_length=100, blank=True)
    promo_type = models.CharField(_("type"), max_length=30, default="global")
    price = models.DecimalField(_("price"), max_digits=10, decimal_places=2, default=0)
    image = models.URLField(_("image"), blank=True)

    start_date = models.DateTimeField(_("start date"), null=True, blank=True)
    end_date = models.DateTimeField(_("end date"), null=True, blank=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)

    class Meta:
        verbose_name = _("promotion")
        verbose_name_plural = _("promotions")
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    def is_expired(self, now=None) -> bool:
        if self.end_date is None:
            return False
        return self.end_date < (now or timezone.now())

    def applies_to_tier(self, tier: str) -> bool:
        return tier in (self.applicable_tiers or [])


class ClaimedPromotion(models.Model):
    """
    Promotion claimed by a customer.

    Holds a snapshot of the promotion at claim time. Staff mark it used
    after scanning the claim QR code.
    """

    customer = models.ForeignKey(
        "rewardman.Customer",
        on_delete=models.CASCADE,
        related_name="claimed_promotions",
        verbose_name=_("customer"),
    )
    promotion = models.ForeignKey(
        Promotion,
        on_delete=models.CASCADE,
        related_name="claims",
        verbose_name=_("promotion"),
    )

    title = models.CharField(_("title"), max_length=200)
    description = models.TextField(_("description"), blank=True)
    price = models.DecimalField(_("price"), max_digits=10, decimal_places=2, default=0)
    promo_type = models.CharField(_("type"), max_length=30, default="global")
    start_date = models.DateTimeField(_("start date"), null=True, blank=True)
    end_date = models.DateTimeField(_("end date"), null=True, blank=True)

    is_used = models.BooleanField(_("used"), default=False)
    claimed_at = models.DateTimeField(_("claimed at"), auto_now_add=True)
    used_at = models.DateTimeField(_("used at"), null=True, blank=True)

    class Meta:
        verbose_name = _("claimed promotion")
        verbose_name_plural = _("claimed promotions")
        ordering = ["-claimed_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["customer", "promotion"],
                name="rewardman_unique_claim_per_customer",
            ),
        ]

    def __str__(self):
        return f"{self.customer_id}: {self.title}"

    @property
    def qr_payload(self) -> str:
        """Text encoded in the claim QR code, scanned by staff."""
        return json.dumps({
            "type": "PROMO",
            "promoId": str(self.promotion_id),
            "email": self.customer.email,
        })

"""Customer model.

Data architecture:
    Customer.email
        Primary lookup key. Stored lowercased; one customer per email.

    Customer.points
        Redeemable balance. Goes up on point-earning transactions and wallet
        purchases, down when a point-priced order is completed.

    Customer.tier
        Derived cache of tier_for(lifetime points earned). Recomputed and
        overwritten by services.customer.get() on every read, so it is
        eventually consistent, not authoritative.

    Transaction (models.transaction)
        Append-only ledger. The sum of Transaction.points_earned is the
        lifetime metric that drives the tier.
"""

import uuid as uuid_lib
from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _


class CustomerStatus(models.TextChoices):
    ACTIVE = "Active", _("Active")
    INACTIVE = "Inactive", _("Inactive")


class Customer(models.Model):
    """
    Registered loyalty customer.

    Starts Inactive with zero points and wallet at the lowest tier.
    """

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True)

    email = models.EmailField(_("email"), unique=True)
    full_name = models.CharField(_("full name"), max_length=200)
    mobile = models.CharField(_("mobile"), max_length=20, blank=True, db_index=True)
    gender = models.CharField(_("gender"), max_length=20, blank=True)

    # Balances
    points = models.IntegerField(
        _("points"),
        default=0,
        help_text=_("Redeemable points balance"),
    )
    wallet = models.DecimalField(
        _("wallet"),
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Prepaid wallet balance"),
    )

    # Derived cache, see module docstring
    tier = models.CharField(_("tier"), max_length=30, default="Bronze")

    status = models.CharField(
        _("status"),
        max_length=20,
        choices=CustomerStatus.choices,
        default=CustomerStatus.INACTIVE,
    )

    # Filled by services.insights.update_favorite_category()
    favorite_category = models.CharField(_("favorite category"), max_length=100, blank=True)
    secondary_category = models.CharField(_("secondary category"), max_length=100, blank=True)

    created_at = models.DateTimeField(_("created at"), auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    class Meta:
        verbose_name = _("customer")
        verbose_name_plural = _("customers")
        ordering = ["full_name"]
        constraints = [
            models.UniqueConstraint(
                fields=["mobile"],
                condition=~models.Q(mobile=""),
                name="rewardman_unique_customer_mobile",
            ),
        ]

    def __str__(self):
        return f"{self.full_name} <{self.email}>"

    @property
    def is_active(self) -> bool:
        return self.status == CustomerStatus.ACTIVE

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.lower().strip()
        if self.mobile:
            self.mobile = self.mobile.strip()
        super().save(*args, **kwargs)

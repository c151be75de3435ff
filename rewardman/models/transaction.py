"""Transaction model: append-only loyalty ledger."""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Transaction(models.Model):
    """
    Immutable record of a point-earning or point-spending event.

    Transactions are append-only: never modified or deleted.
    Sum of points_earned is the lifetime metric that drives the tier.
    """

    customer = models.ForeignKey(
        "rewardman.Customer",
        on_delete=models.CASCADE,
        related_name="transactions",
        verbose_name=_("customer"),
    )

    order_ref = models.CharField(
        _("order reference"),
        max_length=40,
        blank=True,
        help_text=_("Order this transaction belongs to, if any"),
    )
    payment_method = models.CharField(
        _("payment method"),
        max_length=50,
        help_text=_("Free text: Cash, Wallet, Points, E-Wallet, Points + Cash, ..."),
    )
    transaction_type = models.CharField(_("type"), max_length=50, default="Purchase")
    amount = models.DecimalField(_("amount"), max_digits=12, decimal_places=2)
    points_earned = models.IntegerField(_("points earned"), default=0)

    date = models.DateTimeField(_("date"), default=timezone.now, db_index=True)
    created_by = models.CharField(_("created by"), max_length=100, blank=True)

    class Meta:
        verbose_name = _("transaction")
        verbose_name_plural = _("transactions")
        ordering = ["-date", "-pk"]
        indexes = [
            models.Index(fields=["customer", "-date"], name="rm_tx_customer_date_idx"),
        ]

    def __str__(self):
        return f"{self.transaction_type} {self.amount} via {self.payment_method}"

"""Wallet models: top-up requests and the wallet log."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class WalletRequestStatus(models.TextChoices):
    PENDING = "pending", _("Pending")
    APPROVED = "approved", _("Approved")
    REJECTED = "rejected", _("Rejected")


class WalletRequest(models.Model):
    """
    Customer-submitted top-up request.

    The customer pays through an external e-wallet and submits the payment
    reference number. Staff verify it and approve (crediting the wallet) or
    reject it.
    """

    customer = models.ForeignKey(
        "rewardman.Customer",
        on_delete=models.CASCADE,
        related_name="wallet_requests",
        verbose_name=_("customer"),
    )
    reference_no = models.CharField(_("reference number"), max_length=100)
    amount = models.DecimalField(
        _("amount"),
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        help_text=_("Verified top-up amount"),
    )
    status = models.CharField(
        _("status"),
        max_length=20,
        choices=WalletRequestStatus.choices,
        default=WalletRequestStatus.PENDING,
        db_index=True,
    )
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    processed_at = models.DateTimeField(_("processed at"), null=True, blank=True)

    class Meta:
        verbose_name = _("wallet load request")
        verbose_name_plural = _("wallet load requests")
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.customer_id}:{self.reference_no} [{self.status}]"


class WalletLog(models.Model):
    """Credited top-up, shown in the customer's wallet log history."""

    customer = models.ForeignKey(
        "rewardman.Customer",
        on_delete=models.CASCADE,
        related_name="wallet_logs",
        verbose_name=_("customer"),
    )
    method = models.CharField(_("method"), max_length=50)
    amount = models.DecimalField(_("amount"), max_digits=12, decimal_places=2)
    reference_no = models.CharField(_("reference number"), max_length=100, blank=True)
    date = models.DateTimeField(_("date"), auto_now_add=True, db_index=True)

    class Meta:
        verbose_name = _("wallet log")
        verbose_name_plural = _("wallet logs")
        ordering = ["-date", "-pk"]

    def __str__(self):
        return f"+{self.amount} via {self.method}"

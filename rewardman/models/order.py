"""Order models: point-priced and wallet orders with their line items."""

import uuid as uuid_lib

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class OrderStatus(models.TextChoices):
    PENDING = "Pending", _("Pending")
    COMPLETED = "Completed", _("Completed")
    CANCELED = "Canceled", _("Canceled")


class PaymentMethod(models.TextChoices):
    POINTS = "points", _("Points")
    WALLET = "wallet", _("Wallet")


def generate_order_ref() -> str:
    return f"ORD-{timezone.now():%Y%m%d%H%M%S}-{uuid_lib.uuid4().hex[:6].upper()}"


class Order(models.Model):
    """
    Customer order awaiting staff confirmation.

    Lifecycle: Pending -> Completed | Canceled. Terminal states never change.
    """

    ref = models.CharField(
        _("reference"),
        max_length=40,
        unique=True,
        default=generate_order_ref,
        editable=False,
    )
    customer = models.ForeignKey(
        "rewardman.Customer",
        on_delete=models.CASCADE,
        related_name="orders",
        verbose_name=_("customer"),
    )

    subtotal = models.DecimalField(_("subtotal"), max_digits=12, decimal_places=2)
    payment_method = models.CharField(
        _("payment method"),
        max_length=20,
        choices=PaymentMethod.choices,
        default=PaymentMethod.POINTS,
    )
    status = models.CharField(
        _("status"),
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True,
    )
    instructions = models.TextField(_("instructions"), blank=True)

    # Feedback flags (set once, see services.notifications)
    feedback_given = models.BooleanField(_("feedback given"), default=False)
    feedback_skipped = models.BooleanField(_("feedback skipped"), default=False)

    placed_at = models.DateTimeField(_("placed at"), default=timezone.now, db_index=True)
    resolved_at = models.DateTimeField(_("resolved at"), null=True, blank=True)

    class Meta:
        verbose_name = _("order")
        verbose_name_plural = _("orders")
        ordering = ["-placed_at"]
        indexes = [
            models.Index(fields=["customer", "status"], name="rm_order_customer_status_idx"),
        ]

    def __str__(self):
        return f"{self.ref} [{self.status}]"

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    @property
    def feedback_resolved(self) -> bool:
        return self.feedback_given or self.feedback_skipped


class OrderItem(models.Model):
    """Snapshot of a catalog item at order time."""

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
        verbose_name=_("order"),
    )
    menu_item = models.ForeignKey(
        "rewardman.MenuItem",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name=_("menu item"),
    )
    name = models.CharField(_("name"), max_length=200)
    category = models.CharField(_("category"), max_length=100, blank=True)
    price = models.DecimalField(_("price"), max_digits=10, decimal_places=2)
    qty = models.PositiveIntegerField(_("quantity"), default=1)

    class Meta:
        verbose_name = _("order item")
        verbose_name_plural = _("order items")

    def __str__(self):
        return f"{self.name} x {self.qty}"

    @property
    def line_total(self):
        return self.price * self.qty

"""Notification, assistance and feedback models."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class NotificationType(models.TextChoices):
    NEW_FEEDBACK = "NewFeedback", _("New feedback")
    ORDER = "Order", _("Order")
    WALLET = "Wallet", _("Wallet")
    PROMOTION = "Promotion", _("Promotion")
    TIER = "Tier", _("Tier")
    SYSTEM = "System", _("System")


class Notification(models.Model):
    """Message shown in the customer's notification inbox."""

    customer = models.ForeignKey(
        "rewardman.Customer",
        on_delete=models.CASCADE,
        related_name="notifications",
        verbose_name=_("customer"),
    )
    notification_type = models.CharField(
        _("type"),
        max_length=20,
        choices=NotificationType.choices,
        default=NotificationType.SYSTEM,
    )
    title = models.CharField(_("title"), max_length=200)
    message = models.TextField(_("message"), blank=True)
    is_read = models.BooleanField(_("read"), default=False)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True, db_index=True)

    class Meta:
        verbose_name = _("notification")
        verbose_name_plural = _("notifications")
        ordering = ["-created_at", "-pk"]
        indexes = [
            models.Index(fields=["customer", "-created_at"], name="rm_notif_customer_date_idx"),
        ]

    def __str__(self):
        return f"[{self.notification_type}] {self.title}"


class AssistanceMessage(models.Model):
    """Free-text message from a customer to staff."""

    customer = models.ForeignKey(
        "rewardman.Customer",
        on_delete=models.CASCADE,
        related_name="assistance_messages",
        verbose_name=_("customer"),
    )
    message_type = models.CharField(_("type"), max_length=20, default=NotificationType.NEW_FEEDBACK)
    message = models.TextField(_("message"))
    is_read = models.BooleanField(_("read"), default=False)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)

    class Meta:
        verbose_name = _("assistance message")
        verbose_name_plural = _("assistance messages")
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.customer_id}: {self.message[:40]}"


class OrderFeedback(models.Model):
    """Star rating left by the customer for a completed order."""

    order = models.OneToOneField(
        "rewardman.Order",
        on_delete=models.CASCADE,
        related_name="feedback",
        verbose_name=_("order"),
    )
    customer = models.ForeignKey(
        "rewardman.Customer",
        on_delete=models.CASCADE,
        related_name="order_feedbacks",
        verbose_name=_("customer"),
    )
    rating = models.PositiveSmallIntegerField(_("rating"))
    comment = models.TextField(_("comment"), blank=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)

    class Meta:
        verbose_name = _("order feedback")
        verbose_name_plural = _("order feedback")
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.order_id}: {self.rating}*"

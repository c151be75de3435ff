"""Notification service - customer inbox, assistance messages and order feedback."""

import logging

from django.db import transaction

from rewardman.exceptions import RewardmanError
from rewardman.models import (
    AssistanceMessage,
    Notification,
    NotificationType,
    Order,
    OrderFeedback,
    OrderStatus,
)
from rewardman.services import customer as customer_service

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def notify(
    email: str,
    title: str,
    message: str = "",
    notification_type: str = NotificationType.SYSTEM,
    is_read: bool = False,
) -> Notification:
    """Add a notification to the customer's inbox."""
    cust = customer_service.require(email)
    return Notification.objects.create(
        customer=cust,
        notification_type=notification_type,
        title=title,
        message=message,
        is_read=is_read,
    )


def list_notifications(email: str, unread_only: bool = False) -> list[Notification]:
    """Customer inbox, newest first."""
    qs = Notification.objects.filter(customer__email__iexact=(email or "").strip())
    if unread_only:
        qs = qs.filter(is_read=False)
    return list(qs)


def mark_read(notification_id) -> bool:
    """Mark a notification read. Returns False if it does not exist."""
    updated = Notification.objects.filter(pk=notification_id).update(is_read=True)
    return bool(updated)


def send_assistance_message(email: str, message: str) -> AssistanceMessage:
    """
    Send a free-text message to staff.

    Also drops a read copy in the customer's own inbox.

    Raises:
        RewardmanError: EMPTY_MESSAGE or CUSTOMER_NOT_FOUND
    """
    message = (message or "").strip()
    if not message:
        raise RewardmanError("EMPTY_MESSAGE")

    cust = customer_service.require(email)

    with transaction.atomic():
        msg = AssistanceMessage.objects.create(
            customer=cust,
            message_type=NotificationType.NEW_FEEDBACK,
            message=message,
        )
        Notification.objects.create(
            customer=cust,
            notification_type=NotificationType.NEW_FEEDBACK,
            title="You sent a message",
            message=message,
            is_read=True,
        )

    return msg


def _locked_order_for_feedback(order_ref: str) -> Order:
    try:
        order = Order.objects.select_for_update().get(ref=order_ref)
    except Order.DoesNotExist:
        raise RewardmanError("ORDER_NOT_FOUND", ref=order_ref)
    if order.feedback_resolved:
        raise RewardmanError("FEEDBACK_ALREADY_RESOLVED", ref=order_ref)
    return order


def submit_order_feedback(order_ref: str, rating: int, comment: str = "") -> OrderFeedback:
    """
    Rate an order (1-5 stars).

    Raises:
        RewardmanError: INVALID_RATING, ORDER_NOT_FOUND or
            FEEDBACK_ALREADY_RESOLVED
    """
    if not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
        raise RewardmanError("INVALID_RATING", rating=rating)

    with transaction.atomic():
        order = _locked_order_for_feedback(order_ref)
        feedback = OrderFeedback.objects.create(
            order=order,
            customer_id=order.customer_id,
            rating=rating,
            comment=(comment or "").strip(),
        )
        order.feedback_given = True
        order.save(update_fields=["feedback_given"])

    logger.info("Feedback %s* for order %s", rating, order_ref)
    return feedback


def skip_order_feedback(order_ref: str) -> Order:
    """
    Dismiss the feedback prompt for an order.

    Raises:
        RewardmanError: ORDER_NOT_FOUND or FEEDBACK_ALREADY_RESOLVED
    """
    with transaction.atomic():
        order = _locked_order_for_feedback(order_ref)
        order.feedback_skipped = True
        order.save(update_fields=["feedback_skipped"])
    return order


def pending_feedback(email: str) -> list[Order]:
    """Completed orders still waiting for a rating or a skip."""
    return list(
        Order.objects.filter(
            customer__email__iexact=(email or "").strip(),
            status=OrderStatus.COMPLETED,
            feedback_given=False,
            feedback_skipped=False,
        )
    )

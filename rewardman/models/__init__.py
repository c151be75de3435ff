"""Rewardman models."""

from rewardman.models.customer import Customer, CustomerStatus
from rewardman.models.menu import MenuItem, UNCATEGORIZED
from rewardman.models.order import Order, OrderItem, OrderStatus, PaymentMethod
from rewardman.models.transaction import Transaction
from rewardman.models.wallet import WalletLog, WalletRequest, WalletRequestStatus
from rewardman.models.promotion import ClaimedPromotion, Promotion
from rewardman.models.notification import (
    AssistanceMessage,
    Notification,
    NotificationType,
    OrderFeedback,
)

__all__ = [
    # Customer
    "Customer",
    "CustomerStatus",
    # Catalog and orders
    "MenuItem",
    "UNCATEGORIZED",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PaymentMethod",
    # Ledger
    "Transaction",
    "WalletRequest",
    "WalletRequestStatus",
    "WalletLog",
    # Promotions
    "Promotion",
    "ClaimedPromotion",
    # Inbox
    "Notification",
    "NotificationType",
    "AssistanceMessage",
    "OrderFeedback",
]

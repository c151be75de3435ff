"""Order service - rewards orders, wallet purchases and staff resolution.

Order lifecycle (G5): Pending -> Completed | Canceled.
All balance mutations lock the customer row with select_for_update().
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal

from django.db import transaction
from django.utils import timezone

from rewardman.conf import rewardman_settings
from rewardman.exceptions import RewardmanError
from rewardman.gates import GateError, Gates
from rewardman.models import (
    Customer,
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    Transaction,
)
from rewardman.services import catalog
from rewardman.services import customer as customer_service
from rewardman.signals import order_placed, order_status_changed

logger = logging.getLogger(__name__)

DEFAULT_INSTRUCTIONS = "No instructions provided"


@dataclass
class WalletPurchase:
    """Wallet purchase result."""

    order: Order
    points_earned: int
    wallet_balance: Decimal
    points_balance: int


def _locked_customer(email: str) -> Customer:
    try:
        return Customer.objects.select_for_update().get(email__iexact=(email or "").strip())
    except Customer.DoesNotExist:
        raise RewardmanError("CUSTOMER_NOT_FOUND", email=email)


def _orderable_item(item_id, qty: int):
    if qty < 1:
        raise RewardmanError("INVALID_AMOUNT", message="Quantity must be at least 1", qty=qty)
    item = catalog.get_item(item_id)
    if item is None:
        raise RewardmanError("MENU_ITEM_NOT_FOUND", item_id=item_id)
    if not item.is_available:
        raise RewardmanError("MENU_ITEM_UNAVAILABLE", item_id=item_id, name=item.name)
    return item


def _create_order(customer, item, qty, payment_method, instructions) -> Order:
    order = Order.objects.create(
        customer=customer,
        subtotal=item.price * qty,
        payment_method=payment_method,
        instructions=(instructions or "").strip() or DEFAULT_INSTRUCTIONS,
    )
    OrderItem.objects.create(
        order=order,
        menu_item=item,
        name=item.name,
        category=item.category,
        price=item.price,
        qty=qty,
    )
    return order


def place_order(email: str, item_id, qty: int = 1, instructions: str = "") -> Order:
    """
    Place a points-priced order, pending staff confirmation.

    Points are deducted when staff complete the order.

    Raises:
        RewardmanError: CUSTOMER_NOT_FOUND, MENU_ITEM_NOT_FOUND,
            MENU_ITEM_UNAVAILABLE or INVALID_AMOUNT
    """
    cust = customer_service.require(email)
    item = _orderable_item(item_id, qty)

    with transaction.atomic():
        order = _create_order(cust, item, qty, PaymentMethod.POINTS, instructions)

    logger.info("Order %s placed by %s (%s pts)", order.ref, cust.email, order.subtotal)
    order_placed.send(sender=Order, order=order)
    return order


def purchase_with_wallet(email: str, item_id, qty: int = 1, instructions: str = "") -> WalletPurchase:
    """
    Buy an item with the wallet balance.

    Deducts the price from the wallet, credits one reward point per
    WALLET_POINTS_DIVISOR currency units, and records the purchase in the
    ledger.

    Raises:
        RewardmanError: INSUFFICIENT_WALLET plus the place_order() errors
    """
    item = _orderable_item(item_id, qty)
    divisor = rewardman_settings.WALLET_POINTS_DIVISOR

    with transaction.atomic():
        cust = _locked_customer(email)
        subtotal = item.price * qty

        try:
            Gates.sufficient_balance(cust.wallet, subtotal, balance="wallet")
        except GateError as e:
            raise RewardmanError("INSUFFICIENT_WALLET", **e.details) from e

        reward = int(subtotal // divisor) if divisor > 0 else 0

        cust.wallet -= subtotal
        cust.points += reward
        cust.save(update_fields=["wallet", "points", "updated_at"])

        order = _create_order(cust, item, qty, PaymentMethod.WALLET, instructions)
        Transaction.objects.create(
            customer=cust,
            order_ref=order.ref,
            payment_method="Wallet",
            transaction_type="Purchase",
            amount=subtotal,
            points_earned=reward,
        )
        customer_service.refresh_tier(cust)

    logger.info("Wallet purchase %s by %s: -%s, +%s pts", order.ref, cust.email, subtotal, reward)
    order_placed.send(sender=Order, order=order)

    return WalletPurchase(
        order=order,
        points_earned=reward,
        wallet_balance=cust.wallet,
        points_balance=cust.points,
    )


def list_orders(email: str, status: str | None = None) -> list[Order]:
    """Customer orders (newest first), optionally filtered by status."""
    qs = Order.objects.filter(customer__email__iexact=(email or "").strip()).prefetch_related("items")
    if status:
        qs = qs.filter(status=status)
    return list(qs)


def get_order(ref: str) -> Order | None:
    """Get order by reference."""
    try:
        return Order.objects.select_related("customer").prefetch_related("items").get(ref=ref)
    except Order.DoesNotExist:
        return None


def _locked_order(ref: str) -> Order:
    try:
        return Order.objects.select_for_update().select_related("customer").get(ref=ref)
    except Order.DoesNotExist:
        raise RewardmanError("ORDER_NOT_FOUND", ref=ref)


def _transition(order: Order, target: str) -> str:
    try:
        Gates.order_transition(order.status, target)
    except GateError as e:
        logger.warning("Rejected order transition %s: %s", order.ref, e.message)
        raise RewardmanError("INVALID_ORDER_TRANSITION", **e.details) from e

    old_status = order.status
    order.status = target
    order.resolved_at = timezone.now()
    order.save(update_fields=["status", "resolved_at"])
    return old_status


def complete_order(ref: str, created_by: str = "") -> Order:
    """
    Staff confirmation: complete a pending order.

    Points orders deduct the subtotal from the points balance and append
    a redemption to the ledger. Wallet orders were paid at purchase time.

    Raises:
        RewardmanError: ORDER_NOT_FOUND, INVALID_ORDER_TRANSITION or
            INSUFFICIENT_POINTS
    """
    with transaction.atomic():
        order = _locked_order(ref)
        cust = Customer.objects.select_for_update().get(pk=order.customer_id)

        if order.payment_method == PaymentMethod.POINTS and order.is_pending:
            cost = int(order.subtotal.to_integral_value(rounding=ROUND_CEILING))
            try:
                Gates.sufficient_balance(cust.points, cost, balance="points")
            except GateError as e:
                raise RewardmanError("INSUFFICIENT_POINTS", **e.details) from e

        old_status = _transition(order, OrderStatus.COMPLETED)

        if order.payment_method == PaymentMethod.POINTS:
            cust.points -= cost
            cust.save(update_fields=["points", "updated_at"])
            Transaction.objects.create(
                customer=cust,
                order_ref=order.ref,
                payment_method="Points",
                transaction_type="Points Redemption",
                amount=Decimal(cost),
                points_earned=0,
                created_by=created_by,
            )

    logger.info("Order %s completed", order.ref)
    order_status_changed.send(
        sender=Order, order=order, old_status=old_status, new_status=order.status
    )
    return order


def cancel_order(ref: str) -> Order:
    """
    Staff cancellation of a pending order.

    No balance is touched: points orders were never charged, and wallet
    refunds are handled by staff as a wallet top-up.

    Raises:
        RewardmanError: ORDER_NOT_FOUND or INVALID_ORDER_TRANSITION
    """
    with transaction.atomic():
        order = _locked_order(ref)
        old_status = _transition(order, OrderStatus.CANCELED)

    logger.info("Order %s canceled", order.ref)
    order_status_changed.send(
        sender=Order, order=order, old_status=old_status, new_status=order.status
    )
    return order

"""History service - append-only transaction ledger.

record_transaction() is the staff-side accrual (scan of the customer's
loyalty QR). Reads never modify the ledger.
"""

import logging
from decimal import Decimal

from django.db import transaction

from rewardman.conf import rewardman_settings
from rewardman.exceptions import RewardmanError
from rewardman.models import Customer, Transaction
from rewardman.services import customer as customer_service

logger = logging.getLogger(__name__)


# Filter name -> predicate over the lowercased payment method
METHOD_FILTERS = {
    "All": lambda method: True,
    "Points": lambda method: "points" in method,
    "Wallet": lambda method: "wallet" in method,
    "Cash": lambda method: "cash" in method or "counter" in method,
    "E-Wallet": lambda method: "e-wallet" in method or "ewallet" in method,
    "Mix-Payment": lambda method: (
        "points + wallet" in method
        or "points + cash" in method
        or "mix" in method
    ),
}


def record_transaction(
    email: str,
    amount,
    payment_method: str,
    points_earned: int = 0,
    transaction_type: str = "Purchase",
    order_ref: str = "",
    created_by: str = "",
) -> Transaction:
    """
    Append a transaction and credit the points it earned.

    Args:
        email: Customer email
        amount: Transaction amount (currency or points, per payment method)
        payment_method: Free-text method (Cash, Wallet, Points + Cash, ...)
        points_earned: Points credited to the balance and lifetime metric
        transaction_type: Purchase, Redemption, ...
        order_ref: Related order reference
        created_by: Staff member who recorded it

    Returns:
        Created Transaction

    Raises:
        RewardmanError: CUSTOMER_NOT_FOUND or INVALID_AMOUNT
    """
    if points_earned < 0:
        raise RewardmanError(
            "INVALID_AMOUNT", message="Points earned cannot be negative", points_earned=points_earned
        )

    with transaction.atomic():
        try:
            cust = Customer.objects.select_for_update().get(email__iexact=email.strip())
        except Customer.DoesNotExist:
            raise RewardmanError("CUSTOMER_NOT_FOUND", email=email)

        tx = Transaction.objects.create(
            customer=cust,
            order_ref=order_ref,
            payment_method=payment_method,
            transaction_type=transaction_type,
            amount=Decimal(str(amount)),
            points_earned=points_earned,
            created_by=created_by,
        )

        if points_earned:
            cust.points += points_earned
            cust.save(update_fields=["points", "updated_at"])

        customer_service.refresh_tier(cust)

    logger.info("Recorded %s for %s (+%s pts)", transaction_type, cust.email, points_earned)
    return tx


def list_transactions(
    email: str,
    method_filter: str = "All",
    limit: int | None = None,
    newest_first: bool = True,
) -> list[Transaction]:
    """
    Customer transaction history.

    Args:
        email: Customer email
        method_filter: One of METHOD_FILTERS
        limit: Max rows (defaults to REWARDMAN["HISTORY_LIMIT"])
        newest_first: Sort by date descending (False for oldest first)

    Raises:
        ValueError: If method_filter is unknown
    """
    if method_filter not in METHOD_FILTERS:
        raise ValueError(f"Unknown method filter: {method_filter}")
    if limit is None:
        limit = rewardman_settings.HISTORY_LIMIT

    predicate = METHOD_FILTERS[method_filter]
    qs = Transaction.objects.filter(customer__email__iexact=email.strip())
    if not newest_first:
        qs = qs.order_by("date", "pk")

    result = []
    for tx in qs:
        if predicate((tx.payment_method or "").lower()):
            result.append(tx)
            if len(result) >= limit:
                break
    return result


def get_transaction(email: str, pk) -> Transaction | None:
    """Get a single transaction owned by the customer."""
    try:
        return Transaction.objects.get(pk=pk, customer__email__iexact=email.strip())
    except (Transaction.DoesNotExist, ValueError):
        return None


def signed_amount(tx: Transaction) -> str:
    """Display amount: "- N pts" for point spends, "+ N pts" for point earns, "- ₱N" for money spent."""
    method = (tx.payment_method or "").lower()
    amount = tx.amount.normalize() if tx.amount == tx.amount.to_integral() else tx.amount
    if "points" in method:
        sign = "- " if "points" in (tx.transaction_type or "").lower() else "+ "
        return f"{sign}{amount:f} pts"
    return f"- ₱{amount:f}"

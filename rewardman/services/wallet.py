"""Wallet service - top-up requests verified by staff."""

import logging
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from rewardman.exceptions import RewardmanError
from rewardman.models import Customer, WalletLog, WalletRequest, WalletRequestStatus
from rewardman.services import customer as customer_service
from rewardman.signals import wallet_loaded

logger = logging.getLogger(__name__)


def request_load(email: str, reference_no: str) -> WalletRequest:
    """
    Submit a wallet top-up request for staff verification.

    Args:
        email: Customer email
        reference_no: Payment reference number from the e-wallet receipt

    Raises:
        RewardmanError: MISSING_FIELDS or CUSTOMER_NOT_FOUND
    """
    reference_no = (reference_no or "").strip()
    if not reference_no:
        raise RewardmanError(
            "MISSING_FIELDS", message="Please enter your Reference Number", missing=["reference_no"]
        )

    cust = customer_service.require(email)
    req = WalletRequest.objects.create(customer=cust, reference_no=reference_no)
    logger.info("Wallet load request %s submitted by %s", req.pk, cust.email)
    return req


def _locked_pending_request(request_id) -> WalletRequest:
    try:
        req = WalletRequest.objects.select_for_update().get(pk=request_id)
    except WalletRequest.DoesNotExist:
        raise RewardmanError("WALLET_REQUEST_NOT_FOUND", request_id=request_id)
    if req.status != WalletRequestStatus.PENDING:
        raise RewardmanError("WALLET_REQUEST_PROCESSED", request_id=request_id, status=req.status)
    return req


def approve_request(request_id, amount, method: str = "GCash") -> WalletRequest:
    """
    Staff approval: credit the wallet and log the top-up.

    Raises:
        RewardmanError: INVALID_AMOUNT, WALLET_REQUEST_NOT_FOUND or
            WALLET_REQUEST_PROCESSED
    """
    amount = Decimal(str(amount))
    if amount <= 0:
        raise RewardmanError("INVALID_AMOUNT", amount=str(amount))

    with transaction.atomic():
        req = _locked_pending_request(request_id)
        cust = Customer.objects.select_for_update().get(pk=req.customer_id)

        cust.wallet += amount
        cust.save(update_fields=["wallet", "updated_at"])

        WalletLog.objects.create(
            customer=cust,
            method=method,
            amount=amount,
            reference_no=req.reference_no,
        )

        req.amount = amount
        req.status = WalletRequestStatus.APPROVED
        req.processed_at = timezone.now()
        req.save(update_fields=["amount", "status", "processed_at"])

    logger.info("Wallet request %s approved: +%s for %s", req.pk, amount, cust.email)
    wallet_loaded.send(sender=WalletRequest, request=req, amount=amount)
    return req


def reject_request(request_id) -> WalletRequest:
    """Staff rejection of a pending request."""
    with transaction.atomic():
        req = _locked_pending_request(request_id)
        req.status = WalletRequestStatus.REJECTED
        req.processed_at = timezone.now()
        req.save(update_fields=["status", "processed_at"])

    logger.info("Wallet request %s rejected", req.pk)
    return req


def list_requests(email: str, status: str | None = None) -> list[WalletRequest]:
    qs = WalletRequest.objects.filter(customer__email__iexact=(email or "").strip())
    if status:
        qs = qs.filter(status=status)
    return list(qs)


def list_logs(email: str) -> list[WalletLog]:
    """Wallet top-up log, newest first."""
    return list(WalletLog.objects.filter(customer__email__iexact=(email or "").strip()))

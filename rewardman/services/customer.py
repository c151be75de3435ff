"""Customer service - registration, lookup and tier bookkeeping.

Every read through get() recomputes the cached tier from lifetime points
earned and overwrites it when it differs. Two sessions recomputing from
different data race on a last-write-wins basis; no conflict detection.
"""

import logging
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.db.models import Q, Sum
from django.utils.module_loading import import_string

from rewardman.conf import rewardman_settings
from rewardman.exceptions import RewardmanError
from rewardman.gates import GateError, Gates
from rewardman.models import Customer, CustomerStatus
from rewardman.protocols.customer import CustomerProfile
from rewardman.protocols.verification import VerificationBackend
from rewardman.signals import customer_registered, tier_changed
from rewardman.tiers import TierInfo, default_schedule

logger = logging.getLogger(__name__)


def _get_verification_backend() -> VerificationBackend | None:
    """Get configured VerificationBackend."""
    backend_path = rewardman_settings.VERIFICATION_BACKEND
    if backend_path:
        backend_class = import_string(backend_path)
        return backend_class()
    return None


def _fetch(email: str) -> Customer | None:
    try:
        return Customer.objects.get(email__iexact=(email or "").strip())
    except Customer.DoesNotExist:
        return None


def require(email: str) -> Customer:
    """Get customer (with tier refreshed) or raise CUSTOMER_NOT_FOUND."""
    cust = get(email)
    if cust is None:
        raise RewardmanError("CUSTOMER_NOT_FOUND", email=email)
    return cust


def get(email: str) -> Customer | None:
    """Get customer by email and refresh the cached tier."""
    cust = _fetch(email)
    if cust is not None:
        refresh_tier(cust)
    return cust


def get_by_mobile(mobile: str) -> Customer | None:
    """Get customer by mobile number (exact match)."""
    return Customer.objects.filter(mobile=(mobile or "").strip()).first()


def mobile_exists(mobile: str) -> bool:
    return not Gates.check_mobile_uniqueness(mobile)


def lifetime_points(customer: Customer) -> int:
    """Sum of points earned over all transactions (the tier metric)."""
    total = customer.transactions.aggregate(total=Sum("points_earned"))["total"]
    return total or 0


def tier_status(customer: Customer) -> TierInfo:
    """Tier info for the customer's lifetime points."""
    return default_schedule().evaluate(lifetime_points(customer))


def refresh_tier(customer: Customer) -> str:
    """
    Recompute and persist the customer's tier.

    Overwrites the stored tier when it differs and emits tier_changed.

    Returns:
        Current tier name
    """
    new_tier = tier_status(customer).tier
    old_tier = customer.tier

    if old_tier != new_tier:
        customer.tier = new_tier
        customer.save(update_fields=["tier", "updated_at"])
        logger.info("Tier updated for %s: %s -> %s", customer.email, old_tier, new_tier)
        tier_changed.send(
            sender=Customer,
            customer=customer,
            old_tier=old_tier,
            new_tier=new_tier,
        )

    return new_tier


def register(
    full_name: str,
    email: str,
    mobile: str,
    password: str,
    confirm_password: str,
    gender: str = "",
) -> Customer:
    """
    Register a new loyalty customer.

    The password is only checked against its confirmation; credentials
    belong to the external identity provider.

    Raises:
        RewardmanError: MISSING_FIELDS, PASSWORD_MISMATCH, INVALID_MOBILE,
            EMAIL_ALREADY_REGISTERED or MOBILE_ALREADY_REGISTERED
    """
    try:
        Gates.registration_fields(
            full_name=full_name,
            email=email,
            mobile=mobile,
            password=password,
            confirm_password=confirm_password,
        )
    except GateError as e:
        code = "PASSWORD_MISMATCH" if "mismatch" in e.details else "MISSING_FIELDS"
        raise RewardmanError(code, **e.details) from e

    email = email.lower().strip()
    mobile = mobile.strip()

    if not Gates.check_mobile_format(mobile):
        raise RewardmanError("INVALID_MOBILE", mobile=mobile)
    if not Gates.check_email_uniqueness(email):
        raise RewardmanError("EMAIL_ALREADY_REGISTERED", email=email)
    if not Gates.check_mobile_uniqueness(mobile):
        raise RewardmanError("MOBILE_ALREADY_REGISTERED", mobile=mobile)

    try:
        with transaction.atomic():
            cust = Customer.objects.create(
                email=email,
                full_name=full_name.strip(),
                mobile=mobile,
                gender=gender,
                points=0,
                wallet=Decimal("0.00"),
                status=CustomerStatus.INACTIVE,
                tier=default_schedule().lowest,
            )
            # Backend failure rolls back the new row
            backend = _get_verification_backend()
            if backend is not None:
                backend.send_verification(cust)
    except IntegrityError as e:
        if Customer.objects.filter(email=email).exists():
            code = "EMAIL_ALREADY_REGISTERED"
        else:
            code = "MOBILE_ALREADY_REGISTERED"
        logger.warning("Concurrent registration for %s / %s: %s", email, mobile, code)
        raise RewardmanError(code, email=email, mobile=mobile) from e

    if backend is None:
        logger.warning("No VERIFICATION_BACKEND configured; %s not asked to verify", email)

    customer_registered.send(sender=Customer, customer=cust)

    return cust


def _set_status(email: str, status: str) -> Customer:
    cust = _fetch(email)
    if cust is None:
        raise RewardmanError("CUSTOMER_NOT_FOUND", email=email)
    if cust.status != status:
        cust.status = status
        cust.save(update_fields=["status", "updated_at"])
    return cust


def activate(email: str) -> Customer:
    """Mark customer Active (loyalty card on screen)."""
    return _set_status(email, CustomerStatus.ACTIVE)


def deactivate(email: str) -> Customer:
    """Mark customer Inactive."""
    return _set_status(email, CustomerStatus.INACTIVE)


def profile(email: str) -> CustomerProfile:
    """Build the customer card (balances, tier and tier progress)."""
    cust = require(email)
    lifetime = lifetime_points(cust)
    info = default_schedule().evaluate(lifetime)

    return CustomerProfile(
        email=cust.email,
        full_name=cust.full_name,
        mobile=cust.mobile,
        status=cust.status,
        points=cust.points,
        wallet=cust.wallet,
        tier=info.tier,
        next_tier=info.next_tier,
        points_to_next_tier=info.remaining,
        tier_progress_percent=info.progress_percent,
        lifetime_points=lifetime,
        favorite_category=cust.favorite_category or None,
    )


def search(query: str, limit: int = 20) -> list[Customer]:
    """Search customers by name, email or mobile."""
    qs = Customer.objects.all()
    if query:
        qs = qs.filter(
            Q(full_name__icontains=query)
            | Q(email__icontains=query)
            | Q(mobile__icontains=query)
        )
    return list(qs[:limit])

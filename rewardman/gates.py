"""
Rewardman Gates - Validation rules.

G1: RegistrationFields - Required fields present and passwords match
G2: MobileFormat - Mobile matches the configured local pattern
G3: EmailUniqueness - Email cannot belong to another Customer
G4: MobileUniqueness - Mobile cannot belong to another Customer
G5: OrderTransition - Only Pending orders move, and only to Completed/Canceled
G6: PromotionClaimable - Promotion is not expired and targets the customer's tier
G7: SufficientBalance - Points/wallet balance covers the requested amount
"""

import re
from dataclasses import dataclass


class GateError(Exception):
    """Gate validation error."""

    def __init__(self, gate_name: str, message: str, details: dict | None = None):
        self.gate_name = gate_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{gate_name}] {message}")


@dataclass
class GateResult:
    """Result of a gate check."""

    passed: bool
    gate_name: str
    message: str = ""


# =============================================================================
# Gates
# =============================================================================


class Gates:
    """Rewardman validation gates."""

    # =========================================================================
    # G1: Registration Fields
    # =========================================================================

    REQUIRED_REGISTRATION_FIELDS = ("full_name", "email", "mobile", "password", "confirm_password")

    @classmethod
    def registration_fields(cls, **fields) -> GateResult:
        """
        G1: All required fields are filled and passwords match.

        Args:
            **fields: Registration form values

        Raises:
            GateError: If a field is blank or passwords differ
        """
        missing = [
            name for name in cls.REQUIRED_REGISTRATION_FIELDS
            if not str(fields.get(name) or "").strip()
        ]
        if missing:
            raise GateError(
                "G1_RegistrationFields",
                "Please fill all fields.",
                {"missing": missing},
            )

        if fields["password"] != fields["confirm_password"]:
            raise GateError(
                "G1_RegistrationFields",
                "Passwords do not match.",
                {"mismatch": ["password", "confirm_password"]},
            )

        return GateResult(True, "G1_RegistrationFields")

    @classmethod
    def check_registration_fields(cls, **fields) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.registration_fields(**fields)
            return True
        except GateError:
            return False

    # =========================================================================
    # G2: Mobile Format
    # =========================================================================

    @classmethod
    def mobile_format(cls, mobile: str) -> GateResult:
        """
        G2: Mobile matches REWARDMAN["MOBILE_PATTERN"].

        Raises:
            GateError: If mobile does not match
        """
        from rewardman.conf import rewardman_settings

        pattern = rewardman_settings.MOBILE_PATTERN
        if not re.match(pattern, (mobile or "").strip()):
            raise GateError(
                "G2_MobileFormat",
                f"Invalid mobile number: {mobile!r}",
                {"pattern": pattern},
            )

        return GateResult(True, "G2_MobileFormat")

    @classmethod
    def check_mobile_format(cls, mobile: str) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.mobile_format(mobile)
            return True
        except GateError:
            return False

    # =========================================================================
    # G3: Email Uniqueness
    # =========================================================================

    @classmethod
    def email_uniqueness(cls, email: str) -> GateResult:
        """
        G3: Email cannot already be registered.

        Raises:
            GateError: If a customer with this email exists
        """
        from rewardman.models import Customer

        if Customer.objects.filter(email__iexact=(email or "").strip()).exists():
            raise GateError(
                "G3_EmailUniqueness",
                "Email already registered.",
                {"email": email},
            )

        return GateResult(True, "G3_EmailUniqueness")

    @classmethod
    def check_email_uniqueness(cls, email: str) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.email_uniqueness(email)
            return True
        except GateError:
            return False

    # =========================================================================
    # G4: Mobile Uniqueness
    # =========================================================================

    @classmethod
    def mobile_uniqueness(cls, mobile: str) -> GateResult:
        """
        G4: Mobile cannot already be registered.

        Raises:
            GateError: If a customer with this mobile exists
        """
        from rewardman.models import Customer

        if Customer.objects.filter(mobile=(mobile or "").strip()).exists():
            raise GateError(
                "G4_MobileUniqueness",
                "Mobile number already registered.",
                {"mobile": mobile},
            )

        return GateResult(True, "G4_MobileUniqueness")

    @classmethod
    def check_mobile_uniqueness(cls, mobile: str) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.mobile_uniqueness(mobile)
            return True
        except GateError:
            return False

    # =========================================================================
    # G5: Order Transition
    # =========================================================================

    ALLOWED_ORDER_TRANSITIONS = {
        "Pending": {"Completed", "Canceled"},
    }

    @classmethod
    def order_transition(cls, current: str, target: str) -> GateResult:
        """
        G5: Order status transition must be allowed.

        Args:
            current: Current order status
            target: Requested status

        Raises:
            GateError: If the transition is not allowed
        """
        allowed = cls.ALLOWED_ORDER_TRANSITIONS.get(current, set())
        if target not in allowed:
            raise GateError(
                "G5_OrderTransition",
                f"Cannot move order from {current} to {target}.",
                {"current": current, "target": target, "allowed": sorted(allowed)},
            )

        return GateResult(True, "G5_OrderTransition")

    @classmethod
    def check_order_transition(cls, current: str, target: str) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.order_transition(current, target)
            return True
        except GateError:
            return False

    # =========================================================================
    # G6: Promotion Claimable
    # =========================================================================

    @classmethod
    def promotion_claimable(cls, promotion, tier: str, now=None) -> GateResult:
        """
        G6: Promotion is still running and targets the tier.

        Args:
            promotion: Promotion instance
            tier: Customer's current tier
            now: Reference time (defaults to timezone.now())

        Raises:
            GateError: If expired or not applicable to the tier
        """
        if promotion.is_expired(now):
            raise GateError(
                "G6_PromotionClaimable",
                "Promotion expired.",
                {"reason": "expired", "end_date": promotion.end_date},
            )

        if not promotion.applies_to_tier(tier):
            raise GateError(
                "G6_PromotionClaimable",
                f"Promotion not available for tier {tier}.",
                {"reason": "tier", "tier": tier, "applicable_tiers": promotion.applicable_tiers},
            )

        return GateResult(True, "G6_PromotionClaimable")

    @classmethod
    def check_promotion_claimable(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.promotion_claimable(*args, **kwargs)
            return True
        except GateError:
            return False

    # =========================================================================
    # G7: Sufficient Balance
    # =========================================================================

    @classmethod
    def sufficient_balance(cls, available, requested, balance: str = "points") -> GateResult:
        """
        G7: Balance covers the requested amount.

        Args:
            available: Current balance
            requested: Amount to deduct
            balance: Balance name (points, wallet) for the error details

        Raises:
            GateError: If requested exceeds available
        """
        if requested > available:
            raise GateError(
                "G7_SufficientBalance",
                f"Insufficient {balance} balance.",
                {"balance": balance, "available": available, "requested": requested},
            )

        return GateResult(True, "G7_SufficientBalance")

    @classmethod
    def check_sufficient_balance(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.sufficient_balance(*args, **kwargs)
            return True
        except GateError:
            return False

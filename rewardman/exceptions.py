"""Rewardman exceptions."""


class BaseError(Exception):
    """
    Structured exception with a stable code.

    Subclasses provide ``_default_messages`` keyed by code. Extra keyword
    arguments are kept in ``data`` for logging and API responses.
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }


class RewardmanError(BaseError):
    """
    Structured exception for loyalty operations.

    Usage:
        try:
            orders.complete_order("ORD-1700000000000")
        except RewardmanError as e:
            if e.code == "INSUFFICIENT_POINTS":
                handle_short_balance(e.data["available"])
    """

    _default_messages = {
        "CUSTOMER_NOT_FOUND": "Customer not found",
        "EMAIL_ALREADY_REGISTERED": "Email already registered",
        "MOBILE_ALREADY_REGISTERED": "This mobile number is already registered",
        "INVALID_MOBILE": "Please enter a valid 11-digit mobile number starting with 09",
        "MISSING_FIELDS": "Please fill all fields",
        "PASSWORD_MISMATCH": "Passwords do not match",
        "MENU_ITEM_NOT_FOUND": "Menu item not found",
        "MENU_ITEM_UNAVAILABLE": "Menu item is not available",
        "ORDER_NOT_FOUND": "Order not found",
        "INVALID_ORDER_TRANSITION": "Order status cannot be changed",
        "INSUFFICIENT_POINTS": "Insufficient points balance",
        "INSUFFICIENT_WALLET": "Insufficient wallet balance",
        "INVALID_AMOUNT": "Amount must be positive",
        "PROMOTION_NOT_FOUND": "Promotion not found",
        "PROMOTION_EXPIRED": "This promo can no longer be claimed",
        "PROMOTION_NOT_ELIGIBLE": "Promotion is not available for your tier",
        "PROMOTION_ALREADY_USED": "Promotion was already used",
        "WALLET_REQUEST_NOT_FOUND": "Wallet load request not found",
        "WALLET_REQUEST_PROCESSED": "Wallet load request was already processed",
        "INVALID_RATING": "Please select at least 1 star",
        "EMPTY_MESSAGE": "Feedback cannot be empty",
        "FEEDBACK_ALREADY_RESOLVED": "Feedback for this order was already given or skipped",
    }

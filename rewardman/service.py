"""
Rewardman public API.

CORE (essential):
    RewardsService.get(email)          - Get customer (tier refreshed)
    RewardsService.register(...)       - Register customer
    RewardsService.tier_status(email)  - Tier and progress to next tier
    RewardsService.profile(email)      - Customer card

CONVENIENCE (helpers):
    RewardsService.menu(...)           - Browse the catalog
    RewardsService.place_order(...)    - Points order
    RewardsService.buy_with_wallet(...) - Wallet purchase
    RewardsService.promotions(email)   - Claimable promotions
    RewardsService.history(email, ...) - Transaction history
"""

from rewardman.exceptions import RewardmanError
from rewardman.models import ClaimedPromotion, Customer, MenuItem, Order, Promotion, Transaction
from rewardman.protocols.customer import CustomerProfile
from rewardman.services import catalog, history, orders, promotions, wallet
from rewardman.services import customer as customer_service
from rewardman.services.orders import WalletPurchase
from rewardman.tiers import TierInfo


class RewardsService:
    """
    Rewardman public API.

    Uses @classmethod for extensibility.

    CORE (essential):
        get(email)          - Get customer
        register(...)       - Register customer
        tier_status(email)  - Tier info
        profile(email)      - Customer card

    CONVENIENCE (helpers):
        menu(...), categories()
        place_order(...), buy_with_wallet(...), orders(...)
        request_wallet_load(...)
        promotions(email), claim_promotion(...)
        history(email, ...)
    """

    # ======================================================================
    # CORE API
    # ======================================================================

    @classmethod
    def get(cls, email: str) -> Customer | None:
        """
        Get customer by email.

        The cached tier is recomputed and persisted on every call.

        Args:
            email: Customer email

        Returns:
            Customer or None if not found
        """
        return customer_service.get(email)

    @classmethod
    def register(cls, **fields) -> Customer:
        """Register a customer (see services.customer.register)."""
        return customer_service.register(**fields)

    @classmethod
    def tier_status(cls, email: str) -> TierInfo:
        """
        Tier and progress for the customer's lifetime points.

        Raises:
            RewardmanError: CUSTOMER_NOT_FOUND
        """
        cust = customer_service.get(email)
        if cust is None:
            raise RewardmanError("CUSTOMER_NOT_FOUND", email=email)
        return customer_service.tier_status(cust)

    @classmethod
    def profile(cls, email: str) -> CustomerProfile:
        return customer_service.profile(email)

    # ======================================================================
    # CONVENIENCE API
    # ======================================================================

    @classmethod
    def menu(cls, category: str | None = None, search: str = "") -> list[MenuItem]:
        """Available menu items."""
        return catalog.list_menu(category=category, search=search, available_only=True)

    @classmethod
    def categories(cls) -> list[str]:
        return catalog.categories()

    @classmethod
    def place_order(cls, email: str, item_id, qty: int = 1, instructions: str = "") -> Order:
        return orders.place_order(email, item_id, qty=qty, instructions=instructions)

    @classmethod
    def buy_with_wallet(cls, email: str, item_id, qty: int = 1) -> WalletPurchase:
        return orders.purchase_with_wallet(email, item_id, qty=qty)

    @classmethod
    def orders(cls, email: str, status: str | None = None) -> list[Order]:
        return orders.list_orders(email, status=status)

    @classmethod
    def request_wallet_load(cls, email: str, reference_no: str):
        return wallet.request_load(email, reference_no)

    @classmethod
    def promotions(cls, email: str) -> list[Promotion]:
        return promotions.available_for(email)

    @classmethod
    def claim_promotion(cls, email: str, promotion_id) -> ClaimedPromotion:
        return promotions.claim(email, promotion_id)

    @classmethod
    def history(cls, email: str, method_filter: str = "All") -> list[Transaction]:
        return history.list_transactions(email, method_filter=method_filter)

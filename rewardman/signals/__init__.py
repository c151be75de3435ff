"""
Rewardman signals: public event API.

Emitted signals:
- customer_registered: Emitted by services.customer.register()
- tier_changed: Emitted by services.customer.refresh_tier()
- order_placed: Emitted by services.orders.place_order() and purchase_with_wallet()
- order_status_changed: Emitted by services.orders.complete_order()/cancel_order()
- wallet_loaded: Emitted by services.wallet.approve_request()
- promotion_claimed: Emitted by services.promotions.claim()
"""

from django.dispatch import Signal

# Customer signals
customer_registered = Signal()  # sender=Customer, customer=Customer
tier_changed = Signal()  # sender=Customer, customer, old_tier, new_tier

# Order signals
order_placed = Signal()  # sender=Order, order=Order
order_status_changed = Signal()  # sender=Order, order, old_status, new_status

# Wallet / promotion signals
wallet_loaded = Signal()  # sender=WalletRequest, request, amount
promotion_claimed = Signal()  # sender=ClaimedPromotion, claim

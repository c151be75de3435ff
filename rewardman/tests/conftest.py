"""Pytest fixtures for Rewardman tests."""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from rewardman.models import Customer, CustomerStatus, MenuItem, Promotion, Transaction


@pytest.fixture
def customer(db):
    """Create a test customer (Bronze, empty balances)."""
    return Customer.objects.create(
        email="ana@example.com",
        full_name="Ana Reyes",
        mobile="09171234567",
        status=CustomerStatus.ACTIVE,
    )


@pytest.fixture
def customer_b(db):
    """Create a second customer."""
    return Customer.objects.create(
        email="ben@example.com",
        full_name="Ben Cruz",
        mobile="09181234567",
    )


@pytest.fixture
def silver_customer(db):
    """Create a customer with 150 lifetime points (Silver)."""
    cust = Customer.objects.create(
        email="sam@example.com",
        full_name="Sam Lim",
        mobile="09191234567",
        points=150,
        wallet=Decimal("500.00"),
    )
    Transaction.objects.create(
        customer=cust,
        payment_method="Cash",
        amount=Decimal("1500.00"),
        points_earned=150,
    )
    return cust


@pytest.fixture
def latte(db):
    """Create a coffee menu item."""
    return MenuItem.objects.create(
        name="Latte",
        category="Coffee",
        price=Decimal("120.00"),
    )


@pytest.fixture
def croissant(db):
    """Create a pastry menu item."""
    return MenuItem.objects.create(
        name="Croissant",
        category="Pastry",
        price=Decimal("85.50"),
    )


@pytest.fixture
def sold_out(db):
    """Create an unavailable menu item."""
    return MenuItem.objects.create(
        name="Matcha Cake",
        category="Pastry",
        price=Decimal("150.00"),
        is_available=False,
    )


@pytest.fixture
def silver_promo(db):
    """Create a running promotion for Silver and Gold."""
    return Promotion.objects.create(
        title="Free Muffin",
        description="One free muffin with any drink",
        applicable_tiers=["Silver", "Gold"],
        end_date=timezone.now() + timedelta(days=7),
    )


@pytest.fixture
def expired_promo(db):
    """Create a Silver promotion that already ended."""
    return Promotion.objects.create(
        title="Summer Cooler",
        applicable_tiers=["Silver"],
        end_date=timezone.now() - timedelta(days=1),
    )

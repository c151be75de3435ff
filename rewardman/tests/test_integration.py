"""Tests for the management command, admin wiring and adapters."""

from decimal import Decimal
from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from django.contrib import admin
from django.contrib.auth import get_user_model
from django.core.management import CommandError, call_command

from rewardman.adapters.mail import MailVerificationBackend
from rewardman.admin import CustomerAdmin, OrderAdmin, WalletRequestAdmin
from rewardman.models import (
    Customer,
    MenuItem,
    Order,
    OrderStatus,
    Promotion,
    Transaction,
    WalletLog,
    WalletRequest,
    WalletRequestStatus,
)
from rewardman.protocols import VerificationBackend
from rewardman.services import customer as customer_service
from rewardman.services import orders, wallet


pytestmark = pytest.mark.django_db


class TestRecomputeTiersCommand:
    """Tests for rewardman_recompute_tiers."""

    def test_recompute_all(self, customer, silver_customer):
        out = StringIO()
        call_command("rewardman_recompute_tiers", stdout=out)

        silver_customer.refresh_from_db()
        assert silver_customer.tier == "Silver"
        assert "Recomputed 2 customers, 1 tier(s) changed." in out.getvalue()

    def test_recompute_single(self, customer, silver_customer):
        out = StringIO()
        call_command("rewardman_recompute_tiers", "--email", "ANA@example.com", stdout=out)

        silver_customer.refresh_from_db()
        assert silver_customer.tier == "Bronze"
        assert "Recomputed 1 customers, 0 tier(s) changed." in out.getvalue()

    def test_tier_demoted_after_schedule_change(self, settings, silver_customer):
        call_command("rewardman_recompute_tiers", stdout=StringIO())
        settings.REWARDMAN = {"TIER_SCHEDULE": [("Bronze", 0), ("Silver", 200)]}
        call_command("rewardman_recompute_tiers", stdout=StringIO())

        silver_customer.refresh_from_db()
        assert silver_customer.tier == "Bronze"

    def test_unknown_email(self, db):
        with pytest.raises(CommandError, match="not found"):
            call_command("rewardman_recompute_tiers", "--email", "nobody@example.com")


class TestAdmin:
    """Tests for admin registration and display helpers."""

    @pytest.mark.parametrize("model", [Customer, MenuItem, Order, Promotion, WalletRequest])
    def test_registered(self, model):
        assert admin.site.is_registered(model)

    def test_transactions_not_editable_in_admin(self):
        assert not admin.site.is_registered(Transaction)

    def test_tier_progress(self, silver_customer):
        model_admin = CustomerAdmin(Customer, admin.site)
        assert model_admin.tier_progress(silver_customer) == "25%, 150 pts to Gold"

    def test_tier_progress_top_tier(self, customer):
        Transaction.objects.create(customer=customer, payment_method="Cash", amount=1, points_earned=700)
        model_admin = CustomerAdmin(Customer, admin.site)
        assert model_admin.tier_progress(customer) == "Platinum (top tier)"

    def test_changelist_renders(self, client, customer, silver_customer):
        user = get_user_model().objects.create_superuser("staff", "staff@example.com", "pw")
        client.force_login(user)
        response = client.get("/admin/rewardman/customer/")
        assert response.status_code == 200
        assert b"ana@example.com" in response.content


class TestMailVerificationBackend:
    """Tests for the django.core.mail adapter."""

    def test_implements_protocol(self):
        assert isinstance(MailVerificationBackend(), VerificationBackend)

    def test_sends_mail(self, customer, mailoutbox):
        assert MailVerificationBackend().send_verification(customer) is True
        assert mailoutbox[0].subject == "Verify your email"
        assert "Ana Reyes" in mailoutbox[0].body

    def test_custom_backend_is_called(self, db):
        backend = MagicMock()
        with patch(
            "rewardman.services.customer._get_verification_backend", return_value=backend
        ):
            cust = customer_service.register(
                full_name="Dina Tan",
                email="dina@example.com",
                mobile="09351234567",
                password="pw12345",
                confirm_password="pw12345",
            )

        backend.send_verification.assert_called_once_with(cust)


@pytest.fixture
def staff_client(client):
    user = get_user_model().objects.create_superuser("barista", "barista@example.com", "pw")
    client.force_login(user)
    return client


class TestAdminActions:
    """Tests for status changes made from the admin."""

    def test_status_not_editable(self):
        assert "status" in OrderAdmin(Order, admin.site).get_readonly_fields(None)
        assert "status" in WalletRequestAdmin(WalletRequest, admin.site).get_readonly_fields(None)

    def test_change_form_ignores_status(self, staff_client, customer):
        req = wallet.request_load("ana@example.com", "REF-9")
        response = staff_client.post(
            f"/admin/rewardman/walletrequest/{req.pk}/change/",
            {"customer": customer.pk, "reference_no": "REF-9", "amount": "300.00", "status": "approved"},
        )
        assert response.status_code == 302

        req.refresh_from_db()
        customer.refresh_from_db()
        assert req.status == WalletRequestStatus.PENDING
        assert req.amount == Decimal("300.00")
        assert customer.wallet == Decimal("0.00")

    def test_complete_orders_action(self, staff_client, silver_customer, latte):
        order = orders.place_order("sam@example.com", latte.pk)
        response = staff_client.post(
            "/admin/rewardman/order/",
            {"action": "complete_orders", "_selected_action": [order.pk]},
        )
        assert response.status_code == 302

        order.refresh_from_db()
        silver_customer.refresh_from_db()
        assert order.status == OrderStatus.COMPLETED
        assert silver_customer.points == 30
        assert Transaction.objects.get(order_ref=order.ref).created_by == "barista"

    def test_complete_orders_reports_failures(self, staff_client, customer, latte):
        order = orders.place_order("ana@example.com", latte.pk)
        response = staff_client.post(
            "/admin/rewardman/order/",
            {"action": "complete_orders", "_selected_action": [order.pk]},
            follow=True,
        )

        order.refresh_from_db()
        assert order.status == OrderStatus.PENDING
        assert b"Insufficient points balance" in response.content

    def test_cancel_orders_action(self, staff_client, silver_customer, latte):
        order = orders.place_order("sam@example.com", latte.pk)
        staff_client.post(
            "/admin/rewardman/order/",
            {"action": "cancel_orders", "_selected_action": [order.pk]},
        )

        order.refresh_from_db()
        silver_customer.refresh_from_db()
        assert order.status == OrderStatus.CANCELED
        assert silver_customer.points == 150

    def test_approve_requests_action(self, staff_client, customer):
        req = wallet.request_load("ana@example.com", "REF-7")
        WalletRequest.objects.filter(pk=req.pk).update(amount=Decimal("250.00"))
        staff_client.post(
            "/admin/rewardman/walletrequest/",
            {"action": "approve_requests", "_selected_action": [req.pk]},
        )

        req.refresh_from_db()
        customer.refresh_from_db()
        assert req.status == WalletRequestStatus.APPROVED
        assert customer.wallet == Decimal("250.00")
        assert WalletLog.objects.get().reference_no == "REF-7"

    def test_approve_requires_amount(self, staff_client, customer):
        req = wallet.request_load("ana@example.com", "REF-7")
        response = staff_client.post(
            "/admin/rewardman/walletrequest/",
            {"action": "approve_requests", "_selected_action": [req.pk]},
            follow=True,
        )

        req.refresh_from_db()
        assert req.status == WalletRequestStatus.PENDING
        assert b"Amount must be positive" in response.content

    def test_reject_requests_action(self, staff_client, customer):
        req = wallet.request_load("ana@example.com", "REF-8")
        staff_client.post(
            "/admin/rewardman/walletrequest/",
            {"action": "reject_requests", "_selected_action": [req.pk]},
        )

        req.refresh_from_db()
        customer.refresh_from_db()
        assert req.status == WalletRequestStatus.REJECTED
        assert customer.wallet == Decimal("0.00")

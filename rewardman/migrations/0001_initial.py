# Generated migration for the Rewardman loyalty models

import uuid
from decimal import Decimal

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import rewardman.models.order


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("uuid", models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ("email", models.EmailField(max_length=254, unique=True, verbose_name="email")),
                ("full_name", models.CharField(max_length=200, verbose_name="full name")),
                ("mobile", models.CharField(blank=True, db_index=True, max_length=20, verbose_name="mobile")),
                ("gender", models.CharField(blank=True, max_length=20, verbose_name="gender")),
                (
                    "points",
                    models.IntegerField(default=0, help_text="Redeemable points balance", verbose_name="points"),
                ),
                (
                    "wallet",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Prepaid wallet balance",
                        max_digits=12,
                        verbose_name="wallet",
                    ),
                ),
                ("tier", models.CharField(default="Bronze", max_length=30, verbose_name="tier")),
                (
                    "status",
                    models.CharField(
                        choices=[("Active", "Active"), ("Inactive", "Inactive")],
                        default="Inactive",
                        max_length=20,
                        verbose_name="status",
                    ),
                ),
                (
                    "favorite_category",
                    models.CharField(blank=True, max_length=100, verbose_name="favorite category"),
                ),
                (
                    "secondary_category",
                    models.CharField(blank=True, max_length=100, verbose_name="secondary category"),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "customer",
                "verbose_name_plural": "customers",
                "ordering": ["full_name"],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("mobile", ""), _negated=True),
                        fields=("mobile",),
                        name="rewardman_unique_customer_mobile",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, verbose_name="name")),
                ("description", models.TextField(blank=True, verbose_name="description")),
                ("category", models.CharField(blank=True, db_index=True, max_length=100, verbose_name="category")),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, verbose_name="price")),
                ("image", models.URLField(blank=True, verbose_name="image")),
                ("is_available", models.BooleanField(default=True, verbose_name="available")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
            ],
            options={
                "verbose_name": "menu item",
                "verbose_name_plural": "menu items",
                "ordering": ["category", "name"],
            },
        ),
        migrations.CreateModel(
            name="Promotion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200, verbose_name="title")),
                ("description", models.TextField(blank=True, verbose_name="description")),
                (
                    "applicable_tiers",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='Tier names, e.g. ["Silver", "Gold"]',
                        verbose_name="applicable tiers",
                    ),
                ),
                ("category", models.CharField(blank=True, max_length=100, verbose_name="category")),
                ("promo_type", models.CharField(default="global", max_length=30, verbose_name="type")),
                ("price", models.DecimalField(decimal_places=2, default=0, max_digits=10, verbose_name="price")),
                ("image", models.URLField(blank=True, verbose_name="image")),
                ("start_date", models.DateTimeField(blank=True, null=True, verbose_name="start date")),
                ("end_date", models.DateTimeField(blank=True, null=True, verbose_name="end date")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
            ],
            options={
                "verbose_name": "promotion",
                "verbose_name_plural": "promotions",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "ref",
                    models.CharField(
                        default=rewardman.models.order.generate_order_ref,
                        editable=False,
                        max_length=40,
                        unique=True,
                        verbose_name="reference",
                    ),
                ),
                ("subtotal", models.DecimalField(decimal_places=2, max_digits=12, verbose_name="subtotal")),
                (
                    "payment_method",
                    models.CharField(
                        choices=[("points", "Points"), ("wallet", "Wallet")],
                        default="points",
                        max_length=20,
                        verbose_name="payment method",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("Pending", "Pending"), ("Completed", "Completed"), ("Canceled", "Canceled")],
                        db_index=True,
                        default="Pending",
                        max_length=20,
                        verbose_name="status",
                    ),
                ),
                ("instructions", models.TextField(blank=True, verbose_name="instructions")),
                ("feedback_given", models.BooleanField(default=False, verbose_name="feedback given")),
                ("feedback_skipped", models.BooleanField(default=False, verbose_name="feedback skipped")),
                (
                    "placed_at",
                    models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="placed at"),
                ),
                ("resolved_at", models.DateTimeField(blank=True, null=True, verbose_name="resolved at")),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="orders",
                        to="rewardman.customer",
                        verbose_name="customer",
                    ),
                ),
            ],
            options={
                "verbose_name": "order",
                "verbose_name_plural": "orders",
                "ordering": ["-placed_at"],
                "indexes": [
                    models.Index(fields=["customer", "status"], name="rm_order_customer_status_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, verbose_name="name")),
                ("category", models.CharField(blank=True, max_length=100, verbose_name="category")),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, verbose_name="price")),
                ("qty", models.PositiveIntegerField(default=1, verbose_name="quantity")),
                (
                    "menu_item",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to="rewardman.menuitem",
                        verbose_name="menu item",
                    ),
                ),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="rewardman.order",
                        verbose_name="order",
                    ),
                ),
            ],
            options={
                "verbose_name": "order item",
                "verbose_name_plural": "order items",
            },
        ),
        migrations.CreateModel(
            name="Transaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "order_ref",
                    models.CharField(
                        blank=True,
                        help_text="Order this transaction belongs to, if any",
                        max_length=40,
                        verbose_name="order reference",
                    ),
                ),
                (
                    "payment_method",
                    models.CharField(
                        help_text="Free text: Cash, Wallet, Points, E-Wallet, Points + Cash, ...",
                        max_length=50,
                        verbose_name="payment method",
                    ),
                ),
                ("transaction_type", models.CharField(default="Purchase", max_length=50, verbose_name="type")),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12, verbose_name="amount")),
                ("points_earned", models.IntegerField(default=0, verbose_name="points earned")),
                (
                    "date",
                    models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="date"),
                ),
                ("created_by", models.CharField(blank=True, max_length=100, verbose_name="created by")),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="transactions",
                        to="rewardman.customer",
                        verbose_name="customer",
                    ),
                ),
            ],
            options={
                "verbose_name": "transaction",
                "verbose_name_plural": "transactions",
                "ordering": ["-date", "-pk"],
                "indexes": [
                    models.Index(fields=["customer", "-date"], name="rm_tx_customer_date_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="WalletRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("reference_no", models.CharField(max_length=100, verbose_name="reference number")),
                (
                    "amount",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        help_text="Verified top-up amount",
                        max_digits=12,
                        null=True,
                        verbose_name="amount",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")],
                        db_index=True,
                        default="pending",
                        max_length=20,
                        verbose_name="status",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("processed_at", models.DateTimeField(blank=True, null=True, verbose_name="processed at")),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="wallet_requests",
                        to="rewardman.customer",
                        verbose_name="customer",
                    ),
                ),
            ],
            options={
                "verbose_name": "wallet load request",
                "verbose_name_plural": "wallet load requests",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="WalletLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("method", models.CharField(max_length=50, verbose_name="method")),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12, verbose_name="amount")),
                ("reference_no", models.CharField(blank=True, max_length=100, verbose_name="reference number")),
                ("date", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="date")),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="wallet_logs",
                        to="rewardman.customer",
                        verbose_name="customer",
                    ),
                ),
            ],
            options={
                "verbose_name": "wallet log",
                "verbose_name_plural": "wallet logs",
                "ordering": ["-date", "-pk"],
            },
        ),
        migrations.CreateModel(
            name="ClaimedPromotion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200, verbose_name="title")),
                ("description", models.TextField(blank=True, verbose_name="description")),
                ("price", models.DecimalField(decimal_places=2, default=0, max_digits=10, verbose_name="price")),
                ("promo_type", models.CharField(default="global", max_length=30, verbose_name="type")),
                ("start_date", models.DateTimeField(blank=True, null=True, verbose_name="start date")),
                ("end_date", models.DateTimeField(blank=True, null=True, verbose_name="end date")),
                ("is_used", models.BooleanField(default=False, verbose_name="used")),
                ("claimed_at", models.DateTimeField(auto_now_add=True, verbose_name="claimed at")),
                ("used_at", models.DateTimeField(blank=True, null=True, verbose_name="used at")),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="claimed_promotions",
                        to="rewardman.customer",
                        verbose_name="customer",
                    ),
                ),
                (
                    "promotion",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="claims",
                        to="rewardman.promotion",
                        verbose_name="promotion",
                    ),
                ),
            ],
            options={
                "verbose_name": "claimed promotion",
                "verbose_name_plural": "claimed promotions",
                "ordering": ["-claimed_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("customer", "promotion"),
                        name="rewardman_unique_claim_per_customer",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "notification_type",
                    models.CharField(
                        choices=[
                            ("NewFeedback", "New feedback"),
                            ("Order", "Order"),
                            ("Wallet", "Wallet"),
                            ("Promotion", "Promotion"),
                            ("Tier", "Tier"),
                            ("System", "System"),
                        ],
                        default="System",
                        max_length=20,
                        verbose_name="type",
                    ),
                ),
                ("title", models.CharField(max_length=200, verbose_name="title")),
                ("message", models.TextField(blank=True, verbose_name="message")),
                ("is_read", models.BooleanField(default=False, verbose_name="read")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="created at")),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="notifications",
                        to="rewardman.customer",
                        verbose_name="customer",
                    ),
                ),
            ],
            options={
                "verbose_name": "notification",
                "verbose_name_plural": "notifications",
                "ordering": ["-created_at", "-pk"],
                "indexes": [
                    models.Index(fields=["customer", "-created_at"], name="rm_notif_customer_date_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="AssistanceMessage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("message_type", models.CharField(default="NewFeedback", max_length=20, verbose_name="type")),
                ("message", models.TextField(verbose_name="message")),
                ("is_read", models.BooleanField(default=False, verbose_name="read")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="assistance_messages",
                        to="rewardman.customer",
                        verbose_name="customer",
                    ),
                ),
            ],
            options={
                "verbose_name": "assistance message",
                "verbose_name_plural": "assistance messages",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="OrderFeedback",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("rating", models.PositiveSmallIntegerField(verbose_name="rating")),
                ("comment", models.TextField(blank=True, verbose_name="comment")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="order_feedbacks",
                        to="rewardman.customer",
                        verbose_name="customer",
                    ),
                ),
                (
                    "order",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="feedback",
                        to="rewardman.order",
                        verbose_name="order",
                    ),
                ),
            ],
            options={
                "verbose_name": "order feedback",
                "verbose_name_plural": "order feedback",
                "ordering": ["-created_at"],
            },
        ),
    ]

"""Rewardman admin."""

from django.contrib import admin, messages
from django.utils.html import format_html

from rewardman.exceptions import RewardmanError
from rewardman.models import (
    AssistanceMessage,
    ClaimedPromotion,
    Customer,
    MenuItem,
    Order,
    OrderItem,
    Promotion,
    Transaction,
    WalletRequest,
    WalletRequestStatus,
)
from rewardman.services import customer as customer_service
from rewardman.services import orders as order_service
from rewardman.services import wallet as wallet_service

TIER_COLORS = {
    "Bronze": "#cd7f32",
    "Silver": "#c0c0c0",
    "Gold": "#ffd700",
    "Platinum": "#e5e4e2",
}


def _run_per_object(model_admin, request, queryset, apply, verb):
    """Apply a service call to each selected row, reporting failures per row."""
    done = 0
    for obj in queryset:
        try:
            apply(obj)
        except RewardmanError as e:
            model_admin.message_user(request, f"{obj}: {e.message}", level=messages.ERROR)
        else:
            done += 1
    if done:
        model_admin.message_user(request, f"{done} {model_admin.opts.verbose_name_plural} {verb}.", messages.SUCCESS)


# ===========================================
# Inline Classes (must be defined before CustomerAdmin)
# ===========================================


class TransactionInline(admin.TabularInline):
    model = Transaction
    extra = 0
    fields = ["date", "transaction_type", "payment_method", "amount", "points_earned", "order_ref"]
    readonly_fields = fields
    ordering = ["-date"]
    max_num = 20

    def has_add_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ["name", "category", "price", "qty"]
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


# ===========================================
# Customer Admin
# ===========================================


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = [
        "email",
        "full_name",
        "mobile",
        "points",
        "wallet",
        "tier_badge",
        "status",
    ]
    list_filter = ["tier", "status"]
    search_fields = ["email", "full_name", "mobile"]
    readonly_fields = ["uuid", "tier", "tier_progress", "created_at", "updated_at"]
    inlines = [TransactionInline]

    fieldsets = [
        ("Identification", {"fields": ["email", "uuid", "full_name", "mobile", "gender"]}),
        ("Balances", {"fields": ["points", "wallet", "tier", "tier_progress"]}),
        ("Preferences", {"fields": ["favorite_category", "secondary_category"]}),
        (
            "System",
            {
                "fields": ["status", "created_at", "updated_at"],
                "classes": ["collapse"],
            },
        ),
    ]

    def tier_badge(self, obj):
        color = TIER_COLORS.get(obj.tier, "#6c757d")
        return format_html(
            '<span style="background:{}; color:#000; padding:2px 8px; '
            'border-radius:3px; font-size:11px;">{}</span>',
            color,
            obj.tier,
        )

    tier_badge.short_description = "Tier"

    def tier_progress(self, obj):
        info = customer_service.tier_status(obj)
        if info.next_tier is None:
            return f"{info.tier} (top tier)"
        return f"{info.progress_percent:.0f}%, {info.remaining} pts to {info.next_tier}"

    tier_progress.short_description = "Progress"


# ===========================================
# Catalog / Orders Admin
# ===========================================


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "price", "is_available"]
    list_filter = ["category", "is_available"]
    list_editable = ["is_available"]
    search_fields = ["name", "description"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["ref", "customer", "subtotal", "payment_method", "status", "placed_at"]
    list_filter = ["status", "payment_method"]
    search_fields = ["ref", "customer__email", "customer__full_name"]
    raw_id_fields = ["customer"]
    # Status moves only through the actions below
    readonly_fields = ["ref", "status", "placed_at", "resolved_at", "feedback_given", "feedback_skipped"]
    inlines = [OrderItemInline]
    date_hierarchy = "placed_at"
    actions = ["complete_orders", "cancel_orders"]

    @admin.action(description="Complete selected orders")
    def complete_orders(self, request, queryset):
        staff = request.user.get_username()
        _run_per_object(
            self, request, queryset, lambda order: order_service.complete_order(order.ref, created_by=staff), "completed"
        )

    @admin.action(description="Cancel selected orders")
    def cancel_orders(self, request, queryset):
        _run_per_object(self, request, queryset, lambda order: order_service.cancel_order(order.ref), "canceled")


# ===========================================
# Promotions Admin
# ===========================================


@admin.register(Promotion)
class PromotionAdmin(admin.ModelAdmin):
    list_display = ["title", "tiers_display", "category", "price", "end_date"]
    search_fields = ["title", "description"]

    def tiers_display(self, obj):
        return ", ".join(obj.applicable_tiers or []) or "-"

    tiers_display.short_description = "Tiers"


@admin.register(ClaimedPromotion)
class ClaimedPromotionAdmin(admin.ModelAdmin):
    list_display = ["title", "customer", "is_used", "claimed_at", "used_at"]
    list_filter = ["is_used"]
    search_fields = ["title", "customer__email"]
    raw_id_fields = ["customer", "promotion"]


# ===========================================
# Wallet / Assistance Admin
# ===========================================


@admin.register(WalletRequest)
class WalletRequestAdmin(admin.ModelAdmin):
    list_display = ["reference_no", "customer", "amount", "status", "created_at", "processed_at"]
    list_filter = ["status"]
    search_fields = ["reference_no", "customer__email"]
    raw_id_fields = ["customer"]
    readonly_fields = ["status", "created_at", "processed_at"]
    actions = ["approve_requests", "reject_requests"]

    def get_readonly_fields(self, request, obj=None):
        fields = list(super().get_readonly_fields(request, obj))
        if obj is not None and obj.status != WalletRequestStatus.PENDING:
            fields += ["customer", "reference_no", "amount"]
        return fields

    @admin.action(description="Approve selected requests (credit entered amount)")
    def approve_requests(self, request, queryset):
        _run_per_object(
            self, request, queryset, lambda req: wallet_service.approve_request(req.pk, req.amount or 0), "approved"
        )

    @admin.action(description="Reject selected requests")
    def reject_requests(self, request, queryset):
        _run_per_object(self, request, queryset, lambda req: wallet_service.reject_request(req.pk), "rejected")


@admin.register(AssistanceMessage)
class AssistanceMessageAdmin(admin.ModelAdmin):
    list_display = ["customer", "message_type", "is_read", "created_at"]
    list_filter = ["is_read", "message_type"]
    search_fields = ["customer__email", "message"]
    raw_id_fields = ["customer"]

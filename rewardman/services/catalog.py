"""Catalog service - menu listing, category filter and search."""

from django.db.models import Q

from rewardman.models import MenuItem, UNCATEGORIZED

ALL_CATEGORIES = "All"


def list_menu(
    category: str | None = None,
    search: str = "",
    available_only: bool = False,
) -> list[MenuItem]:
    """
    List menu items.

    Args:
        category: Category name; None or "All" means every category,
            "Uncategorized" matches items without a category
        search: Case-insensitive substring of the item name
        available_only: Hide unavailable items

    Returns:
        List of MenuItem ordered by category and name
    """
    qs = MenuItem.objects.all()

    if category and category != ALL_CATEGORIES:
        if category == UNCATEGORIZED:
            qs = qs.filter(Q(category="") | Q(category=UNCATEGORIZED))
        else:
            qs = qs.filter(category=category)

    search = (search or "").strip()
    if search:
        qs = qs.filter(name__icontains=search)

    if available_only:
        qs = qs.filter(is_available=True)

    return list(qs)


def categories() -> list[str]:
    """Category filter options: "All" followed by each distinct category."""
    seen = []
    for value in MenuItem.objects.order_by("category").values_list("category", flat=True):
        name = value or UNCATEGORIZED
        if name not in seen:
            seen.append(name)
    return [ALL_CATEGORIES, *seen]


def get_item(item_id) -> MenuItem | None:
    """Get menu item by primary key."""
    try:
        return MenuItem.objects.get(pk=item_id)
    except (MenuItem.DoesNotExist, ValueError):
        return None

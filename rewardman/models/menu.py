"""Menu item model: the rewards catalog."""

from django.db import models
from django.utils.translation import gettext_lazy as _

UNCATEGORIZED = "Uncategorized"


class MenuItem(models.Model):
    """Catalog entry. Price is in points for rewards orders and in currency for wallet purchases."""

    name = models.CharField(_("name"), max_length=200)
    description = models.TextField(_("description"), blank=True)
    category = models.CharField(_("category"), max_length=100, blank=True, db_index=True)
    price = models.DecimalField(_("price"), max_digits=10, decimal_places=2)
    image = models.URLField(_("image"), blank=True)
    is_available = models.BooleanField(_("available"), default=True)

    created_at = models.DateTimeField(_("created at"), auto_now_add=True)

    class Meta:
        verbose_name = _("menu item")
        verbose_name_plural = _("menu items")
        ordering = ["category", "name"]

    def __str__(self):
        return f"{self.name} ({self.price})"

    @property
    def display_category(self) -> str:
        return self.category or UNCATEGORIZED

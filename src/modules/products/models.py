"""Product model.

Business rules implemented:
- Price cannot be negative (zero is allowed for giveaways / samples).
- Inactive products are hidden from the POS screen.
- A product referenced by any order item cannot be deleted (enforced at
  service layer); deactivate it instead.
- Product images are stored under ``products/`` in the media storage.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import FileExtensionValidator, MinValueValidator
from django.db import models

from modules.core.models import ActiveManager, BaseModel

IMAGE_EXTENSIONS = ["jpg", "jpeg", "png", "webp"]
IMAGE_MAX_BYTES = 2 * 1024 * 1024


class Product(BaseModel):
    """Sellable item shown on the POS screen.

    ``price`` is the current list price; orders snapshot it per line so
    later price changes never alter past orders.
    """

    category = models.ForeignKey(
        "categories.Category",
        on_delete=models.PROTECT,
        related_name="products",
    )
    name = models.CharField(max_length=255)
    description = models.TextField()
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    image = models.ImageField(
        upload_to="products/",
        max_length=255,
        validators=[FileExtensionValidator(IMAGE_EXTENSIONS)],
    )
    is_active = models.BooleanField(default=True)

    objects = ActiveManager()

    class Meta:
        db_table = "products"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active"], name="products_active_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def delete_image(self) -> None:
        """Remove the stored image file, if any."""
        if self.image:
            self.image.delete(save=False)

    def __str__(self) -> str:
        return self.name

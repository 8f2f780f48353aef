"""Django ORM implementation of the Product repository.

Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: Any) -> Optional[Product]:
        """Returns ``None`` for non-existent or invalid IDs."""
        try:
            return Product.objects.select_related("category").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"is_active": True}
            {"category_id": 3, "name__icontains": "crispy"}
        """
        queryset = Product.objects.select_related("category")
        if filters:
            queryset = queryset.filter(**filters)
        return queryset.order_by("name", "id")

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        entity.save()
        logger.info("product.saved", product_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        """Hard-delete a product and its image file."""
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete_image()
        product.delete()
        logger.info("product.deleted", product_id=str(id))
        return True

    def is_in_orders(self, id: str) -> bool:
        from modules.orders.models import OrderItem

        return OrderItem.objects.filter(product_id=id).exists()

    def get_many(self, ids: Iterable[str]) -> List[Product]:
        try:
            return list(Product.objects.filter(id__in=list(ids)))
        except (ValueError, ValidationError):
            return []

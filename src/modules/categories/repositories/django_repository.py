"""Django ORM implementation of the Category repository.

Read methods annotate ``products_count`` so the back office can show how
many products each category holds without an extra query per row.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import transaction
from django.db.models import Count, QuerySet

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    def _annotated(self) -> QuerySet:
        return Category.objects.annotate(products_count=Count("products"))

    def get_by_id(self, id: Any) -> Optional[Category]:
        """Returns ``None`` for non-existent or non-numeric IDs."""
        try:
            return self._annotated().filter(id=int(id)).first()
        except (TypeError, ValueError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        queryset = self._annotated()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset.order_by("name", "id")

    @transaction.atomic
    def save(self, entity: Category) -> Category:
        entity.save()
        logger.info("category.saved", category_id=entity.id, name=entity.name)
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        category = self.get_by_id(id)
        if not category:
            return False
        category.delete()
        logger.info("category.deleted", category_id=id)
        return True

    def has_products(self, id: int) -> bool:
        from modules.products.models import Product

        return Product.objects.filter(category_id=id).exists()

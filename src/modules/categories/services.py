"""Category service layer (Use Cases).

Business rules enforced here:
- A category that still owns products cannot be deleted.
- New categories are active unless stated otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import transaction

from modules.categories.exceptions import CategoryHasProducts, CategoryNotFound
from modules.categories.models import Category

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
    from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for Category use-cases."""

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_category(self, dto: CreateCategoryDTO) -> Category:
        category = self._repo.save(Category(name=dto.name, is_active=dto.is_active))
        logger.info("category.created", category_id=category.id)
        return self._repo.get_by_id(category.id) or category

    @transaction.atomic
    def update_category(self, id: Any, dto: UpdateCategoryDTO) -> Category:
        """Rename a category and optionally change its active flag.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        category = self._get_or_raise(id)
        category.name = dto.name
        if dto.is_active is not None:
            category.is_active = dto.is_active
        self._repo.save(category)
        logger.info("category.updated", category_id=category.id)
        return self._repo.get_by_id(category.id) or category

    @transaction.atomic
    def delete_category(self, id: Any) -> None:
        """Delete an empty category.

        Raises:
            CategoryNotFound: if the category does not exist.
            CategoryHasProducts: if products still reference it.
        """
        category = self._get_or_raise(id)
        if self._repo.has_products(category.id):
            logger.warning("category.delete_blocked", category_id=category.id)
            raise CategoryHasProducts(
                "Category cannot be deleted because it still has products."
            )
        self._repo.delete(category.id)

    @transaction.atomic
    def toggle_status(self, id: Any) -> Category:
        category = self._get_or_raise(id)
        category.is_active = not category.is_active
        self._repo.save(category)
        logger.info(
            "category.status_toggled",
            category_id=category.id,
            is_active=category.is_active,
        )
        return category

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_categories(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        return self._repo.list(filters)

    def get_category(self, id: Any) -> Category:
        return self._get_or_raise(id)

    def _get_or_raise(self, id: Any) -> Category:
        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category {id} not found.")
        return category

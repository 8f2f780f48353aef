"""Category repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for categories."""

    @abstractmethod
    def has_products(self, id: int) -> bool:
        """Whether any product (active or not) belongs to the category."""

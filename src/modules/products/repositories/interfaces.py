"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups needed by the
delete guard and by order intake.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def is_in_orders(self, id: str) -> bool:
        """Whether any order item references the product."""

    @abstractmethod
    def get_many(self, ids: Iterable[str]) -> List["Product"]:
        """Retrieve the products matching *ids* (missing ids are skipped)."""

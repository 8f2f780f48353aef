"""Product service layer (Use Cases).

Business rules enforced here:
- A product that appears on any order cannot be deleted.
- Replacing a product image removes the previous file from storage.
- Deleting a product removes its image file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import ProductInUse, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        product = Product(
            category_id=dto.category_id,
            name=dto.name,
            description=dto.description,
            price=dto.price,
            is_active=dto.is_active,
            image=dto.image,
        )
        product = self._repo.save(product)
        logger.info("product.created", product_id=str(product.id))
        return self._repo.get_by_id(product.id) or product

    @transaction.atomic
    def update_product(self, id: Any, dto: UpdateProductDTO) -> Product:
        """Update a product; a new image replaces (and deletes) the old one.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        log = logger.bind(product_id=str(product.id))

        product.category_id = dto.category_id
        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.is_active = dto.is_active

        old_image = None
        if dto.image is not None:
            old_image = product.image.name if product.image else None
            product.image = dto.image

        self._repo.save(product)

        if old_image:
            product.image.storage.delete(old_image)
            log.info("product.image_replaced", old_image=old_image)

        log.info("product.updated")
        return self._repo.get_by_id(product.id) or product

    @transaction.atomic
    def delete_product(self, id: Any) -> None:
        """Delete a product that was never sold.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductInUse: if any order item references it.
        """
        product = self._get_or_raise(id)
        if self._repo.is_in_orders(str(product.id)):
            logger.warning("product.delete_blocked", product_id=str(product.id))
            raise ProductInUse(
                "Product cannot be deleted because it already appears on orders. "
                "Deactivate it instead."
            )
        self._repo.delete(product.id)

    @transaction.atomic
    def toggle_status(self, id: Any) -> Product:
        product = self._get_or_raise(id)
        product.is_active = not product.is_active
        self._repo.save(product)
        logger.info(
            "product.status_toggled",
            product_id=str(product.id),
            is_active=product.is_active,
        )
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """Return products, optionally filtered, ordered by name."""
        return self._repo.list(filters)

    def get_product(self, id: Any) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        return self._get_or_raise(id)

    def _get_or_raise(self, id: Any) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product

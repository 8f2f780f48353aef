"""Customer service layer (Use Cases)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import transaction

from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import Customer

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.customers.dtos import UpsertCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def upsert_customer(self, dto: UpsertCustomerDTO) -> Customer:
        """Create the customer for ``dto.phone_number`` or refresh its details."""
        customer, created = self._repo.upsert_by_phone(
            phone_number=dto.phone_number,
            name=dto.name,
            address=dto.address,
        )
        logger.info(
            "customer.created" if created else "customer.updated",
            customer_id=str(customer.id),
        )
        return customer

    def list_customers(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        return self._repo.list(filters)

    def get_customer(self, id: str) -> Customer:
        """Raises ``CustomerNotFound`` if the customer does not exist."""
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer

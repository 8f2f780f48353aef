"""Django ORM implementation of the Customer repository.

Error handling follows the Null Object pattern: methods return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: Any) -> Optional[Customer]:
        """Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID)."""
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        queryset = Customer.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        is_new = entity._state.adding
        entity.save()
        logger.info("customer.saved", customer_id=str(entity.id), is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        customer = self.get_by_id(id)
        if not customer:
            return False
        customer.delete()
        logger.info("customer.deleted", customer_id=str(id))
        return True

    def get_by_phone(self, phone_number: str) -> Optional[Customer]:
        return Customer.objects.filter(phone_number=phone_number).first()

    @transaction.atomic
    def upsert_by_phone(
        self, phone_number: str, name: str, address: Optional[str] = None
    ) -> Tuple[Customer, bool]:
        """Find-or-create by phone; an existing customer gets the new name
        and, when one is given, the new address."""
        customer, created = Customer.objects.select_for_update().get_or_create(
            phone_number=phone_number,
            defaults={"name": name, "address": address or ""},
        )
        if not created:
            customer.name = name
            update_fields = ["name"]
            if address is not None:
                customer.address = address
                update_fields.append("address")
            customer.save(update_fields=update_fields)

        logger.info(
            "customer.upserted",
            customer_id=str(customer.id),
            created=created,
        )
        return customer, created

"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
Write operations are wrapped in ``transaction.atomic()`` so the Order
aggregate (Order + OrderItems) is persisted atomically.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        items = data["items"]
        total = sum(
            (Decimal(item["unit_price"]) * item["quantity"] for item in items),
            Decimal("0.00"),
        )

        order = Order(
            cashier_id=data["cashier_id"],
            customer_id=data["customer_id"],
            total_amount=total,
            shipping_cost=data.get("shipping_cost") or Decimal("0.00"),
            payment_status=data["payment_status"],
            notes=data.get("notes") or "",
        )
        order.save()

        OrderItem.objects.bulk_create(
            [
                OrderItem.for_line(
                    order,
                    product_id=item["product_id"],
                    unit_price=Decimal(item["unit_price"]),
                    quantity=item["quantity"],
                )
                for item in items
            ]
        )

        logger.info(
            "order.created",
            order_id=str(order.id),
            item_count=len(items),
            grand_total=str(order.grand_total),
        )
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def _base_queryset(self) -> QuerySet:
        return Order.objects.select_related("customer", "cashier").prefetch_related(
            "items__product"
        )

    def get_by_id(self, id: Any) -> Optional[Order]:
        """Returns ``None`` for non-existent or invalid IDs."""
        try:
            return self._base_queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """List orders, newest first, with customer, cashier and items loaded."""
        queryset = self._base_queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset.order_by("-created_at", "-id")

    def list_notification_failed(self) -> List[Order]:
        return list(
            self._base_queryset().notification_failed().order_by("created_at", "id")
        )

    # ------------------------------------------------------------------
    # Save / Delete (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        entity.save()
        logger.info("order.saved", order_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        order = self.get_by_id(id)
        if not order:
            return False
        order.delete()
        logger.info("order.deleted", order_id=str(id))
        return True

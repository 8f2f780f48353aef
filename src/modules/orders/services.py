"""Order service layer (Use Cases).

Orchestrates order intake at the register and the back-office
follow-ups (payment status, WhatsApp resends).  The service defines
the unit-of-work boundary.

Business rules enforced:
- Customer is upserted by phone number inside the order transaction.
- Every cart line must reference an existing product.
- ``total_amount = Σ price × quantity``; ``grand_total`` adds shipping.
- Direct orders (paid at the counter) start PAID, the rest UNPAID.
- The WhatsApp notification runs only after the order is committed and
  its outcome never rolls the order back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import transaction

from modules.orders.constants import PaymentStatus
from modules.orders.exceptions import (
    InvalidPaymentStatus,
    OrderNotFound,
    ProductNotFound,
)

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.customers.services import CustomerService
    from modules.notifications.gateways import SendResult
    from modules.notifications.services import OrderNotifier
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PlacedOrder:
    order: Order
    notification: SendResult


@dataclass(frozen=True)
class BulkResendResult:
    sent: int
    failed: int

    @property
    def total(self) -> int:
        return self.sent + self.failed


class OrderService:
    """Application service for Order use-cases.

    Receives its collaborators via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_service: CustomerService,
        product_repository: IProductRepository,
        notifier: OrderNotifier,
    ) -> None:
        self._order_repo = order_repository
        self._customer_service = customer_service
        self._product_repo = product_repository
        self._notifier = notifier

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def place_order(self, dto: CreateOrderDTO, cashier: Any) -> PlacedOrder:
        """Create the order, then send the WhatsApp summary.

        Raises:
            ProductNotFound: a cart line references an unknown product.
        """
        order = self.create_order(dto, cashier)
        result = self._notifier.notify(order)
        return PlacedOrder(order=order, notification=result)

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO, cashier: Any) -> Order:
        """Upsert the customer and write the order with its items.

        Raises:
            ProductNotFound: a cart line references an unknown product.
        """
        log = logger.bind(cashier_id=cashier.pk, line_count=len(dto.cart_items))
        log.info("order.creation_started")

        product_ids = {str(item.product_id) for item in dto.cart_items}
        found = {str(p.id) for p in self._product_repo.get_many(product_ids)}
        missing = sorted(product_ids - found)
        if missing:
            log.warning("order.unknown_products", product_ids=missing)
            raise ProductNotFound(f"Product {missing[0]} not found.")

        customer = self._customer_service.upsert_customer(dto.to_customer_dto())

        order = self._order_repo.create(
            {
                "cashier_id": cashier.pk,
                "customer_id": customer.id,
                "shipping_cost": dto.shipping_cost,
                "payment_status": (
                    PaymentStatus.PAID if dto.is_direct_order else PaymentStatus.UNPAID
                ),
                "notes": dto.notes or "",
                "items": [
                    {
                        "product_id": item.product_id,
                        "unit_price": item.price,
                        "quantity": item.quantity,
                    }
                    for item in dto.cart_items
                ],
            }
        )

        # Re-fetch with relations for the response and the WhatsApp message
        return self._order_repo.get_by_id(order.id) or order

    @transaction.atomic
    def update_payment_status(self, order_id: Any, payment_status: str) -> Order:
        """Raises ``OrderNotFound`` or ``InvalidPaymentStatus``."""
        if payment_status not in PaymentStatus.values:
            raise InvalidPaymentStatus(f"Invalid payment status {payment_status!r}.")

        order = self.get_order(order_id)
        old_status = order.payment_status
        order.payment_status = payment_status
        order.save(update_fields=["payment_status"])

        logger.info(
            "order.payment_status_updated",
            order_id=str(order.id),
            old_status=old_status,
            new_status=payment_status,
        )
        return order

    def resend_notification(self, order_id: Any) -> SendResult:
        """Send the order summary again; raises ``OrderNotFound``."""
        order = self.get_order(order_id)
        logger.info("order.notification_resend", order_id=str(order.id))
        return self._notifier.notify(order)

    def bulk_resend_notifications(self) -> BulkResendResult:
        """Resend every order whose last notification FAILED."""
        sent = failed = 0
        for order in self._order_repo.list_notification_failed():
            if self._notifier.notify(order).sent:
                sent += 1
            else:
                failed += 1

        logger.info("order.notification_bulk_resend", sent=sent, failed=failed)
        return BulkResendResult(sent=sent, failed=failed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: Any) -> Order:
        """Raises ``OrderNotFound`` if the order does not exist."""
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def list_orders(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        return self._order_repo.list(filters)


def build_order_service() -> OrderService:
    """Wire ``OrderService`` with the Django repositories and Fonnte."""
    from modules.customers.repositories.django_repository import (
        CustomerDjangoRepository,
    )
    from modules.customers.services import CustomerService
    from modules.notifications.services import OrderNotifier
    from modules.orders.repositories.django_repository import OrderDjangoRepository
    from modules.products.repositories.django_repository import (
        ProductDjangoRepository,
    )

    return OrderService(
        order_repository=OrderDjangoRepository(),
        customer_service=CustomerService(repository=CustomerDjangoRepository()),
        product_repository=ProductDjangoRepository(),
        notifier=OrderNotifier(),
    )

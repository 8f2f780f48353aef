"""Order repository interface.

Extends ``IRepository[Order]`` with the methods the Order aggregate
needs: atomic creation with items and the look-up of orders whose
WhatsApp notification failed.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The Order aggregate includes its OrderItem children; mutations
    must be atomic.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items atomically.

        ``data`` must include ``cashier_id``, ``customer_id``,
        ``shipping_cost``, ``payment_status`` and ``items`` (list of dicts
        with ``product_id``, ``unit_price``, ``quantity``); ``notes`` is
        optional.
        """

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[Order]:
        """Retrieve an order with customer, cashier and items loaded."""

    @abstractmethod
    def list_notification_failed(self) -> Iterable[Order]:
        """Orders whose notification status is FAILED, oldest first."""

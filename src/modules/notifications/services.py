"""Order notification dispatch.

``OrderNotifier`` is the only place that turns an order into a WhatsApp
message and records the outcome on the order.  It is best-effort: the
gateway client downgrades every failure to ``FAILED`` and this service
only ever patches ``notification_status``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog

from modules.notifications.gateways import FonnteClient, SendResult
from modules.notifications.messages import build_order_message

if TYPE_CHECKING:
    from modules.orders.models import Order

logger = structlog.get_logger(__name__)


class OrderNotifier:
    def __init__(self, client: Optional[FonnteClient] = None) -> None:
        self._client = client or FonnteClient()

    def notify(self, order: Order) -> SendResult:
        """Send the order summary to the customer and store the result."""
        message = build_order_message(order)
        result = self._client.send_message(order.customer.phone_number, message)

        order.notification_status = result.status
        order.save(update_fields=["notification_status"])

        logger.info(
            "notification.sent" if result.sent else "notification.failed",
            order_id=str(order.id),
            wa_status=result.status,
            detail=result.message,
        )
        return result

"""Celery tasks for the orders module."""

import structlog
from celery import shared_task

logger = structlog.get_logger(__name__)


@shared_task(name="orders.resend_failed_notifications")
def resend_failed_notifications():
    """Retry the WhatsApp summary of every order whose last send FAILED."""
    from modules.orders.services import build_order_service

    result = build_order_service().bulk_resend_notifications()
    logger.info(
        "resend_failed_notifications.executed",
        sent=result.sent,
        failed=result.failed,
    )
    return {"sent": result.sent, "failed": result.failed}

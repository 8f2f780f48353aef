"""Read-only aggregates for the owner dashboard and the register catalog."""

from __future__ import annotations

from datetime import datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional

import structlog
from django.db.models import Count, QuerySet, Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from modules.categories.models import Category
from modules.orders.models import Order
from modules.products.models import Product

logger = structlog.get_logger(__name__)

REVENUE_CHART_DAYS = 7


class DashboardService:
    def owner_summary(self, today: Optional[Any] = None) -> Dict[str, Any]:
        """Today's figures plus revenue per day since midnight seven days ago.

        Cancelled orders never count as sales.  ``revenueChart`` only holds
        days that have at least one order.
        """
        today = today or timezone.localdate()
        sales = Order.objects.not_cancelled()

        today_orders = sales.filter(created_at__date=today)
        today_totals = today_orders.aggregate(
            revenue=Sum("grand_total"), orders=Count("id")
        )

        stats = {
            "todaySales": float(today_totals["revenue"] or Decimal("0")),
            "todayOrders": today_totals["orders"],
            "pendingPayments": Order.objects.unpaid().count(),
            "failedWa": Order.objects.notification_failed().count(),
        }

        summary = {"stats": stats, "revenueChart": self.revenue_chart(today)}
        logger.info("dashboard.owner_summary", **stats)
        return summary

    def revenue_chart(self, today: Any) -> List[Dict[str, Any]]:
        start = timezone.make_aware(
            datetime.combine(today - timedelta(days=REVENUE_CHART_DAYS), time.min)
        )
        daily = (
            Order.objects.not_cancelled()
            .filter(created_at__gte=start)
            .annotate(date=TruncDate("created_at"))
            .values("date")
            .annotate(revenue=Sum("grand_total"), orders=Count("id"))
            .order_by("date")
        )
        return [
            {
                "date": row["date"].isoformat(),
                "revenue": float(row["revenue"] or 0),
                "orders": row["orders"],
            }
            for row in daily
        ]

    def pos_categories(self) -> QuerySet:
        return Category.objects.active().order_by("name", "id")

    def pos_products(self) -> QuerySet:
        return (
            Product.objects.active().select_related("category").order_by("name", "id")
        )

"""Order and OrderItem models.

Business rules implemented:
- ``grand_total`` is always ``total_amount + shipping_cost`` (recomputed
  on every save).
- ``total_amount`` is the sum of the line subtotals (computed by the
  repository when the order is written).
- OrderItem snapshots the unit price at purchase time (``unit_price``);
  later product price changes never alter past orders.
- OrderItem stores ``subtotal`` only; ``quantity`` is derived as
  ``subtotal / unit_price`` and is 0 for zero-priced lines.
- Customer and cashier FKs use PROTECT to preserve sales history.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import NotificationStatus, PaymentStatus


class OrderQuerySet(models.QuerySet):
    def unpaid(self) -> OrderQuerySet:
        return self.filter(payment_status=PaymentStatus.UNPAID)

    def notification_failed(self) -> OrderQuerySet:
        return self.filter(notification_status=NotificationStatus.FAILED)

    def not_cancelled(self) -> OrderQuerySet:
        return self.exclude(payment_status=PaymentStatus.CANCELLED)


class Order(BaseModel):
    """Order header written by the register."""

    cashier = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="orders_handled",
    )
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    shipping_cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    grand_total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        editable=False,
    )
    payment_status = models.CharField(
        max_length=10,
        choices=PaymentStatus.choices,
        default=PaymentStatus.UNPAID,
    )
    notification_status = models.CharField(
        max_length=10,
        choices=NotificationStatus.choices,
        default=NotificationStatus.PENDING,
    )
    notes = models.TextField(blank=True, default="")

    objects = OrderQuerySet.as_manager()

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["payment_status"], name="orders_payment_idx"),
            models.Index(
                fields=["notification_status"], name="orders_notification_idx"
            ),
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(shipping_cost__gte=0),
                name="orders_shipping_non_negative",
            ),
        ]

    def save(self, *args: Any, **kwargs: Any) -> None:
        self.grand_total = Decimal(self.total_amount or 0) + Decimal(
            self.shipping_cost or 0
        )
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and (
            {"total_amount", "shipping_cost"} & set(update_fields)
        ):
            kwargs["update_fields"] = list(update_fields) + ["grand_total"]
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.id} ({self.payment_status}/{self.notification_status})"


class OrderItem(BaseModel):
    """Line item linking an Order to a Product."""

    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
    )
    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    subtotal = models.DecimalField(
        max_digits=12,
        decimal_places=2,
    )

    class Meta:
        db_table = "order_items"
        ordering = ["created_at", "id"]

    @classmethod
    def for_line(
        cls, order: Order, product_id: Any, unit_price: Decimal, quantity: int
    ) -> OrderItem:
        """Build (unsaved) the item for one cart line."""
        return cls(
            order=order,
            product_id=product_id,
            unit_price=unit_price,
            subtotal=unit_price * quantity,
        )

    @property
    def quantity(self) -> int:
        """Derived from ``subtotal / unit_price``; 0 when the price is 0."""
        if not self.unit_price:
            return 0
        return int(Decimal(self.subtotal) / Decimal(self.unit_price))

    def __str__(self) -> str:
        return f"{self.product} x{self.quantity} (Rp {self.subtotal})"

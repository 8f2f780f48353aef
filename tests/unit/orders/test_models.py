"""Unit tests for Order / OrderItem models.

Covers:
- grand_total recomputed on every save (including update_fields saves).
- Derived item quantity, including zero-priced lines.
- Query scopes.
- PROTECT on product / customer references.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.db.models import ProtectedError

from modules.orders.constants import NotificationStatus, PaymentStatus
from modules.orders.models import Order, OrderItem

pytestmark = pytest.mark.unit


class TestOrderDefaults:
    def test_defaults(self, order):
        assert order.payment_status == PaymentStatus.UNPAID
        assert order.notification_status == NotificationStatus.PENDING
        assert order.notes == ""
        assert order.shipping_cost == Decimal("0.00")


class TestGrandTotal:
    def test_computed_on_create(self, make_order, product):
        order = make_order(
            lines=[(product, Decimal("25000"), 2)], shipping_cost=Decimal("12000")
        )
        order.refresh_from_db()
        assert order.grand_total == Decimal("62000.00")

    def test_recomputed_on_full_save(self, order):
        order.shipping_cost = Decimal("5000")
        order.save()
        order.refresh_from_db()
        assert order.grand_total == Decimal("55000.00")

    def test_recomputed_with_update_fields(self, order):
        order.shipping_cost = Decimal("7000")
        order.save(update_fields=["shipping_cost"])
        order.refresh_from_db()
        assert order.grand_total == Decimal("57000.00")

    def test_unrelated_update_fields_leave_total_alone(self, order):
        order.payment_status = PaymentStatus.PAID
        order.save(update_fields=["payment_status"])
        order.refresh_from_db()
        assert order.grand_total == Decimal("50000.00")
        assert order.payment_status == PaymentStatus.PAID


class TestOrderItemQuantity:
    @pytest.mark.parametrize(
        "price, quantity",
        [(Decimal("25000"), 2), (Decimal("3333.33"), 3), (Decimal("0.01"), 7)],
    )
    def test_quantity_derived_from_subtotal(self, order, product, price, quantity):
        item = OrderItem.for_line(order, product.id, price, quantity)
        item.save()
        item.refresh_from_db()
        assert item.subtotal == price * quantity
        assert item.quantity == quantity

    def test_zero_price_has_zero_quantity(self, order, product):
        item = OrderItem.for_line(order, product.id, Decimal("0"), 5)
        item.save()
        assert item.subtotal == 0
        assert item.quantity == 0

    def test_quantity_truncates(self, order, product):
        item = OrderItem(
            order=order,
            product=product,
            unit_price=Decimal("3000"),
            subtotal=Decimal("10000"),
        )
        assert item.quantity == 3


class TestScopes:
    def test_unpaid_and_notification_failed(self, make_order):
        make_order(payment_status=PaymentStatus.PAID)
        unpaid_failed = make_order(notification_status=NotificationStatus.FAILED)
        make_order(payment_status=PaymentStatus.CANCELLED)

        assert list(Order.objects.unpaid()) == [unpaid_failed]
        assert list(Order.objects.notification_failed()) == [unpaid_failed]
        assert Order.objects.not_cancelled().count() == 2


class TestProtection:
    def test_product_on_order_cannot_be_deleted(self, order, product):
        with pytest.raises(ProtectedError):
            product.delete()

    def test_customer_with_orders_cannot_be_deleted(self, order, customer):
        with pytest.raises(ProtectedError):
            customer.delete()

    def test_items_cascade_with_order(self, order):
        order.delete()
        assert OrderItem.objects.count() == 0

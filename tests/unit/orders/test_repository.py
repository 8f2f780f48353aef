"""Unit tests for OrderDjangoRepository (real database)."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.constants import NotificationStatus, PaymentStatus
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


def _data(cashier, customer, product, **overrides):
    data = {
        "cashier_id": cashier.pk,
        "customer_id": customer.id,
        "shipping_cost": Decimal("10000"),
        "payment_status": PaymentStatus.UNPAID,
        "notes": None,
        "items": [
            {"product_id": product.id, "unit_price": Decimal("25000"), "quantity": 2},
            {"product_id": product.id, "unit_price": Decimal("5000"), "quantity": 1},
        ],
    }
    data.update(overrides)
    return data


class TestCreate:
    def test_creates_order_and_items(self, repo, cashier_user, customer, product):
        order = repo.create(_data(cashier_user, customer, product))

        order.refresh_from_db()
        assert order.total_amount == Decimal("55000.00")
        assert order.grand_total == Decimal("65000.00")
        assert order.notes == ""
        assert sorted(i.quantity for i in order.items.all()) == [1, 2]

    def test_missing_shipping_defaults_to_zero(
        self, repo, cashier_user, customer, product
    ):
        order = repo.create(_data(cashier_user, customer, product, shipping_cost=None))
        assert order.grand_total == order.total_amount


class TestReads:
    def test_get_by_id_loads_relations(
        self, repo, order, django_assert_num_queries
    ):
        with django_assert_num_queries(3):
            found = repo.get_by_id(order.id)
            names = [item.product.name for item in found.items.all()]
            _ = found.customer.name, found.cashier.username
        assert names == ["Jamur Crispy Original"]

    @pytest.mark.parametrize("bad_id", ["nope", "0192f0c4-0000-7000-8000-000000000000"])
    def test_get_by_id_missing(self, repo, bad_id):
        assert repo.get_by_id(bad_id) is None

    def test_list_newest_first_with_filters(self, repo, make_order):
        first = make_order()
        second = make_order(payment_status=PaymentStatus.PAID)
        assert list(repo.list()) == [second, first]
        assert list(repo.list({"payment_status": PaymentStatus.PAID})) == [second]

    def test_list_notification_failed_oldest_first(self, repo, make_order):
        first = make_order(notification_status=NotificationStatus.FAILED)
        make_order(notification_status=NotificationStatus.SENT)
        third = make_order(notification_status=NotificationStatus.FAILED)
        assert repo.list_notification_failed() == [first, third]


class TestDelete:
    def test_delete(self, repo, order):
        assert repo.delete(order.id) is True
        assert not Order.objects.filter(id=order.id).exists()
        assert repo.delete(order.id) is False

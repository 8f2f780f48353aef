"""Performance regression tests: constant query count (N+1 prevention).

List and retrieve endpoints must run a bounded number of SQL queries
regardless of how many rows they return, proving ``select_related`` /
``prefetch_related`` are applied.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.customers.models import Customer


@pytest.fixture()
def many_orders(make_order, make_product):
    products = [make_product(name=f"Produk {i}") for i in range(3)]
    orders = []
    for i in range(12):
        customer = Customer.objects.create(
            name=f"Pelanggan {i}", phone_number=f"0812000000{i:02d}"
        )
        orders.append(
            make_order(
                lines=[(p, Decimal("10000"), i % 3 + 1) for p in products],
                order_customer=customer,
            )
        )
    return orders


class TestQueryCount:
    def test_order_list_query_count_is_constant(
        self, owner_client, many_orders, django_assert_max_num_queries
    ):
        # auth groups + count + orders + items + products
        with django_assert_max_num_queries(8):
            response = owner_client.get("/api/v1/orders/")
        assert response.status_code == 200
        assert len(response.data["results"]) == 12

    def test_order_detail_query_count(
        self, owner_client, many_orders, django_assert_max_num_queries
    ):
        with django_assert_max_num_queries(6):
            response = owner_client.get(f"/api/v1/orders/{many_orders[0].id}/")
        assert response.status_code == 200

    def test_product_list_query_count_is_constant(
        self, owner_client, make_product, django_assert_max_num_queries
    ):
        for i in range(10):
            make_product(name=f"Produk {i:02d}")
        with django_assert_max_num_queries(5):
            response = owner_client.get("/api/v1/products/")
        assert response.status_code == 200

    def test_pos_catalog_query_count(
        self, cashier_client, make_product, django_assert_max_num_queries
    ):
        for i in range(10):
            make_product(name=f"Produk {i:02d}")
        with django_assert_max_num_queries(5):
            response = cashier_client.get("/api/v1/dashboard/pos/")
        assert response.status_code == 200

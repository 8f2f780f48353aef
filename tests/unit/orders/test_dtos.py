"""Unit tests for order DTOs."""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.orders.dtos import CartItemDTO, CreateOrderDTO

pytestmark = pytest.mark.unit


def _item(**overrides):
    data = {"product_id": uuid.uuid4(), "price": Decimal("25000"), "quantity": 2}
    data.update(overrides)
    return CartItemDTO(**data)


def _order(**overrides):
    data = {
        "customer_name": "Budi",
        "customer_phone": "081234567890",
        "shipping_cost": Decimal("10000"),
        "cart_items": [_item()],
    }
    data.update(overrides)
    return CreateOrderDTO(**data)


class TestCartItemDTO:
    def test_line_total(self):
        assert _item(quantity=3).line_total == Decimal("75000")

    def test_zero_price_allowed(self):
        assert _item(price=Decimal("0")).line_total == 0

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _item(price=Decimal("-1"))

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_must_be_positive(self, quantity):
        with pytest.raises(ValidationError):
            _item(quantity=quantity)


class TestCreateOrderDTO:
    def test_totals(self):
        dto = _order(cart_items=[_item(), _item(price=Decimal("5000"), quantity=1)])
        assert dto.total_amount == Decimal("55000")
        assert dto.grand_total == Decimal("65000")

    def test_defaults(self):
        dto = _order()
        assert dto.is_direct_order is False
        assert dto.notes is None
        assert dto.customer_address is None

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError):
            _order(cart_items=[])

    def test_negative_shipping_rejected(self):
        with pytest.raises(ValidationError):
            _order(shipping_cost=Decimal("-1"))

    def test_duplicate_products_allowed(self):
        product_id = uuid.uuid4()
        dto = _order(
            cart_items=[_item(product_id=product_id), _item(product_id=product_id)]
        )
        assert len(dto.cart_items) == 2

    def test_customer_dto(self):
        dto = _order(customer_address="  ")
        customer = dto.to_customer_dto()
        assert customer.phone_number == "081234567890"
        assert customer.name == "Budi"
        assert customer.address is None

"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from decimal import Decimal

from django.contrib.auth import get_user_model
from rest_framework import serializers

from modules.customers.serializers import CustomerSerializer
from modules.orders.constants import PaymentStatus
from modules.orders.models import Order, OrderItem

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CartItemSerializer(serializers.Serializer):
    """Validates a single cart line."""

    product_id = serializers.UUIDField()
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0")
    )
    quantity = serializers.IntegerField(min_value=1)


class CreateOrderSerializer(serializers.Serializer):
    """Validates the checkout payload sent by the register."""

    customer_name = serializers.CharField(max_length=255)
    customer_phone = serializers.CharField(max_length=255)
    customer_address = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    shipping_cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0")
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    cart_items = CartItemSerializer(many=True, allow_empty=False)
    is_direct_order = serializers.BooleanField(required=False, default=False)


class PaymentStatusSerializer(serializers.Serializer):
    payment_status = serializers.ChoiceField(choices=PaymentStatus.choices)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class CashierSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()

    class Meta:
        model = get_user_model()
        fields = ["id", "username", "name"]
        read_only_fields = fields

    def get_name(self, obj) -> str:
        return obj.get_full_name() or obj.get_username()


class OrderItemSerializer(serializers.ModelSerializer):
    """Read serializer for order items; ``quantity`` is derived."""

    product_name = serializers.CharField(source="product.name", read_only=True)
    quantity = serializers.IntegerField(read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product_id",
            "product_name",
            "unit_price",
            "quantity",
            "subtotal",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with customer, cashier and items."""

    customer = CustomerSerializer(read_only=True)
    cashier = CashierSerializer(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "customer",
            "cashier",
            "total_amount",
            "shipping_cost",
            "grand_total",
            "payment_status",
            "notification_status",
            "notes",
            "created_at",
            "updated_at",
            "items",
        ]
        read_only_fields = fields


class OrderListSerializer(OrderSerializer):
    """Order row in the back-office list (same relations, no ``updated_at``)."""

    class Meta(OrderSerializer.Meta):
        fields = [
            field for field in OrderSerializer.Meta.fields if field != "updated_at"
        ]
        read_only_fields = fields

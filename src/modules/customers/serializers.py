"""Customer DRF serializers (read-only: customers are written by the register)."""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Customer
        fields = [
            "id",
            "name",
            "phone_number",
            "address",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

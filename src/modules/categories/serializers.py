from __future__ import annotations

from rest_framework import serializers

from modules.categories.models import Category
from modules.core.fields import FormBooleanField


class CategorySerializer(serializers.ModelSerializer):
    """Read serializer; ``products_count`` is present on annotated querysets."""

    products_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Category
        fields = ["id", "name", "is_active", "products_count"]
        read_only_fields = fields


class CategorySummarySerializer(serializers.ModelSerializer):
    """Category as embedded in product payloads."""

    class Meta:
        model = Category
        fields = ["id", "name", "is_active"]
        read_only_fields = fields


class CategoryWriteSerializer(serializers.Serializer):
    """Validates create / update payloads; ``is_active`` omitted keeps the default."""

    name = serializers.CharField(max_length=100)
    is_active = FormBooleanField(required=False)

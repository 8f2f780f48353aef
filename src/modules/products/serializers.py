"""Product DRF serializers for API input/output.

``ProductWriteSerializer`` validates multipart form input (including the
image upload); the view turns its ``validated_data`` into a DTO for the
Service Layer.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.core.validators import FileExtensionValidator
from rest_framework import serializers

from modules.categories.models import Category
from modules.categories.serializers import CategorySummarySerializer
from modules.core.fields import FormBooleanField
from modules.products.models import IMAGE_EXTENSIONS, IMAGE_MAX_BYTES, Product


def validate_image_size(image) -> None:
    if image.size > IMAGE_MAX_BYTES:
        raise ValidationError(
            f"Image must be at most {IMAGE_MAX_BYTES // 1024} KB.",
            code="max_size",
        )


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class ProductWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    category = serializers.PrimaryKeyRelatedField(queryset=Category.objects.all())
    description = serializers.CharField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    image = serializers.ImageField(
        validators=[FileExtensionValidator(IMAGE_EXTENSIONS), validate_image_size],
    )
    is_active = FormBooleanField(required=False)


class ProductUpdateSerializer(ProductWriteSerializer):
    image = serializers.ImageField(
        required=False,
        validators=[FileExtensionValidator(IMAGE_EXTENSIONS), validate_image_size],
    )


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer with the category embedded."""

    category = CategorySummarySerializer(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "category_id",
            "category",
            "name",
            "description",
            "price",
            "image",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

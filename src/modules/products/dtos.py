"""Product DTOs for the Service Layer.

Built by the views from already-validated serializer data.  The uploaded
image travels as the Django ``UploadedFile`` itself, hence
``arbitrary_types_allowed``.

- ``CreateProductDTO``: input for product creation (image required).
- ``UpdateProductDTO``: input for product updates (image optional).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from django.core.files.uploadedfile import UploadedFile
from pydantic import BaseModel, ConfigDict, field_validator


class _ProductFieldsDTO(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    category_id: int
    name: str
    description: str
    price: Decimal
    is_active: bool = True

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    @field_validator("name", "description")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Field must not be empty.")
        return v.strip()


class CreateProductDTO(_ProductFieldsDTO):
    image: UploadedFile


class UpdateProductDTO(_ProductFieldsDTO):
    image: Optional[UploadedFile] = None

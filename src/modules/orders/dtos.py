"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CartItemDTO``: one line of the register cart.
- ``CreateOrderDTO``: the checkout request (customer + cart).
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.customers.dtos import UpsertCustomerDTO


class CartItemDTO(BaseModel):
    """A single cart line.

    ``price`` is the price shown at the register when the product was added
    to the cart; it is stored on the order item as-is.
    """

    model_config = ConfigDict(frozen=True)

    product_id: UUID
    price: Decimal
    quantity: int

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price must not be negative.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class CreateOrderDTO(BaseModel):
    """Checkout request from the register.

    Validates:
    - ``cart_items`` must contain at least one line.
    - ``shipping_cost`` must not be negative.
    """

    model_config = ConfigDict(frozen=True)

    customer_name: str
    customer_phone: str
    customer_address: Optional[str] = None
    shipping_cost: Decimal = Decimal("0")
    notes: Optional[str] = None
    cart_items: List[CartItemDTO]
    is_direct_order: bool = False

    @field_validator("cart_items")
    @classmethod
    def cart_must_not_be_empty(cls, v: List[CartItemDTO]) -> List[CartItemDTO]:
        if not v:
            raise ValueError("Cart must have at least one item.")
        return v

    @field_validator("shipping_cost")
    @classmethod
    def shipping_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Shipping cost must not be negative.")
        return v

    @property
    def total_amount(self) -> Decimal:
        return sum((item.line_total for item in self.cart_items), Decimal("0"))

    @property
    def grand_total(self) -> Decimal:
        return self.total_amount + self.shipping_cost

    def to_customer_dto(self) -> UpsertCustomerDTO:
        return UpsertCustomerDTO(
            phone_number=self.customer_phone,
            name=self.customer_name,
            address=self.customer_address,
        )

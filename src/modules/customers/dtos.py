"""Customer DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class UpsertCustomerDTO(BaseModel):
    """Customer details captured at checkout.

    ``address`` of ``None`` means "not provided": an existing customer keeps
    the address on file.
    """

    model_config = ConfigDict(frozen=True)

    phone_number: str
    name: str
    address: Optional[str] = None

    @field_validator("phone_number", "name")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Field must not be empty.")
        return v.strip()

    @field_validator("address")
    @classmethod
    def blank_address_is_missing(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

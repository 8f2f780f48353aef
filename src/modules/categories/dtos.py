"""Category DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

NAME_MAX_LENGTH = 100


def _clean_name(v: str) -> str:
    if not isinstance(v, str) or not v.strip():
        raise ValueError("Name must not be empty.")
    v = v.strip()
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters.")
    return v


class CreateCategoryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        return _clean_name(v)


class UpdateCategoryDTO(BaseModel):
    """``name`` is always required; ``is_active`` keeps its value when omitted."""

    model_config = ConfigDict(frozen=True)

    name: str
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        return _clean_name(v)

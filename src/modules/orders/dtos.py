"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderEntryDTO``: input for a single requested pizza entry.
- ``CreateOrderDTO``: input for order creation (nested entries).
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateOrderEntryDTO(BaseModel):
    """Immutable DTO for a single entry in a creation request.

    ``type`` is the catalog code (e.g. ``MARG``); it is resolved against
    the catalog by the Service Layer, not here.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    quantity: int
    additional_ingredients: List[str] = Field(default_factory=list)

    @field_validator("type")
    @classmethod
    def type_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Entry type cannot be empty.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``username`` must not be blank.
    - ``entries`` must contain at least one entry.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    entries: List[CreateOrderEntryDTO]

    @field_validator("username")
    @classmethod
    def username_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("User name cannot be empty.")
        return v

    @field_validator("entries")
    @classmethod
    def entries_must_not_be_empty(
        cls, v: List[CreateOrderEntryDTO]
    ) -> List[CreateOrderEntryDTO]:
        if not v:
            raise ValueError("Order entries list cannot be empty.")
        return v

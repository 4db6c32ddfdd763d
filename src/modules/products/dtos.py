"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductInputDTO``: writable product fields for create and update.
- ``Unpaginated`` / ``Paged``: how a listing was requested, resolved once
  from the query string by ``page_request_from_query``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for create/update requests.

    Carries no identifier: create lets the store assign it and update takes
    it from the URL.

    Validates:
    - ``name`` is not blank (surrounding whitespace is stripped).
    - ``price`` is not negative.
    - ``stock`` is not negative.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    description: str = ""
    stock: int = 0

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("El nombre del producto no puede estar vacío.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("El precio no puede ser negativo.")
        return v

    @field_validator("stock")
    @classmethod
    def stock_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("El stock no puede ser negativo.")
        return v

    @classmethod
    def from_validated_data(cls, data: Mapping[str, Any]) -> ProductInputDTO:
        """Build the DTO from ``ProductSerializer.validated_data``."""
        return cls(
            name=data["name"],
            price=data["price"],
            description=data.get("description", ""),
            stock=data.get("stock", 0),
        )


# ---------------------------------------------------------------------------
# Listing mode
# ---------------------------------------------------------------------------


class Unpaginated(BaseModel):
    """The whole collection was requested."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unpaginated"] = "unpaginated"


class Paged(BaseModel):
    """A single zero-based page of ``size`` items was requested."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["paged"] = "paged"
    page: int = Field(ge=0)
    size: int = Field(ge=1)


PageRequest = Union[Unpaginated, Paged]


def page_request_from_query(page: Optional[int], size: Optional[int]) -> PageRequest:
    """Paged only when both ``page`` and ``size`` were supplied."""
    if page is None or size is None:
        return Unpaginated()
    return Paged(page=page, size=size)

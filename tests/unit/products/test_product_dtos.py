"""Unit tests for Product DTOs.

Covers:
- ProductInputDTO: validation, name stripping, frozen immutability.
- Page request resolution: Unpaginated vs Paged.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import (
    Paged,
    ProductInputDTO,
    Unpaginated,
    page_request_from_query,
)

pytestmark = pytest.mark.unit


# ===========================================================================
# ProductInputDTO
# ===========================================================================


class TestProductInputDTOValid:
    def test_create_with_valid_data(self):
        dto = ProductInputDTO(name="Widget", price=Decimal("19.99"))
        assert dto.name == "Widget"
        assert dto.price == Decimal("19.99")

    def test_optional_fields_default(self):
        dto = ProductInputDTO(name="Widget", price=Decimal("10.00"))
        assert dto.description == ""
        assert dto.stock == 0

    def test_name_is_stripped(self):
        dto = ProductInputDTO(name="  Widget  ", price=Decimal("10.00"))
        assert dto.name == "Widget"

    def test_zero_price_is_valid(self):
        dto = ProductInputDTO(name="Freebie", price=Decimal("0"))
        assert dto.price == Decimal("0")

    def test_from_validated_data(self):
        dto = ProductInputDTO.from_validated_data(
            {"name": "Widget", "price": Decimal("5.00"), "stock": 3}
        )
        assert dto.name == "Widget"
        assert dto.stock == 3
        assert dto.description == ""


class TestProductInputDTOValidation:
    def test_blank_name_raises(self):
        with pytest.raises(ValidationError, match="no puede estar vacío"):
            ProductInputDTO(name="   ", price=Decimal("10.00"))

    def test_negative_price_raises(self):
        with pytest.raises(ValidationError, match="precio no puede ser negativo"):
            ProductInputDTO(name="Widget", price=Decimal("-1.00"))

    def test_negative_stock_raises(self):
        with pytest.raises(ValidationError, match="stock no puede ser negativo"):
            ProductInputDTO(name="Widget", price=Decimal("1.00"), stock=-1)

    def test_is_immutable(self):
        dto = ProductInputDTO(name="Widget", price=Decimal("10.00"))
        with pytest.raises(ValidationError):
            dto.name = "Changed"


# ===========================================================================
# Page request
# ===========================================================================


class TestPageRequestFromQuery:
    def test_both_present_is_paged(self):
        request = page_request_from_query(2, 5)
        assert request == Paged(page=2, size=5)

    @pytest.mark.parametrize("page,size", [(None, None), (0, None), (None, 3)])
    def test_any_missing_is_unpaginated(self, page, size):
        assert isinstance(page_request_from_query(page, size), Unpaginated)

    def test_negative_page_rejected(self):
        with pytest.raises(ValidationError):
            Paged(page=-1, size=5)

    def test_zero_size_rejected(self):
        with pytest.raises(ValidationError):
            Paged(page=0, size=0)

"""Product service layer (Use Cases).

Orchestrates the Product use-cases, delegating persistence to the
injected ``IProductRepository``.

- Listings are always sorted by name; paging is delegated to the
  repository.
- Create never reuses an identifier; update is a save-by-id (upsert).
- Delete is verified by reading the row back afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.dtos import Paged, PageRequest
from modules.products.models import Product
from modules.products.repositories.interfaces import SORT_BY_NAME
from shared.domain.result import Result

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, request: PageRequest) -> List[Product]:
        """Return the requested page, or every product, sorted by name."""
        if isinstance(request, Paged):
            return self._repo.find_page(request.page, request.size, SORT_BY_NAME)
        return self._repo.find_all(SORT_BY_NAME)

    def get_product(self, id: int) -> Optional[Product]:
        """Retrieve a single product, ``None`` when it does not exist."""
        return self._repo.find_by_id(id)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductInputDTO) -> Result[Product]:
        """Persist a new product; the store assigns its identifier."""
        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock=dto.stock,
        )
        result = self._repo.save(product)
        logger.info("product.create_requested", outcome=type(result).__name__)
        return result

    def update_product(self, id: int, dto: ProductInputDTO) -> Result[Product]:
        """Overwrite product ``id`` with ``dto``, inserting it when absent.

        The identifier always comes from the caller, never from the payload.
        An existing row keeps its creation timestamp.
        """
        product = self._repo.find_by_id(id)
        if product is None:
            product = Product(id=id)
        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.stock = dto.stock

        log = logger.bind(product_id=id)
        result = self._repo.save(product)
        log.info("product.update_requested", outcome=type(result).__name__)
        return result

    def delete_product(self, id: int) -> bool:
        """Delete product ``id`` if present.

        Returns ``True`` when a follow-up look-up no longer finds it, which
        includes deleting an id that never existed.
        """
        self._repo.delete(id)
        deleted = self._repo.find_by_id(id) is None
        if not deleted:
            logger.warning("product.delete_not_applied", product_id=id)
        return deleted

"""Product repository interface.

Pins ``IRepository`` to the Product aggregate and fixes the listing
order the API guarantees.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product

# Name ascending, ties broken by id so that pages never overlap.
SORT_BY_NAME: Tuple[str, ...] = ("name", "id")


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

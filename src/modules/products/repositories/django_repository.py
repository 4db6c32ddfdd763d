"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern (``None`` for a missing row) and
writes never raise data-access errors: a ``DatabaseError`` is logged and
returned as ``Failure`` so the caller decides how to report it.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog

from django.core.management.color import no_style
from django.db import DatabaseError, connections, router, transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from shared.domain.result import Failure, Result, Success, most_specific_cause

logger = structlog.get_logger(__name__)

# Largest value a 64-bit signed SQL integer (LIMIT, OFFSET, BIGINT pk) can hold.
MAX_SQL_INTEGER = 2**63 - 1


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_all(self, ordering: Sequence[str]) -> List[Product]:
        return list(Product.objects.order_by(*ordering))

    def find_page(self, page: int, size: int, ordering: Sequence[str]) -> List[Product]:
        """Slice the ordered queryset into ``LIMIT size OFFSET page * size``."""
        if page < 0 or size < 1:
            raise ValueError("page must be >= 0 and size must be >= 1")
        offset = page * size
        if offset > MAX_SQL_INTEGER:
            return []
        end = min(offset + size, MAX_SQL_INTEGER)
        return list(Product.objects.order_by(*ordering)[offset:end])

    def find_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.filter(pk=id).first()

    def save(self, entity: Product) -> Result[Product]:
        """Persist (create or update) a product.

        An entity carrying a primary key that does not exist yet is
        inserted with that key, and the table's id sequence is moved past
        it so later creates never collide with it.
        """
        explicit_key = entity._state.adding and entity.pk is not None
        try:
            with transaction.atomic():
                entity.save()
                if explicit_key:
                    self._reset_id_sequence()
        except DatabaseError as exc:
            cause = most_specific_cause(exc)
            logger.error(
                "product.save_failed",
                product_id=entity.pk,
                error=str(cause),
                error_type=type(cause).__name__,
            )
            return Failure(cause=str(cause) or type(cause).__name__, error=exc)
        logger.info("product.saved", product_id=entity.pk)
        return Success(entity)

    def _reset_id_sequence(self) -> None:
        connection = connections[router.db_for_write(Product)]
        statements = connection.ops.sequence_reset_sql(no_style(), [Product])
        if not statements:
            return
        with connection.cursor() as cursor:
            for sql in statements:
                cursor.execute(sql)
        logger.info("product.id_sequence_reset")

    @transaction.atomic
    def delete(self, id: int) -> None:
        deleted, _ = Product.objects.filter(pk=id).delete()
        logger.info("product.deleted", product_id=id, rows=deleted)

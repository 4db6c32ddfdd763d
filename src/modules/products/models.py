"""Product model.

Rules implemented at the persistence level:
- The identifier is a store-assigned auto-incrementing integer.
- ``name`` must not be blank (enforced by ``clean`` and by the API layer).
- ``price`` cannot be negative (validator + database CHECK constraint).
- ``stock`` cannot be negative (``PositiveIntegerField``).
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import TimestampedModel

logger = structlog.get_logger(__name__)


class Product(TimestampedModel):
    """A catalogue product.

    Listings are always sorted by ``name``; ``Meta.ordering`` only sets the
    default for ad-hoc querysets.
    """

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    stock = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "productos"
        ordering = ["name", "id"]
        indexes = [
            models.Index(fields=["name"], name="productos_name_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="productos_price_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.name is not None:
            self.name = self.name.strip()
        if not self.name:
            raise ValidationError({"name": "El nombre del producto no puede estar vacío."})

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info("product_created", product_id=self.id, name=self.name)

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"

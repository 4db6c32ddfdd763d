"""Product DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views): it maps the
Spanish wire names (``nombre``, ``precio`` ...) onto the model fields and
produces the per-field validation messages returned under ``errores``.
Business logic lives in the Service Layer, which receives Pydantic DTOs
from ``dtos.py``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List

from rest_framework import serializers

from modules.products.models import Product

# Upper bound of ``PositiveIntegerField`` on every supported backend.
MAX_STOCK = 2147483647


class ProductSerializer(serializers.ModelSerializer):
    """Read/write serializer for the Product resource."""

    nombre = serializers.CharField(
        source="name",
        max_length=255,
        error_messages={
            "required": "El nombre del producto es obligatorio.",
            "null": "El nombre del producto es obligatorio.",
            "blank": "El nombre del producto no puede estar vacío.",
            "max_length": "El nombre del producto no puede superar los {max_length} caracteres.",
            "invalid": "El nombre del producto debe ser un texto.",
        },
    )
    descripcion = serializers.CharField(
        source="description",
        default="",
        allow_blank=True,
        error_messages={"invalid": "La descripción debe ser un texto."},
    )
    precio = serializers.DecimalField(
        source="price",
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        error_messages={
            "required": "El precio es obligatorio.",
            "null": "El precio es obligatorio.",
            "invalid": "El precio debe ser un número.",
            "min_value": "El precio no puede ser negativo.",
            "max_digits": "El precio no puede tener más de {max_digits} dígitos.",
            "max_decimal_places": "El precio no puede tener más de {max_decimal_places} decimales.",
            "max_whole_digits": "El precio no puede tener más de {max_whole_digits} dígitos enteros.",
        },
    )
    stock = serializers.IntegerField(
        default=0,
        min_value=0,
        max_value=MAX_STOCK,
        error_messages={
            "invalid": "El stock debe ser un número entero.",
            "min_value": "El stock no puede ser negativo.",
            "max_value": "El stock no puede superar {max_value} unidades.",
        },
    )
    fecha_creacion = serializers.DateTimeField(source="created_at", read_only=True)
    fecha_actualizacion = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "nombre",
            "descripcion",
            "precio",
            "stock",
            "fecha_creacion",
            "fecha_actualizacion",
        ]
        read_only_fields = ["id"]


def flatten_errors(errors: Any) -> List[str]:
    """Collapse ``serializer.errors`` into a flat list of messages.

    Field order is preserved; nested dicts/lists are walked depth-first.
    """
    messages: List[str] = []
    if isinstance(errors, dict):
        for value in errors.values():
            messages.extend(flatten_errors(value))
    elif isinstance(errors, (list, tuple)):
        for value in errors:
            messages.extend(flatten_errors(value))
    elif errors is not None:
        messages.append(str(errors))
    return messages


class ProductListQuerySerializer(serializers.Serializer):
    """Optional ``page`` / ``size`` query parameters of the listing."""

    page = serializers.IntegerField(
        required=False,
        min_value=0,
        help_text="Zero-based page index. Only used together with size.",
    )
    size = serializers.IntegerField(
        required=False,
        min_value=1,
        help_text="Page size. Only used together with page.",
    )

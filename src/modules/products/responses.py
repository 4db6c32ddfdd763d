"""HTTP response builders for the Product API.

Status-code choices kept for compatibility with existing clients:

- a missing product on ``GET /productos/{id}`` is ``204 No Content``,
  not ``404``;
- a successful update is ``201 Created``, like create, not ``200``.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from django.http import HttpResponse
from rest_framework import status
from rest_framework.response import Response

from modules.products.models import Product
from modules.products.serializers import ProductSerializer, flatten_errors

CREATED_MESSAGE = "El producto con id {id} se ha creado exitosamente"
UPDATED_MESSAGE = "El producto con id {id} se ha modificado exitosamente"
CREATE_FAILED_MESSAGE = "No se ha podido crear el producto: {cause}"
UPDATE_FAILED_MESSAGE = "No se ha podido actualizar el producto: {cause}"
DELETED_MESSAGE = "El producto se ha borrado correctamente"
DELETE_FAILED_MESSAGE = "No se ha podido eliminar"


def no_content() -> Response:
    return Response(status=status.HTTP_204_NO_CONTENT)


def product_list(products: Iterable[Product]) -> Response:
    """200 with the serialized products, 204 when there are none."""
    items: List[Product] = list(products)
    if not items:
        return no_content()
    return Response(ProductSerializer(items, many=True).data)


def product_detail(product: Product | None) -> Response:
    if product is None:
        return no_content()
    return Response(ProductSerializer(product).data)


def validation_errors(errors: Any) -> Response:
    """400 with every validation message under ``errores``."""
    return Response(
        {"errores": flatten_errors(errors)},
        status=status.HTTP_400_BAD_REQUEST,
    )


def product_saved(message: str, product: Product) -> Response:
    """201 with a confirmation message and the persisted product."""
    return Response(
        {
            "mensaje": message.format(id=product.pk),
            "producto": ProductSerializer(product).data,
        },
        status=status.HTTP_201_CREATED,
    )


def save_failed(message: str, cause: str) -> Response:
    return Response(
        {"mensaje": message.format(cause=cause)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def text(message: str, status_code: int) -> HttpResponse:
    """Plain-text response, used by delete."""
    return HttpResponse(
        message,
        status=status_code,
        content_type="text/plain; charset=utf-8",
    )

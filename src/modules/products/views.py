"""Product API views.

Exposes the ``ProductService`` over HTTP at ``/productos`` using a DRF
ViewSet.  Each handler validates its input, calls the service and hands
the outcome to ``responses``.  Data-access failures arrive as
``Failure`` values, so the view never catches generic exceptions.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from django.http import HttpResponse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products import responses
from modules.products.dtos import ProductInputDTO, page_request_from_query
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductListQuerySerializer, ProductSerializer
from modules.products.services import ProductService
from shared.domain.result import Failure


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the repository named by
    ``repository_class`` (DIP).  Does **not** extend ``ModelViewSet``:
    all ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    # Ids beyond 18 digits cannot be a BIGINT primary key.
    lookup_value_regex = r"[0-9]{1,18}"
    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[ProductListQuerySerializer],
        responses={
            200: ProductSerializer(many=True),
            204: OpenApiResponse(description="No products (or empty page)."),
        },
    )
    def list(self, request: Request) -> Response:
        """GET /productos?page=&size="""
        query = ProductListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page_request = page_request_from_query(
            query.validated_data.get("page"),
            query.validated_data.get("size"),
        )
        return responses.product_list(self._service.list_products(page_request))

    @extend_schema(
        responses={
            200: ProductSerializer,
            204: OpenApiResponse(description="Product not found."),
        },
    )
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /productos/{pk}"""
        return responses.product_detail(self._service.get_product(int(pk)))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductSerializer)
    def create(self, request: Request) -> Response:
        """POST /productos"""
        serializer = ProductSerializer(data=request.data)
        if not serializer.is_valid():
            return responses.validation_errors(serializer.errors)

        dto = ProductInputDTO.from_validated_data(serializer.validated_data)
        result = self._service.create_product(dto)
        if isinstance(result, Failure):
            return responses.save_failed(responses.CREATE_FAILED_MESSAGE, result.cause)
        return responses.product_saved(responses.CREATED_MESSAGE, result.value)

    @extend_schema(request=ProductSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /productos/{pk}"""
        serializer = ProductSerializer(data=request.data)
        if not serializer.is_valid():
            return responses.validation_errors(serializer.errors)

        dto = ProductInputDTO.from_validated_data(serializer.validated_data)
        result = self._service.update_product(int(pk), dto)
        if isinstance(result, Failure):
            return responses.save_failed(responses.UPDATE_FAILED_MESSAGE, result.cause)
        return responses.product_saved(responses.UPDATED_MESSAGE, result.value)

    @extend_schema(responses={200: OpenApiTypes.STR, 400: OpenApiTypes.STR})
    def destroy(self, request: Request, pk: str | None = None) -> HttpResponse:
        """DELETE /productos/{pk}"""
        if self._service.delete_product(int(pk)):
            return responses.text(responses.DELETED_MESSAGE, status.HTTP_200_OK)
        return responses.text(responses.DELETE_FAILED_MESSAGE, status.HTTP_400_BAD_REQUEST)

"""Product API views (owner back office).

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Create and update accept multipart form data because they carry the
product image.  Domain exceptions are translated into HTTP responses.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.mixins import ListModelMixin
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.pagination import ProductPagination
from modules.core.permissions import IsOwner
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductInUse, ProductNotFound
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductSerializer,
    ProductUpdateSerializer,
    ProductWriteSerializer,
)
from modules.products.services import ProductService

NOT_FOUND = {"detail": "Product not found."}


class ProductViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Product CRUD operations.

    Does **not** extend ``ModelViewSet``: all writes go through the
    service/repository layer.
    """

    permission_classes = [IsOwner]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    filterset_class = ProductFilter
    filter_backends = [DjangoFilterBackend]
    pagination_class = ProductPagination
    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def get_queryset(self):
        return self._service.list_products()

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/ (multipart)"""
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            dto = CreateProductDTO(
                category_id=data["category"].id,
                name=data["name"],
                description=data["description"],
                price=data["price"],
                is_active=data.get("is_active", True),
                image=data["image"],
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        product = self._service.create_product(dto)
        return Response(
            self.get_serializer(product).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{pk}/ (multipart)"""
        serializer = ProductUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            dto = UpdateProductDTO(
                category_id=data["category"].id,
                name=data["name"],
                description=data["description"],
                price=data["price"],
                is_active=data.get("is_active", True),
                image=data.get("image"),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except ProductInUse as exc:
            return Response(
                {"success": False, "message": str(exc)},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["patch"], url_path="toggle-status")
    def toggle_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/toggle-status/"""
        try:
            product = self._service.toggle_status(pk)
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(
            {
                "success": True,
                "is_active": product.is_active,
                "message": (
                    "Product activated." if product.is_active else "Product deactivated."
                ),
            }
        )

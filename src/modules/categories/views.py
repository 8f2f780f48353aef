"""Category API views (owner back office).

Domain exceptions are caught and translated into HTTP responses;
payload validation errors from the DTOs become 400s.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
from modules.categories.exceptions import CategoryHasProducts, CategoryNotFound
from modules.categories.models import Category
from modules.categories.repositories.django_repository import (
    CategoryDjangoRepository,
)
from modules.categories.serializers import (
    CategorySerializer,
    CategoryWriteSerializer,
)
from modules.categories.services import CategoryService
from modules.core.permissions import IsOwner

NOT_FOUND = {"detail": "Category not found."}


class CategoryViewSet(GenericViewSet):
    """Categories are few, so the list is returned unpaginated."""

    permission_classes = [IsOwner]
    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(repository=CategoryDjangoRepository())

    def get_queryset(self):
        return self._service.list_categories()

    def list(self, request: Request) -> Response:
        """GET /api/v1/categories/"""
        serializer = CategorySerializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/categories/"""
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            dto = CreateCategoryDTO(
                name=data["name"],
                is_active=data.get("is_active", True),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        category = self._service.create_category(dto)
        return Response(
            CategorySerializer(category).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/categories/{pk}/"""
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            dto = UpdateCategoryDTO(
                name=data["name"],
                is_active=data.get("is_active"),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            category = self._service.update_category(pk, dto)
        except CategoryNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(CategorySerializer(category).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/categories/{pk}/"""
        try:
            self._service.delete_category(pk)
        except CategoryNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except CategoryHasProducts as exc:
            return Response(
                {"success": False, "message": str(exc)},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["patch"], url_path="toggle-status")
    def toggle_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/categories/{pk}/toggle-status/"""
        try:
            category = self._service.toggle_status(pk)
        except CategoryNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(
            {
                "success": True,
                "is_active": category.is_active,
                "message": (
                    "Category activated."
                    if category.is_active
                    else "Category deactivated."
                ),
            }
        )

"""Dashboard API views."""

from __future__ import annotations

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.categories.serializers import CategorySummarySerializer
from modules.core.permissions import IsCashierOrOwner, IsOwner
from modules.dashboard.services import DashboardService
from modules.products.serializers import ProductSerializer


class OwnerDashboardView(APIView):
    permission_classes = [IsOwner]

    def get(self, request: Request) -> Response:
        """GET /api/v1/dashboard/owner/"""
        return Response(DashboardService().owner_summary())


class PosCatalogView(APIView):
    """Everything the register needs to build a cart."""

    permission_classes = [IsCashierOrOwner]

    def get(self, request: Request) -> Response:
        """GET /api/v1/dashboard/pos/"""
        service = DashboardService()
        context = {"request": request}
        return Response(
            {
                "categories": CategorySummarySerializer(
                    service.pos_categories(), many=True
                ).data,
                "products": ProductSerializer(
                    service.pos_products(), many=True, context=context
                ).data,
            }
        )

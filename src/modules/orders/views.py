"""Order API views.

``PosOrderViewSet`` is the register's checkout endpoint (cashier or
owner).  ``OrderViewSet`` is the owner's back office: list, detail,
payment status and WhatsApp resends.

Both go through ``OrderService``; domain exceptions are translated into
HTTP status codes here.
"""

from __future__ import annotations

import structlog
from django.db import DatabaseError
from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.pagination import OrderPagination
from modules.core.permissions import IsCashierOrOwner, IsOwner
from modules.orders.dtos import CartItemDTO, CreateOrderDTO
from modules.orders.exceptions import (
    InvalidPaymentStatus,
    OrderNotFound,
    ProductNotFound,
)
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.serializers import (
    CreateOrderSerializer,
    OrderListSerializer,
    OrderSerializer,
    PaymentStatusSerializer,
)
from modules.orders.services import build_order_service

logger = structlog.get_logger(__name__)

NOT_FOUND = {"detail": "Order not found."}


class PosOrderViewSet(GenericViewSet):
    """Checkout from the register cart."""

    permission_classes = [IsCashierOrOwner]
    throttle_scope = "order_creation"
    serializer_class = CreateOrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_order_service()

    def create(self, request: Request) -> Response:
        """POST /api/v1/pos/orders/"""
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            dto = CreateOrderDTO(
                customer_name=data["customer_name"],
                customer_phone=data["customer_phone"],
                customer_address=data.get("customer_address"),
                shipping_cost=data["shipping_cost"],
                notes=data.get("notes"),
                cart_items=[
                    CartItemDTO(
                        product_id=item["product_id"],
                        price=item["price"],
                        quantity=item["quantity"],
                    )
                    for item in data["cart_items"]
                ],
                is_direct_order=data.get("is_direct_order", False),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            placed = self._service.place_order(dto, cashier=request.user)
        except ProductNotFound as exc:
            return Response(
                {"success": False, "message": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except DatabaseError as exc:
            logger.exception("order.creation_failed", error=str(exc))
            return Response(
                {"success": False, "message": f"Failed to create order: {exc}"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {
                "success": True,
                "message": "Order created successfully",
                "order_id": str(placed.order.id),
                "wa_status": placed.notification.status,
                "wa_message": placed.notification.message,
            },
            status=status.HTTP_201_CREATED,
        )


class OrderViewSet(ListModelMixin, GenericViewSet):
    """Back-office order management.

    Does **not** extend ``ModelViewSet``: orders are only created by the
    register and only their payment / notification status changes here.
    """

    permission_classes = [IsOwner]
    filterset_class = OrderFilter
    filter_backends = [DjangoFilterBackend]
    pagination_class = OrderPagination
    queryset = Order.objects.all()
    serializer_class = OrderListSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_order_service()

    def get_queryset(self):
        return self._service.list_orders()

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(pk)
        except OrderNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Payment status
    # ------------------------------------------------------------------

    @action(detail=True, methods=["patch"], url_path="payment-status")
    def payment_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/orders/{pk}/payment-status/"""
        serializer = PaymentStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = self._service.update_payment_status(
                pk, serializer.validated_data["payment_status"]
            )
        except OrderNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except InvalidPaymentStatus as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                "success": True,
                "message": "Payment status updated successfully",
                "payment_status": order.payment_status,
            }
        )

    # ------------------------------------------------------------------
    # WhatsApp resends
    # ------------------------------------------------------------------

    @action(detail=True, methods=["post"], url_path="resend-wa")
    def resend_wa(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/resend-wa/"""
        try:
            result = self._service.resend_notification(pk)
        except OrderNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)

        return Response(
            {
                "success": result.sent,
                "message": result.message,
                "wa_status": result.status,
            }
        )

    @action(detail=False, methods=["post"], url_path="bulk-resend-wa")
    def bulk_resend_wa(self, request: Request) -> Response:
        """POST /api/v1/orders/bulk-resend-wa/"""
        result = self._service.bulk_resend_notifications()
        return Response(
            {
                "success": True,
                "message": (
                    f"Resent {result.total} notifications: "
                    f"{result.sent} sent, {result.failed} failed"
                ),
                "sent": result.sent,
                "failed": result.failed,
            }
        )

"""Order URL configuration (register checkout + back office)."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.orders.views import OrderViewSet, PosOrderViewSet

router = DefaultRouter(trailing_slash=True)
router.register("pos/orders", PosOrderViewSet, basename="pos-order")
router.register("orders", OrderViewSet, basename="order")

urlpatterns = router.urls

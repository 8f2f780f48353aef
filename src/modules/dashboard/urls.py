from django.urls import path

from modules.dashboard.views import OwnerDashboardView, PosCatalogView

urlpatterns = [
    path("dashboard/owner/", OwnerDashboardView.as_view(), name="dashboard-owner"),
    path("dashboard/pos/", PosCatalogView.as_view(), name="dashboard-pos"),
]

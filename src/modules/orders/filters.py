import django_filters
from django.db.models import Q

from modules.orders.constants import NotificationStatus, PaymentStatus
from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    payment_status = django_filters.ChoiceFilter(choices=PaymentStatus.choices)
    wa_status = django_filters.ChoiceFilter(
        field_name="notification_status", choices=NotificationStatus.choices
    )
    date_from = django_filters.DateFilter(
        field_name="created_at", lookup_expr="date__gte"
    )
    date_to = django_filters.DateFilter(field_name="created_at", lookup_expr="date__lte")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Order
        fields = ["payment_status", "wa_status", "date_from", "date_to", "search"]

    def filter_search(self, queryset, name, value):
        """Order id, customer name or customer phone contains *value*."""
        return queryset.filter(
            Q(id__icontains=value)
            | Q(customer__name__icontains=value)
            | Q(customer__phone_number__icontains=value)
        )

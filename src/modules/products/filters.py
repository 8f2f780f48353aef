import django_filters

from modules.products.models import Product


class ProductFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    category = django_filters.NumberFilter(field_name="category_id")
    status = django_filters.ChoiceFilter(
        choices=[("active", "Active"), ("inactive", "Inactive")],
        method="filter_status",
    )

    class Meta:
        model = Product
        fields = ["search", "category", "status"]

    def filter_status(self, queryset, name, value):
        return queryset.filter(is_active=value == "active")

from django_filters import rest_framework as filters

from apps.shopfront.models import Product


class NumberInFilter(filters.BaseInFilter, filters.NumberFilter):
    """Comma separated ids: ?supplier_in=3,7"""


class ProductFilter(filters.FilterSet):
    """
    Generic attribute filter of the shopfront.

    `with_variants_supplier_properties` is not declared here: supplier
    properties are matched through the first variant and combined with
    these results by `services.filtering.combine`.
    """

    name_cont = filters.CharFilter(field_name='name', lookup_expr='icontains')
    description_cont = filters.CharFilter(field_name='description', lookup_expr='icontains')

    # Product's own properties
    with_properties = NumberInFilter(method='filter_with_properties')

    primary_category_in = NumberInFilter(
        field_name='variants__primary_category_id', lookup_expr='in', distinct=True
    )
    supplier_in = NumberInFilter(
        field_name='variants__supplier_id', lookup_expr='in', distinct=True
    )

    class Meta:
        model = Product
        fields = []

    def filter_with_properties(self, queryset, name, value):
        if not value:
            return queryset
        return queryset.filter(product_properties__property_id__in=value).distinct()

"""
Shopfront catalog of a hub for an order cycle: ordered, filtered and
paginated products with their available variants.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from apps.shopfront.api.filters import ProductFilter
from apps.shopfront.exceptions import InvalidFilterParams, NoProductsAvailable
from apps.shopfront.services.distributed_products import DistributedProductsService
from apps.shopfront.services.filtering import (
    ATTRIBUTES,
    PROPERTIES_KEY,
    SUPPLIER_PROPERTIES_KEY,
    UNION,
    combine,
    id_list,
    normalize_filter_params,
)
from apps.shopfront.services.grouping import index_by_product_id
from apps.shopfront.services.pagination import paginate, per_page_or_default
from apps.shopfront.services.sorting import resolve_ordering

logger = logging.getLogger(__name__)


@dataclass
class CatalogResult:
    products: List
    variants_by_product: Dict[int, List] = field(default_factory=dict)
    total_available: int = 0
    filter_path: str = ATTRIBUTES
    page: int = 1
    per_page: int = 10


class ProductsRenderer:
    """
    Resolve the shopfront of `distributor` in `order_cycle` for `customer`.

    `args` may hold `q` (filter params), `page` and `per_page`.
    Build one renderer per request; results are memoised on the instance.
    """

    def __init__(self, distributor, order_cycle, customer=None, args=None):
        self.distributor = distributor
        self.order_cycle = order_cycle
        self.customer = customer
        self.args = args or {}
        self._products = None
        self._variants = None
        self.total_available = 0
        self.filter_path = ATTRIBUTES

    def result(self) -> CatalogResult:
        products = self.products()
        return CatalogResult(
            products=products,
            variants_by_product=self.variants_for_shop_by_id(),
            total_available=self.total_available,
            filter_path=self.filter_path,
            page=self.page,
            per_page=self.per_page,
        )

    @property
    def page(self):
        page = self.args.get('page')
        if page in (None, ''):
            return 1
        try:
            return int(page)
        except (TypeError, ValueError):
            # Left to the paginator, which answers with an empty page
            return page

    @property
    def per_page(self):
        return per_page_or_default(self.args.get('per_page'))

    def products(self):
        if not (self.order_cycle and self.distributor):
            raise NoProductsAvailable(
                "A hub and an order cycle are required to list shopfront products"
            )

        if self._products is None:
            sort_rule = resolve_ordering(self.distributor)
            relation = self.distributed_products.products_relation(sort_rule.join_kind)
            results = self.filter(relation.order_by(*sort_rule.order_by()))
            self.total_available = len(results)
            self._products = paginate(results, self.page, self.per_page)
        return self._products

    def filter(self, query):
        """Apply the generic and the supplier property filters to `query`."""
        raw_params = self.args.get('q') or {}
        params = normalize_filter_params(raw_params)

        filterset = ProductFilter(params, queryset=query)
        if not filterset.is_valid():
            raise InvalidFilterParams(filterset.errors)
        attribute_results = filterset.qs

        supplier_property_ids = id_list(params, SUPPLIER_PROPERTIES_KEY)
        supplier_property_results = None
        if supplier_property_ids:
            supplier_property_results = self.distributed_products.supplier_property_join(
                query, supplier_property_ids
            )

        outcome = combine(
            attribute_results,
            supplier_property_results,
            with_properties=bool(id_list(params, PROPERTIES_KEY)),
        )
        self.filter_path = outcome.path
        if outcome.path != ATTRIBUTES:
            logger.debug("Hub %s: filters combined through %s", self.distributor.pk, outcome.path)

        if outcome.path == UNION:
            # Union appends supplier property matches; restore the shop order
            positions = {pk: index for index, pk in enumerate(query.values_list('pk', flat=True))}
            return sorted(outcome.products, key=lambda product: positions[product.pk])
        return outcome.products

    def variants_for_shop(self):
        if self._variants is None:
            product_ids = [product.pk for product in self.products()]
            self._variants = list(
                self.distributed_products.variants_relation()
                .filter(product_id__in=product_ids)
                .select_related('product', 'supplier', 'primary_category')
            )
        return self._variants

    def variants_for_shop_by_id(self):
        return index_by_product_id(self.variants_for_shop())

    @property
    def distributed_products(self):
        return DistributedProductsService(self.distributor, self.order_cycle, self.customer)


def resolve_catalog(hub, order_cycle, customer=None, filter_params=None, page=1, per_page=None) -> CatalogResult:
    """
    Shopfront products of `hub` in `order_cycle`.

    Raises NoProductsAvailable when the hub or the order cycle is missing.
    """
    args = {'q': filter_params or {}, 'page': page, 'per_page': per_page}
    return ProductsRenderer(hub, order_cycle, customer, args).result()

"""
Products and variants in stock for a given hub and order cycle.

The stock check includes the hub's variant overrides (on demand and stock
level) and the hub's tag rules for the customer.
"""

from apps.shopfront.models import ProducerProperty, Product
from apps.shopfront.services.first_variant import (
    CATEGORY,
    SUPPLIER,
    annotation_name,
    attach_secondary_attribute,
)
from apps.shopfront.services.stock import stocked_at_hub
from apps.shopfront.services.tag_rules import ProductTagRulesFilterer


class DistributedProductsService:
    """
    Querysets for the shopfront of `distributor` in `order_cycle`.

    Nothing is cached: build one service per request.
    """

    def __init__(self, distributor, order_cycle, customer=None):
        self.distributor = distributor
        self.order_cycle = order_cycle
        self.customer = customer

    def variants_relation(self):
        """Available variants, hub-scoped stock annotated, in id order."""
        return self._stocked_variants_and_overrides().distinct().order_by('id')

    def stocked_products(self):
        """Ids of the products having at least one available variant."""
        return self._stocked_variants_and_overrides().values('product_id')

    def products_relation(self, join_kind=SUPPLIER):
        """
        Stocked products annotated with the supplier or category of their
        first available variant (see `first_variant`).
        """
        products = Product.objects.filter(pk__in=self.stocked_products())
        return attach_secondary_attribute(products, join_kind, self._stocked_variants_and_overrides())

    def products_category_relation(self):
        return self.products_relation(CATEGORY)

    def products_supplier_relation(self):
        return self.products_relation(SUPPLIER)

    def supplier_property_join(self, products, property_ids):
        """
        Products among `products` whose first variant's supplier has one of
        `property_ids` and which inherit their supplier's properties.
        """
        supplier_attribute = annotation_name(SUPPLIER)
        if supplier_attribute not in products.query.annotations:
            products = attach_secondary_attribute(
                products, SUPPLIER, self._stocked_variants_and_overrides()
            )
        producers = ProducerProperty.objects.filter(
            property_id__in=property_ids,
        ).values('producer_id')
        return products.filter(
            inherits_properties=True,
            **{f'{supplier_attribute}__in': producers},
        )

    def _stocked_variants_and_overrides(self):
        variants = self.order_cycle.variants_distributed_by(self.distributor).filter(
            is_active=True,
            product__is_active=True,
        )
        stocked_variants = stocked_at_hub(variants, self.distributor)
        return ProductTagRulesFilterer(self.distributor, self.customer, stocked_variants).call()

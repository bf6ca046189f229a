"""
Shopfront models for hubs distributing producers' variants.

Model Hierarchy:
- Enterprise: Producer and/or hub, with the hub's shopfront preferences
- Product: Base product; category and supplier come from its variants
- Variant: Sellable unit with raw stock (count on hand, on demand)
- VariantOverride: Hub-specific stock correction of a variant
- OrderCycle / Exchange: Which variants a hub distributes in a period
- Customer / TagRule: Hub shoppers and the tag rules narrowing what they see
- Property: Searchable characteristics of products and producers
"""

from .enterprise import Enterprise
from .category import Category
from .property import Property, ProductProperty, ProducerProperty
from .product import Product
from .variant import Tag, Variant, VariantOverride
from .order_cycle import OrderCycle, Exchange
from .customer import Customer, TagRule

__all__ = [
    'Enterprise',
    'Category',
    'Property',
    'ProductProperty',
    'ProducerProperty',
    'Product',
    'Tag',
    'Variant',
    'VariantOverride',
    'OrderCycle',
    'Exchange',
    'Customer',
    'TagRule',
]

"""
Derive a product's category or supplier from one representative variant.

Products do not store a category or supplier; shopfronts sort and filter
on the values of the product's "first" variant. The first variant is the
available variant with the lowest id. When variants of one product
disagree, the lowest id wins, both in the database annotation and in the
in-memory helper.
"""

from typing import Dict, Iterable

from django.db.models import OuterRef, QuerySet, Subquery

from apps.shopfront.models import Variant

CATEGORY = 'category'
SUPPLIER = 'supplier'

VARIANT_FIELDS = {
    CATEGORY: 'primary_category_id',
    SUPPLIER: 'supplier_id',
}


def annotation_name(kind: str) -> str:
    """Attribute set on each product, e.g. `first_variant_supplier_id`."""
    _variant_field(kind)
    return f'first_variant_{kind}_id'


def attach_secondary_attribute(products: QuerySet, kind: str, available_variants: QuerySet) -> QuerySet:
    """
    Annotate each product with the category or supplier id of its first
    available variant.
    """
    field = _variant_field(kind)
    first_variant = Variant.objects.filter(
        product=OuterRef('pk'),
        pk__in=available_variants.values('pk'),
    ).order_by('pk').values(field)[:1]
    return products.annotate(**{annotation_name(kind): Subquery(first_variant)})


def first_variant_attributes(variants: Iterable, kind: str) -> Dict[int, int]:
    """
    In-memory counterpart of `attach_secondary_attribute`.

    Returns {product_id: category or supplier id of its lowest id variant}.
    """
    field = _variant_field(kind)
    first_variants = {}
    for variant in variants:
        current = first_variants.get(variant.product_id)
        if current is None or variant.pk < current.pk:
            first_variants[variant.product_id] = variant
    return {
        product_id: getattr(variant, field)
        for product_id, variant in first_variants.items()
    }


def _variant_field(kind):
    try:
        return VARIANT_FIELDS[kind]
    except KeyError:
        raise ValueError(f"Unknown secondary attribute {kind!r}, expected one of {sorted(VARIANT_FIELDS)}") from None

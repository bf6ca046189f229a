"""
Combine the generic attribute filter with the supplier property filter.

Supplier properties are found through each product's first variant, which
django-filter cannot express, so the two filters run independently and
their results are merged here:

1. no supplier property filter requested: attribute results;
2. requested together with `with_properties`: union ("OR" between
   property searches);
3. requested with results: intersection ("AND" with the other criteria);
4. requested without results: attribute results.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

SUPPLIER_PROPERTIES_KEY = 'with_variants_supplier_properties'
PROPERTIES_KEY = 'with_properties'

ATTRIBUTES = 'attributes'
UNION = 'union'
INTERSECTION = 'intersection'
SUPPLIER_FALLBACK = 'supplier_fallback'


@dataclass
class FilterOutcome:
    products: List
    path: str


def combine(attribute_filtered: Sequence,
            supplier_property_filtered: Optional[Sequence] = None,
            with_properties: bool = False) -> FilterOutcome:
    """
    Merge both result sets. Pass `supplier_property_filtered=None` when no
    supplier property filter was requested.

    Results keep the order of `attribute_filtered`; items only found by the
    supplier property filter are appended in their own order.
    """
    attribute_filtered = list(attribute_filtered)
    if supplier_property_filtered is None:
        return FilterOutcome(attribute_filtered, ATTRIBUTES)

    supplier_property_filtered = list(supplier_property_filtered)
    if with_properties:
        seen = set(attribute_filtered)
        extra = [item for item in supplier_property_filtered if item not in seen]
        return FilterOutcome(attribute_filtered + extra, UNION)

    if supplier_property_filtered:
        matching = set(supplier_property_filtered)
        return FilterOutcome([item for item in attribute_filtered if item in matching], INTERSECTION)

    logger.info(
        "Supplier property filter matched no product, returning %d attribute filtered products",
        len(attribute_filtered),
    )
    return FilterOutcome(attribute_filtered, SUPPLIER_FALLBACK)


def id_list(params, key) -> List[int]:
    """
    Ids given for `key` in filter params: a QueryDict, a list or a comma
    separated string. Non numeric items are ignored.
    """
    if not params:
        return []
    if hasattr(params, 'getlist'):
        values = params.getlist(key)
    else:
        values = params.get(key)
        if values is None:
            values = []
        elif isinstance(values, (str, int)):
            values = [values]

    ids = []
    for value in values:
        for token in str(value).split(','):
            token = token.strip()
            if token.isdecimal():
                ids.append(int(token))
    return ids


def normalize_filter_params(params) -> dict:
    """
    Flatten filter params to the {key: "a,b"} form expected by django-filter
    CSV filters.
    """
    if not params:
        return {}
    normalized = {}
    keys = params.keys()
    for key in keys:
        if hasattr(params, 'getlist'):
            values = params.getlist(key)
        else:
            values = params[key]
            if not isinstance(values, (list, tuple, set)):
                values = [values]
        values = [str(value) for value in values if value is not None and str(value) != '']
        if values:
            normalized[key] = ','.join(values)
    return normalized

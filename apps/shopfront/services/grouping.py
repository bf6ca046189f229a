from collections import defaultdict
from typing import Dict, Iterable, List


def index_by_product_id(variants: Iterable) -> Dict[int, List]:
    """
    Group variants by product id, keeping their order inside each group.
    Products without variants have no key.
    """
    grouped = defaultdict(list)
    for variant in variants:
        grouped[variant.product_id].append(variant)
    return dict(grouped)

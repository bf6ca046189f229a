"""
Translate a hub's shopfront preferences into a product ordering.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from django.db.models import Case, IntegerField, Value, When

from apps.shopfront.exceptions import InvalidSortPreference
from apps.shopfront.models import Enterprise
from apps.shopfront.services.first_variant import CATEGORY, SUPPLIER, annotation_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortRule:
    """
    Ordering of shopfront products.

    With preferences, products are ranked by the position of their first
    variant's supplier or category id in `preferences` (unlisted ids last),
    then by name and id. Without preferences, by name and id only.
    """
    join_kind: str = SUPPLIER
    preferences: Tuple[int, ...] = ()

    @property
    def attribute(self) -> str:
        return annotation_name(self.join_kind)

    @property
    def is_default(self) -> bool:
        return not self.preferences

    def _rank_expression(self):
        return Case(
            *[
                When(**{self.attribute: pk}, then=Value(position))
                for position, pk in enumerate(self.preferences)
            ],
            default=Value(len(self.preferences)),
            output_field=IntegerField(),
        )

    def order_by(self) -> List:
        """Expressions for `QuerySet.order_by`."""
        if self.is_default:
            return ['name', 'id']
        return [self._rank_expression().asc(), 'name', 'id']

    def sort_key(self, product):
        """Key for sorting already loaded, annotated products."""
        if self.is_default:
            return (product.name, product.pk)
        ranks = {pk: position for position, pk in enumerate(self.preferences)}
        rank = ranks.get(getattr(product, self.attribute, None), len(self.preferences))
        return (rank, product.name, product.pk)


DEFAULT_SORT_RULE = SortRule()


def parse_preference_list(raw: Union[str, Iterable, None]) -> Tuple[int, ...]:
    """
    Parse a stored preference list such as "4, 2,9" into (4, 2, 9).

    Empty items are skipped and repeated ids keep their first position.
    Raises InvalidSortPreference for anything that is not an id.
    """
    if raw is None:
        return ()
    items = raw.split(',') if isinstance(raw, str) else list(raw)

    ids = []
    for item in items:
        token = str(item).strip()
        if not token:
            continue
        try:
            ids.append(int(token))
        except ValueError:
            raise InvalidSortPreference(f"Invalid id {token!r} in preference list {raw!r}") from None
    return tuple(dict.fromkeys(ids))


def resolve_ordering(hub: Optional[Enterprise]) -> SortRule:
    """
    Pick the ordering configured by `hub`.

    Malformed preference lists fall back to the default ordering.
    """
    if hub is None:
        return DEFAULT_SORT_RULE

    method = hub.shopfront_product_sorting_method
    if method == Enterprise.SORT_BY_PRODUCER:
        join_kind, raw = SUPPLIER, hub.shopfront_producer_order
    elif method == Enterprise.SORT_BY_CATEGORY:
        join_kind, raw = CATEGORY, hub.shopfront_taxon_order
    else:
        return DEFAULT_SORT_RULE

    try:
        preferences = parse_preference_list(raw)
    except InvalidSortPreference as exc:
        logger.warning("Hub %s: %s, using default product order", hub.pk, exc)
        return DEFAULT_SORT_RULE

    if not preferences:
        return DEFAULT_SORT_RULE
    return SortRule(join_kind=join_kind, preferences=preferences)

"""
Stock availability of variants at a hub.

The availability rule is written once, as a small boolean expression tree.
The same tree is evaluated in process (`is_available`) and compiled to a
Django `Q` object (`STOCK_AVAILABILITY.to_q()`) so that catalogs are
filtered by the database instead of row by row.

A variant is available when:

    (no override AND (variant on demand OR variant in stock))
    OR (override AND (override on demand OR override in stock))
    OR (override AND override on demand unset AND variant on demand)
    OR (override AND override on demand unset AND variant not on demand
        AND variant in stock)
"""

from functools import reduce
from typing import Any, Callable, Tuple

from django.db.models import FilteredRelation, Q, QuerySet
from django.db.models.functions import Coalesce

# Name of the hub-scoped override relation annotated by `with_hub_override`
OVERRIDE_RELATION = 'hub_override'


def _override_value(override, field):
    # A missing override behaves like the NULL columns of a LEFT JOIN
    if override is None:
        return None
    return getattr(override, field)


class Term:
    """
    Leaf condition: a Django lookup plus the equivalent in-process check.

    `check` receives `(variant, override)` and must follow SQL semantics,
    i.e. comparisons against NULL are never true.
    """

    def __init__(self, name: str, lookup: str, value: Any, check: Callable[[Any, Any], bool]):
        self.name = name
        self.lookup = lookup
        self.value = value
        self.check = check

    def evaluate(self, variant, override=None) -> bool:
        return bool(self.check(variant, override))

    def to_q(self) -> Q:
        return Q(**{self.lookup: self.value})

    def describe(self) -> str:
        return self.name

    def __and__(self, other):
        return AllOf(self, other)

    def __or__(self, other):
        return AnyOf(self, other)

    def __repr__(self):
        return f"Term({self.name!r})"


class _Node:
    joiner = ''

    def __init__(self, *children):
        self.children = children

    def describe(self) -> str:
        inner = f' {self.joiner} '.join(child.describe() for child in self.children)
        return f'({inner})'

    def __and__(self, other):
        return AllOf(self, other)

    def __or__(self, other):
        return AnyOf(self, other)


class AllOf(_Node):
    joiner = 'AND'

    def evaluate(self, variant, override=None) -> bool:
        return all(child.evaluate(variant, override) for child in self.children)

    def to_q(self) -> Q:
        return reduce(lambda left, right: left & right, (child.to_q() for child in self.children))


class AnyOf(_Node):
    joiner = 'OR'

    def evaluate(self, variant, override=None) -> bool:
        return any(child.evaluate(variant, override) for child in self.children)

    def to_q(self) -> Q:
        return reduce(lambda left, right: left | right, (child.to_q() for child in self.children))


VARIANT_NOT_OVERRIDDEN = Term(
    'variant_not_overridden', f'{OVERRIDE_RELATION}__id__isnull', True,
    lambda variant, override: override is None,
)
VARIANT_OVERRIDDEN = Term(
    'variant_overridden', f'{OVERRIDE_RELATION}__id__isnull', False,
    lambda variant, override: override is not None,
)
VARIANT_IN_STOCK = Term(
    'variant_in_stock', 'count_on_hand__gt', 0,
    lambda variant, override: variant.count_on_hand is not None and variant.count_on_hand > 0,
)
VARIANT_ON_DEMAND = Term(
    'variant_on_demand', 'on_demand', True,
    lambda variant, override: variant.on_demand is True,
)
VARIANT_NOT_ON_DEMAND = Term(
    'variant_not_on_demand', 'on_demand', False,
    lambda variant, override: variant.on_demand is False,
)
OVERRIDE_ON_DEMAND = Term(
    'override_on_demand', f'{OVERRIDE_RELATION}__on_demand', True,
    lambda variant, override: _override_value(override, 'on_demand') is True,
)
OVERRIDE_IN_STOCK = Term(
    'override_in_stock', f'{OVERRIDE_RELATION}__count_on_hand__gt', 0,
    lambda variant, override: (_override_value(override, 'count_on_hand') or 0) > 0,
)
OVERRIDE_ON_DEMAND_UNSET = Term(
    'override_on_demand_unset', f'{OVERRIDE_RELATION}__on_demand__isnull', True,
    lambda variant, override: _override_value(override, 'on_demand') is None,
)

STOCK_AVAILABILITY = AnyOf(
    VARIANT_NOT_OVERRIDDEN & (VARIANT_ON_DEMAND | VARIANT_IN_STOCK),
    VARIANT_OVERRIDDEN & (OVERRIDE_ON_DEMAND | OVERRIDE_IN_STOCK),
    AllOf(VARIANT_OVERRIDDEN, OVERRIDE_ON_DEMAND_UNSET, VARIANT_ON_DEMAND),
    AllOf(VARIANT_OVERRIDDEN, OVERRIDE_ON_DEMAND_UNSET, VARIANT_NOT_ON_DEMAND, VARIANT_IN_STOCK),
)


def is_available(variant, override=None) -> bool:
    """Whether `variant` can be sold, given the hub's override (or None)."""
    return STOCK_AVAILABILITY.evaluate(variant, override)


def effective_stock(variant, override=None) -> Tuple[int, bool]:
    """
    Stock figures a hub shows for a variant: the override's values where
    set, the producer's otherwise.
    """
    count_on_hand = _override_value(override, 'count_on_hand')
    on_demand = _override_value(override, 'on_demand')
    return (
        variant.count_on_hand if count_on_hand is None else count_on_hand,
        variant.on_demand if on_demand is None else on_demand,
    )


def with_hub_override(variants: QuerySet, hub) -> QuerySet:
    """
    LEFT JOIN each variant to the override of `hub`, if any, and annotate
    the effective stock figures.
    """
    return variants.annotate(**{
        OVERRIDE_RELATION: FilteredRelation('overrides', condition=Q(overrides__hub=hub)),
    }).annotate(
        effective_count_on_hand=Coalesce(f'{OVERRIDE_RELATION}__count_on_hand', 'count_on_hand'),
        effective_on_demand=Coalesce(f'{OVERRIDE_RELATION}__on_demand', 'on_demand'),
    )


def stocked_at_hub(variants: QuerySet, hub) -> QuerySet:
    """Available variants of `variants` at `hub`, overrides included."""
    return with_hub_override(variants, hub).filter(STOCK_AVAILABILITY.to_q())

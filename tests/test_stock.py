import itertools

import pytest

from apps.shopfront.models import Variant, VariantOverride
from apps.shopfront.services.stock import (
    STOCK_AVAILABILITY,
    effective_stock,
    is_available,
    stocked_at_hub,
    with_hub_override,
)

ABSENT = object()


def _variant(on_demand, count_on_hand):
    return Variant(on_demand=on_demand, count_on_hand=count_on_hand)


def _override(on_demand, count_on_hand):
    if on_demand is ABSENT:
        return None
    return VariantOverride(on_demand=on_demand, count_on_hand=count_on_hand)


# (override on_demand, override count, variant on_demand, variant count, available)
DECISION_TABLE = [
    # No override: the producer's settings decide
    (ABSENT, None, True, 0, True),
    (ABSENT, None, True, -2, True),
    (ABSENT, None, False, 5, True),
    (ABSENT, None, False, 0, False),
    (ABSENT, None, False, -1, False),
    # Override on demand wins
    (True, None, False, 0, True),
    (True, 0, False, 0, True),
    # Override stock
    (False, 3, False, 0, True),
    (None, 3, False, 0, True),
    # Override on demand unset: fall back to the producer's settings
    (None, 0, True, 0, True),
    (None, 0, False, 5, True),
    (None, None, False, 5, True),
    (None, 0, False, 0, False),
    (None, -4, False, 0, False),
    # Override explicitly not on demand and no override stock
    (False, 0, True, 5, False),
    (False, 0, False, 5, False),
    (False, None, True, 0, False),
]


@pytest.mark.parametrize(
    'override_on_demand, override_count, variant_on_demand, variant_count, expected',
    DECISION_TABLE,
)
def test_is_available_follows_decision_table(override_on_demand, override_count,
                                              variant_on_demand, variant_count, expected):
    variant = _variant(variant_on_demand, variant_count)
    override = _override(override_on_demand, override_count)

    assert is_available(variant, override) is expected


def test_out_of_stock_variant_with_empty_override_is_not_available():
    variant = _variant(False, 0)
    override = _override(None, 0)

    assert not is_available(variant, override)


def test_in_stock_variant_with_empty_override_is_available():
    variant = _variant(False, 5)
    override = _override(None, 0)

    assert is_available(variant, override)


def test_effective_stock_prefers_override_values():
    variant = _variant(False, 5)

    assert effective_stock(variant) == (5, False)
    assert effective_stock(variant, _override(None, None)) == (5, False)
    assert effective_stock(variant, _override(True, None)) == (5, True)
    assert effective_stock(variant, _override(None, 0)) == (0, False)


def test_availability_rule_describes_itself():
    description = STOCK_AVAILABILITY.describe()

    assert description.count(' OR ') >= 3
    assert 'variant_not_overridden' in description
    assert 'override_on_demand_unset' in description


OVERRIDE_STATES = [ABSENT] + list(itertools.product([True, False, None], [None, 0, 4, -2]))
VARIANT_STATES = list(itertools.product([True, False], [0, 3, -1]))


@pytest.mark.django_db
def test_database_filter_matches_in_process_evaluation(hub, other_hub, make_product, make_variant, make_override):
    product = make_product('Alface')
    expected_ids = set()

    for override_state, (variant_on_demand, variant_count) in itertools.product(OVERRIDE_STATES, VARIANT_STATES):
        variant = make_variant(product, count_on_hand=variant_count, on_demand=variant_on_demand)
        override = None
        if override_state is not ABSENT:
            override_on_demand, override_count = override_state
            override = make_override(variant, count_on_hand=override_count, on_demand=override_on_demand)
        # Overrides of other hubs never count
        make_override(variant, count_on_hand=0, on_demand=False, for_hub=other_hub)

        if is_available(variant, override):
            expected_ids.add(variant.pk)

    stocked_ids = set(stocked_at_hub(Variant.objects.all(), hub).values_list('pk', flat=True))

    assert expected_ids
    assert stocked_ids == expected_ids


@pytest.mark.django_db
def test_variants_without_any_override_use_plain_stock(hub, make_product, make_variant):
    product = make_product('Cenoura')
    in_stock = make_variant(product, count_on_hand=2)
    on_demand = make_variant(product, count_on_hand=0, on_demand=True)
    make_variant(product, count_on_hand=0)

    stocked = set(stocked_at_hub(Variant.objects.all(), hub))

    assert stocked == {in_stock, on_demand}


@pytest.mark.django_db
def test_with_hub_override_annotates_effective_stock(hub, other_hub, make_product, make_variant, make_override):
    product = make_product('Tomate')
    overridden = make_variant(product, count_on_hand=5, on_demand=False)
    plain = make_variant(product, count_on_hand=7, on_demand=False)
    make_override(overridden, count_on_hand=1, on_demand=True)
    make_override(plain, count_on_hand=99, on_demand=True, for_hub=other_hub)

    variants = {v.pk: v for v in with_hub_override(Variant.objects.all(), hub)}

    assert variants[overridden.pk].effective_count_on_hand == 1
    assert variants[overridden.pk].effective_on_demand is True
    assert variants[plain.pk].effective_count_on_hand == 7
    assert variants[plain.pk].effective_on_demand is False

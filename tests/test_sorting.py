import logging
import random
from types import SimpleNamespace

import pytest

from apps.shopfront.exceptions import InvalidSortPreference
from apps.shopfront.models import Enterprise
from apps.shopfront.services.distributed_products import DistributedProductsService
from apps.shopfront.services.first_variant import CATEGORY, SUPPLIER
from apps.shopfront.services.sorting import (
    DEFAULT_SORT_RULE,
    SortRule,
    parse_preference_list,
    resolve_ordering,
)


def _hub(method, producer_order='', taxon_order=''):
    return Enterprise(
        pk=1,
        name='Hub',
        shopfront_product_sorting_method=method,
        shopfront_producer_order=producer_order,
        shopfront_taxon_order=taxon_order,
    )


class TestParsePreferenceList:

    def test_parses_comma_separated_ids(self):
        assert parse_preference_list('4, 2,9') == (4, 2, 9)

    def test_blank_items_are_skipped(self):
        assert parse_preference_list('3,,1,') == (3, 1)
        assert parse_preference_list('') == ()
        assert parse_preference_list(None) == ()

    def test_duplicates_keep_first_position(self):
        assert parse_preference_list('5,2,5,1') == (5, 2, 1)

    def test_accepts_sequences(self):
        assert parse_preference_list([7, '3']) == (7, 3)

    def test_rejects_non_ids(self):
        with pytest.raises(InvalidSortPreference):
            parse_preference_list('1,abc')


class TestResolveOrdering:

    def test_default_is_by_name(self):
        assert resolve_ordering(_hub(Enterprise.SORT_BY_NAME, producer_order='1,2')) == DEFAULT_SORT_RULE
        assert resolve_ordering(None) == DEFAULT_SORT_RULE

    def test_by_producer(self):
        rule = resolve_ordering(_hub(Enterprise.SORT_BY_PRODUCER, producer_order='3,1'))

        assert rule == SortRule(join_kind=SUPPLIER, preferences=(3, 1))
        assert rule.attribute == 'first_variant_supplier_id'

    def test_by_category(self):
        rule = resolve_ordering(_hub(Enterprise.SORT_BY_CATEGORY, taxon_order='8'))

        assert rule == SortRule(join_kind=CATEGORY, preferences=(8,))
        assert rule.attribute == 'first_variant_category_id'

    def test_blank_preferences_fall_back_to_default(self):
        assert resolve_ordering(_hub(Enterprise.SORT_BY_PRODUCER)) == DEFAULT_SORT_RULE
        assert resolve_ordering(_hub(Enterprise.SORT_BY_CATEGORY, producer_order='1')) == DEFAULT_SORT_RULE

    def test_malformed_preferences_fall_back_to_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger='apps.shopfront'):
            rule = resolve_ordering(_hub(Enterprise.SORT_BY_PRODUCER, producer_order='2,x'))

        assert rule == DEFAULT_SORT_RULE
        assert 'using default product order' in caplog.text


class TestSortKey:

    @staticmethod
    def _product(pk, name, supplier_id=None):
        return SimpleNamespace(pk=pk, name=name, first_variant_supplier_id=supplier_id)

    def test_default_orders_by_name_then_id(self):
        products = [
            self._product(3, 'Banana'),
            self._product(2, 'Apple'),
            self._product(1, 'Banana'),
        ]

        ordered = sorted(products, key=DEFAULT_SORT_RULE.sort_key)

        assert [p.pk for p in ordered] == [2, 1, 3]

    def test_preferences_rank_first_and_unlisted_last(self):
        rule = SortRule(join_kind=SUPPLIER, preferences=(20, 10))
        products = [
            self._product(1, 'Alface', supplier_id=10),
            self._product(2, 'Batata', supplier_id=30),
            self._product(3, 'Cebola', supplier_id=20),
            self._product(4, 'Abóbora', supplier_id=None),
            self._product(5, 'Abacate', supplier_id=10),
        ]

        ordered = sorted(products, key=rule.sort_key)

        assert [p.pk for p in ordered] == [3, 5, 1, 4, 2]

    def test_order_does_not_depend_on_input_order(self):
        rule = SortRule(join_kind=SUPPLIER, preferences=(2,))
        products = [
            self._product(pk, name, supplier_id=supplier)
            for pk, name, supplier in [
                (1, 'Mel', 1), (2, 'Mel', 2), (3, 'Ovos', 2), (4, 'Leite', 1), (5, 'Mel', 2),
            ]
        ]
        expected = [p.pk for p in sorted(products, key=rule.sort_key)]

        for seed in range(5):
            shuffled = products[:]
            random.Random(seed).shuffle(shuffled)
            assert [p.pk for p in sorted(shuffled, key=rule.sort_key)] == expected


@pytest.mark.django_db
class TestDatabaseOrdering:

    def _ordered_names(self, hub, order_cycle, rule):
        relation = DistributedProductsService(hub, order_cycle).products_relation(rule.join_kind)
        return [p.name for p in relation.order_by(*rule.order_by())]

    def test_by_producer(self, hub, order_cycle, make_product, make_variant, make_producer):
        farm_a = make_producer('Fazenda A')
        farm_b = make_producer('Fazenda B')
        farm_c = make_producer('Fazenda C')
        make_variant(make_product('Alface'), supplier=farm_a)
        make_variant(make_product('Batata'), supplier=farm_b)
        make_variant(make_product('Cenoura'), supplier=farm_c)
        make_variant(make_product('Abobrinha'), supplier=farm_b)
        hub.shopfront_product_sorting_method = Enterprise.SORT_BY_PRODUCER
        hub.shopfront_producer_order = f'{farm_b.pk},{farm_a.pk}'

        rule = resolve_ordering(hub)

        assert self._ordered_names(hub, order_cycle, rule) == ['Abobrinha', 'Batata', 'Alface', 'Cenoura']

    def test_by_category(self, hub, order_cycle, make_product, make_variant, make_category):
        fruits = make_category('Frutas')
        veg = make_category('Verduras')
        make_variant(make_product('Alface'), category=veg)
        make_variant(make_product('Banana'), category=fruits)
        make_variant(make_product('Arroz'))
        hub.shopfront_product_sorting_method = Enterprise.SORT_BY_CATEGORY
        hub.shopfront_taxon_order = f'{veg.pk},{fruits.pk}'

        rule = resolve_ordering(hub)

        assert self._ordered_names(hub, order_cycle, rule) == ['Alface', 'Banana', 'Arroz']

    def test_database_and_memory_orders_agree(self, hub, order_cycle, make_product, make_variant, make_producer):
        farms = [make_producer(f'Fazenda {n}') for n in range(3)]
        for index, name in enumerate(['Mel', 'Ovos', 'Leite', 'Mel', 'Queijo', 'Pão']):
            make_variant(make_product(name), supplier=farms[index % 3])
        rule = SortRule(join_kind=SUPPLIER, preferences=(farms[2].pk, farms[0].pk))

        relation = DistributedProductsService(hub, order_cycle).products_relation(SUPPLIER)
        in_database = [p.pk for p in relation.order_by(*rule.order_by())]
        in_memory = [p.pk for p in sorted(relation, key=rule.sort_key)]

        assert in_database == in_memory

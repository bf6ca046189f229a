"""
Shared fixtures for the shopfront tests.

A hub distributes variants of one producer through a single order cycle;
`make_variant` adds variants to the hub's outgoing exchange by default.
"""
import itertools

import pytest
from django.utils.text import slugify

from apps.shopfront.models import (
    Category,
    Customer,
    Enterprise,
    Exchange,
    OrderCycle,
    Product,
    Tag,
    Variant,
    VariantOverride,
)

_counter = itertools.count(1)


@pytest.fixture
def hub(db):
    return Enterprise.objects.create(name='Hub Central', is_distributor=True)


@pytest.fixture
def other_hub(db):
    return Enterprise.objects.create(name='Hub Norte', is_distributor=True)


@pytest.fixture
def producer(db):
    return Enterprise.objects.create(name='Sítio Boa Vista', is_producer=True)


@pytest.fixture
def order_cycle(hub):
    return OrderCycle.objects.create(name='Semana 42', coordinator=hub)


@pytest.fixture
def outgoing_exchange(order_cycle, hub, producer):
    return Exchange.objects.create(
        order_cycle=order_cycle, sender=hub, receiver=hub, incoming=False
    )


@pytest.fixture
def make_product(db):
    def _make(name, **kwargs):
        kwargs.setdefault('slug', f'{slugify(name)}-{next(_counter)}')
        return Product.objects.create(name=name, **kwargs)
    return _make


@pytest.fixture
def make_variant(producer, outgoing_exchange):
    def _make(product, count_on_hand=5, on_demand=False, supplier=None,
              category=None, distribute=True, **kwargs):
        variant = Variant.objects.create(
            product=product,
            sku=f'SKU-{next(_counter)}',
            supplier=supplier or producer,
            primary_category=category,
            count_on_hand=count_on_hand,
            on_demand=on_demand,
            **kwargs
        )
        if distribute:
            outgoing_exchange.variants.add(variant)
        return variant
    return _make


@pytest.fixture
def make_override(hub):
    def _make(variant, count_on_hand=None, on_demand=None, for_hub=None):
        return VariantOverride.objects.create(
            hub=for_hub or hub,
            variant=variant,
            count_on_hand=count_on_hand,
            on_demand=on_demand,
        )
    return _make


@pytest.fixture
def make_category(db):
    def _make(name, **kwargs):
        return Category.objects.create(name=name, **kwargs)
    return _make


@pytest.fixture
def make_producer(db):
    def _make(name):
        return Enterprise.objects.create(name=name, is_producer=True)
    return _make


@pytest.fixture
def make_tag(db):
    def _make(name):
        tag, _ = Tag.objects.get_or_create(name=name)
        return tag
    return _make


@pytest.fixture
def make_customer(hub):
    def _make(email, tags=()):
        customer = Customer.objects.create(enterprise=hub, email=email)
        customer.tags.set(tags)
        return customer
    return _make

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.shopfront.models import TagRule

pytestmark = pytest.mark.django_db


@pytest.fixture
def api_client():
    return APIClient()


def _url(hub, order_cycle):
    return reverse('shopfront-products', kwargs={'hub_id': hub.pk, 'order_cycle_id': order_cycle.pk})


def test_lists_products_with_their_variants(api_client, hub, order_cycle, producer, make_product, make_variant,
                                            make_override):
    apple = make_product('Apple')
    variant = make_variant(apple, count_on_hand=3)
    make_override(variant, count_on_hand=12)
    make_variant(make_product('Banana'))

    response = api_client.get(_url(hub, order_cycle))

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [p['name'] for p in data['products']] == ['Apple', 'Banana']
    assert data['total_available'] == 2
    assert data['page'] == 1
    assert data['per_page'] == 10

    first = data['products'][0]
    assert first['supplier'] == producer.pk
    assert [v['id'] for v in first['variants']] == [variant.pk]
    assert first['variants'][0]['count_on_hand'] == 12
    assert first['variants'][0]['on_demand'] is False
    assert first['variants'][0]['supplier_name'] == producer.name


def test_filters_and_pagination_from_query_string(api_client, hub, order_cycle, make_product, make_variant):
    for name in ['Queijo Minas', 'Queijo Prato', 'Queijo Coalho', 'Leite']:
        make_variant(make_product(name))

    response = api_client.get(_url(hub, order_cycle), {'name_cont': 'queijo', 'page': 2, 'per_page': 2})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [p['name'] for p in data['products']] == ['Queijo Prato']
    assert data['total_available'] == 3
    assert (data['page'], data['per_page']) == (2, 2)


def test_page_out_of_range_is_empty(api_client, hub, order_cycle, make_product, make_variant):
    make_variant(make_product('Leite'))

    response = api_client.get(_url(hub, order_cycle), {'page': 9})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()['products'] == []


def test_customer_tag_rules(api_client, hub, order_cycle, make_product, make_variant, make_tag, make_customer):
    wholesale = make_tag('atacado')
    wholesaler = make_tag('atacadista')
    make_variant(make_product('Arroz'))
    make_variant(make_product('Arroz 25kg')).tags.add(wholesale)
    hidden = TagRule.objects.create(enterprise=hub, is_default=True)
    hidden.preferred_variant_tags.set([wholesale])
    shown = TagRule.objects.create(enterprise=hub, matched_variants_visibility=TagRule.VISIBLE)
    shown.preferred_variant_tags.set([wholesale])
    shown.preferred_customer_tags.set([wholesaler])
    customer = make_customer('compras@mercado.com', tags=[wholesaler])

    anonymous = api_client.get(_url(hub, order_cycle)).json()
    known = api_client.get(_url(hub, order_cycle), {'customer': customer.pk}).json()

    assert [p['name'] for p in anonymous['products']] == ['Arroz']
    assert [p['name'] for p in known['products']] == ['Arroz', 'Arroz 25kg']


def test_unknown_hub(api_client, order_cycle):
    response = api_client.get(reverse(
        'shopfront-products', kwargs={'hub_id': 999, 'order_cycle_id': order_cycle.pk}
    ))

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {'error': 'Hub not found'}


def test_unknown_order_cycle(api_client, hub):
    response = api_client.get(reverse(
        'shopfront-products', kwargs={'hub_id': hub.pk, 'order_cycle_id': 999}
    ))

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_hub_outside_the_order_cycle_has_no_products(api_client, other_hub, order_cycle, outgoing_exchange):
    response = api_client.get(_url(other_hub, order_cycle))

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert 'order cycle' in response.json()['error']


def test_unknown_customer(api_client, hub, order_cycle, outgoing_exchange):
    response = api_client.get(_url(hub, order_cycle), {'customer': 999})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {'error': 'Customer not found'}


@pytest.mark.parametrize('per_page', ['0', 'muitos'])
def test_invalid_page_size(api_client, hub, order_cycle, outgoing_exchange, per_page):
    response = api_client.get(_url(hub, order_cycle), {'per_page': per_page})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert 'error' in response.json()


@pytest.mark.parametrize('params', [{'supplier_in': 'abc'}, {'with_properties': 'orgânico'}])
def test_invalid_filter_values(api_client, hub, order_cycle, make_product, make_variant, params):
    make_variant(make_product('Alface'))

    response = api_client.get(_url(hub, order_cycle), params)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert next(iter(params)) in response.json()['error']

"""
Script to create a sample hub shopfront.
Run with: python manage.py shell < create_sample_data.py
"""
from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from apps.shopfront.models import (
    Category,
    Customer,
    Enterprise,
    Exchange,
    OrderCycle,
    ProducerProperty,
    Product,
    Property,
    Tag,
    TagRule,
    Variant,
    VariantOverride,
)

# Create Enterprises
print("Creating enterprises...")

hub, _ = Enterprise.objects.get_or_create(
    slug='hub-central',
    defaults={'name': 'Hub Central', 'is_distributor': True}
)

farms = []
for name in ['Sítio Boa Vista', 'Fazenda Esperança', 'Chácara Recanto']:
    farm, _ = Enterprise.objects.get_or_create(name=name, defaults={'is_producer': True})
    farms.append(farm)

# Create Categories
print("Creating categories...")

produce, _ = Category.objects.get_or_create(
    slug='hortifruti',
    defaults={'name': 'Hortifruti', 'display_order': 1}
)
fruits, _ = Category.objects.get_or_create(
    slug='frutas',
    defaults={'name': 'Frutas', 'parent': produce, 'display_order': 1}
)
greens, _ = Category.objects.get_or_create(
    slug='verduras',
    defaults={'name': 'Verduras', 'parent': produce, 'display_order': 2}
)
dairy, _ = Category.objects.get_or_create(
    slug='laticinios',
    defaults={'name': 'Laticínios', 'display_order': 2}
)

# Create Properties
print("Creating properties...")

organic, _ = Property.objects.get_or_create(
    name='organico',
    defaults={'presentation': 'Orgânico'}
)
ProducerProperty.objects.get_or_create(producer=farms[0], property=organic)

# Create Products and Variants
print("Creating products and variants...")

catalog = [
    # name, category, supplier, [(sku, price, count_on_hand, on_demand)]
    ('Alface Crespa', greens, farms[0], [('ALF-UN', '3.50', 40, False)]),
    ('Couve Manteiga', greens, farms[0], [('COU-MC', '4.00', 0, True)]),
    ('Banana Prata', fruits, farms[1], [('BAN-DZ', '7.90', 25, False), ('BAN-KG', '6.50', 0, False)]),
    ('Laranja Pera', fruits, farms[1], [('LAR-KG', '5.20', 60, False)]),
    ('Queijo Minas', dairy, farms[2], [('QJM-500', '28.00', 8, False), ('QJM-1K', '52.00', 3, False)]),
    ('Leite Integral', dairy, farms[2], [('LEI-1L', '6.90', 0, False)]),
]

variants = []
for name, category, supplier, skus in catalog:
    product, _ = Product.objects.get_or_create(
        name=name,
        defaults={'description': f'{name} direto do produtor', 'is_active': True}
    )
    for sku, price, count_on_hand, on_demand in skus:
        variant, _ = Variant.objects.get_or_create(
            sku=sku,
            defaults={
                'product': product,
                'supplier': supplier,
                'primary_category': category,
                'price': Decimal(price),
                'count_on_hand': count_on_hand,
                'on_demand': on_demand,
            }
        )
        variants.append(variant)

# Hub stock differs from the producer's for some variants
print("Creating variant overrides...")

VariantOverride.objects.get_or_create(
    hub=hub,
    variant=Variant.objects.get(sku='LEI-1L'),
    defaults={'count_on_hand': 12}
)
VariantOverride.objects.get_or_create(
    hub=hub,
    variant=Variant.objects.get(sku='LAR-KG'),
    defaults={'count_on_hand': 0, 'on_demand': False}
)

# Create Order Cycle
print("Creating order cycle...")

now = timezone.now()
order_cycle, _ = OrderCycle.objects.get_or_create(
    name='Ciclo da semana',
    coordinator=hub,
    defaults={'opens_at': now - timedelta(days=1), 'closes_at': now + timedelta(days=6)}
)
for farm in farms:
    incoming, _ = Exchange.objects.get_or_create(
        order_cycle=order_cycle, sender=farm, receiver=hub, incoming=True
    )
    incoming.variants.set([v for v in variants if v.supplier_id == farm.pk])
outgoing, _ = Exchange.objects.get_or_create(
    order_cycle=order_cycle, sender=hub, receiver=hub, incoming=False
)
outgoing.variants.set(variants)

# Wholesale variants are only shown to wholesale customers
print("Creating tag rules...")

wholesale, _ = Tag.objects.get_or_create(name='atacado')
wholesaler, _ = Tag.objects.get_or_create(name='atacadista')
Variant.objects.get(sku='QJM-1K').tags.add(wholesale)

hide_wholesale, _ = TagRule.objects.get_or_create(
    enterprise=hub, is_default=True, matched_variants_visibility=TagRule.HIDDEN
)
hide_wholesale.preferred_variant_tags.add(wholesale)
show_wholesale, _ = TagRule.objects.get_or_create(
    enterprise=hub, is_default=False, matched_variants_visibility=TagRule.VISIBLE
)
show_wholesale.preferred_variant_tags.add(wholesale)
show_wholesale.preferred_customer_tags.add(wholesaler)

customer, _ = Customer.objects.get_or_create(
    enterprise=hub,
    email='compras@mercadinho.com',
    defaults={'name': 'Mercadinho da Esquina'}
)
customer.tags.add(wholesaler)

print("\n✅ Sample data created successfully!")
print(f"   - {Enterprise.objects.count()} enterprises")
print(f"   - {Product.objects.count()} products")
print(f"   - {Variant.objects.count()} variants")
print(f"   - {VariantOverride.objects.count()} variant overrides")
print(f"   - {TagRule.objects.count()} tag rules")
print(
    f"\nShopfront at: http://localhost:8000/api/shopfront/hubs/{hub.pk}"
    f"/order-cycles/{order_cycle.pk}/products/"
)

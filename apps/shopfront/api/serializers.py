from rest_framework import serializers

from apps.shopfront.models import Product, Variant


# =============================================================================
# Variant Serializers
# =============================================================================

class ShopfrontVariantSerializer(serializers.ModelSerializer):
    """Variant as sold by a hub: stock figures include the hub's override."""
    supplier_name = serializers.CharField(source='supplier.name', read_only=True)
    count_on_hand = serializers.SerializerMethodField()
    on_demand = serializers.SerializerMethodField()

    class Meta:
        model = Variant
        fields = [
            'id', 'sku', 'name', 'price',
            'supplier', 'supplier_name', 'primary_category',
            'count_on_hand', 'on_demand',
        ]

    def get_count_on_hand(self, obj):
        return getattr(obj, 'effective_count_on_hand', obj.count_on_hand)

    def get_on_demand(self, obj):
        return getattr(obj, 'effective_on_demand', obj.on_demand)


# =============================================================================
# Product Serializers
# =============================================================================

class ShopfrontProductSerializer(serializers.ModelSerializer):
    """
    Shopfront product with its available variants.
    Expects `variants` ({product_id: [variants]}) in the serializer context.
    """
    supplier = serializers.SerializerMethodField()
    primary_category = serializers.SerializerMethodField()
    variants = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'description',
            'supplier', 'primary_category', 'variants',
        ]

    def get_supplier(self, obj):
        return getattr(obj, 'first_variant_supplier_id', None)

    def get_primary_category(self, obj):
        return getattr(obj, 'first_variant_category_id', None)

    def get_variants(self, obj):
        variants = self.context.get('variants', {}).get(obj.pk, [])
        return ShopfrontVariantSerializer(variants, many=True, context=self.context).data

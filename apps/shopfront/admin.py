from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    Enterprise,
    Category,
    Property,
    ProductProperty,
    ProducerProperty,
    Product,
    Tag,
    Variant,
    VariantOverride,
    OrderCycle,
    Exchange,
    Customer,
    TagRule,
)
from .services.stock import is_available


# =============================================================================
# Import/Export Resources
# =============================================================================

class VariantOverrideResource(resources.ModelResource):
    """Resource for importing/exporting hub stock overrides."""

    hub_slug = fields.Field(
        column_name='hub',
        attribute='hub',
        widget=ForeignKeyWidget(Enterprise, 'slug')
    )
    variant_sku = fields.Field(
        column_name='sku',
        attribute='variant',
        widget=ForeignKeyWidget(Variant, 'sku')
    )

    class Meta:
        model = VariantOverride
        import_id_fields = ['hub_slug', 'variant_sku']
        fields = ('hub_slug', 'variant_sku', 'count_on_hand', 'on_demand')
        export_order = fields


# =============================================================================
# Inlines
# =============================================================================

class ProductPropertyInline(admin.TabularInline):
    model = ProductProperty
    extra = 1
    autocomplete_fields = ['property']


class ProducerPropertyInline(admin.TabularInline):
    model = ProducerProperty
    extra = 1
    autocomplete_fields = ['property']


class VariantInline(admin.TabularInline):
    model = Variant
    extra = 0
    fields = ['sku', 'name', 'supplier', 'price', 'count_on_hand', 'on_demand', 'is_active']
    readonly_fields = ['sku', 'name']
    show_change_link = True
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


class VariantOverrideInline(admin.TabularInline):
    model = VariantOverride
    extra = 0
    autocomplete_fields = ['hub']
    fields = ['hub', 'count_on_hand', 'on_demand']


class ExchangeInline(admin.StackedInline):
    model = Exchange
    extra = 1
    autocomplete_fields = ['sender', 'receiver', 'variants']


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Enterprise)
class EnterpriseAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'is_producer', 'is_distributor', 'shopfront_product_sorting_method']
    list_filter = ['is_producer', 'is_distributor']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}
    inlines = [ProducerPropertyInline]

    fieldsets = (
        (None, {
            'fields': ('name', 'slug', 'is_producer', 'is_distributor')
        }),
        ('Vitrine', {
            'fields': (
                'shopfront_product_sorting_method',
                'shopfront_producer_order',
                'shopfront_taxon_order',
            ),
        }),
    )


@admin.register(Category)
class CategoryAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'full_path', 'display_order']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = ['name', 'presentation']
    search_fields = ['name', 'presentation']


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    search_fields = ['name']


@admin.register(Product)
class ProductAdmin(SimpleHistoryAdmin):
    list_display = ['name', 'slug', 'variant_count', 'active_variant_count', 'inherits_properties', 'is_active']
    list_filter = ['is_active', 'inherits_properties']
    search_fields = ['name', 'slug', 'description']
    prepopulated_fields = {'slug': ('name',)}
    readonly_fields = ['variant_count', 'active_variant_count', 'created_at', 'updated_at']
    exclude = ['properties']
    inlines = [ProductPropertyInline, VariantInline]


@admin.register(Variant)
class VariantAdmin(SimpleHistoryAdmin):
    list_display = [
        'sku', 'name', 'product', 'supplier', 'price',
        'count_on_hand', 'stock_status', 'is_active'
    ]
    list_filter = ['supplier', 'primary_category', 'is_active', 'on_demand']
    list_editable = ['price', 'count_on_hand', 'is_active']
    search_fields = ['sku', 'name', 'product__name']
    autocomplete_fields = ['product', 'supplier', 'primary_category', 'tags']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [VariantOverrideInline]
    list_per_page = 50

    def stock_status(self, obj):
        if not is_available(obj):
            return format_html('<span style="color: red;">Sem estoque</span>')
        if obj.count_on_hand <= 0:
            return format_html('<span style="color: orange;">Sob encomenda</span>')
        return format_html('<span style="color: green;">Em estoque</span>')
    stock_status.short_description = 'Status Estoque'


@admin.register(VariantOverride)
class VariantOverrideAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = VariantOverrideResource
    list_display = ['variant', 'hub', 'count_on_hand', 'on_demand', 'available']
    list_filter = ['hub', 'on_demand']
    search_fields = ['variant__sku', 'variant__name', 'hub__name']
    autocomplete_fields = ['hub', 'variant']

    def available(self, obj):
        return is_available(obj.variant, obj)
    available.boolean = True
    available.short_description = 'Disponível'


@admin.register(OrderCycle)
class OrderCycleAdmin(admin.ModelAdmin):
    list_display = ['name', 'coordinator', 'opens_at', 'closes_at', 'is_open']
    search_fields = ['name']
    autocomplete_fields = ['coordinator']
    inlines = [ExchangeInline]

    def is_open(self, obj):
        return obj.is_open
    is_open.boolean = True
    is_open.short_description = 'Aberto'


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['email', 'name', 'enterprise']
    list_filter = ['enterprise']
    search_fields = ['email', 'name']
    autocomplete_fields = ['enterprise', 'tags']


@admin.register(TagRule)
class TagRuleAdmin(admin.ModelAdmin):
    list_display = ['enterprise', 'is_default', 'matched_variants_visibility', 'priority']
    list_filter = ['enterprise', 'is_default', 'matched_variants_visibility']
    autocomplete_fields = ['enterprise', 'preferred_customer_tags', 'preferred_variant_tags']


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'Vitrine dos Hubs'
admin.site.site_title = 'Vitrine'
admin.site.index_title = 'Painel de Administração'

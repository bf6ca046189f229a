from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
from simple_history.models import HistoricalRecords


class Tag(models.Model):
    """Free-form label used by hub tag rules on variants and customers."""
    name = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='Nome'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Etiqueta'
        verbose_name_plural = 'Etiquetas'

    def __str__(self):
        return self.name


class Variant(models.Model):
    """
    Sellable unit of a product with its own price, stock and supplier.
    """
    product = models.ForeignKey(
        'shopfront.Product',
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Produto'
    )
    sku = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='SKU'
    )
    name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Nome',
        help_text='Nome personalizado (gerado automaticamente se vazio)'
    )
    supplier = models.ForeignKey(
        'shopfront.Enterprise',
        on_delete=models.PROTECT,
        related_name='supplied_variants',
        verbose_name='Fornecedor'
    )
    primary_category = models.ForeignKey(
        'shopfront.Category',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='variants',
        verbose_name='Categoria principal'
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço'
    )

    # Inventory
    count_on_hand = models.IntegerField(
        default=0,
        verbose_name='Quantidade em estoque'
    )
    on_demand = models.BooleanField(
        default=False,
        verbose_name='Sob encomenda',
        help_text='Pode ser vendido sem estoque'
    )

    tags = models.ManyToManyField(
        Tag,
        blank=True,
        related_name='variants',
        verbose_name='Etiquetas'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Ativo'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['product', 'sku']
        verbose_name = 'Variante'
        verbose_name_plural = 'Variantes'

    def __str__(self):
        return self.name or self.sku

    def save(self, *args, **kwargs):
        if not self.name:
            self.name = f"{self.product.name} - {self.sku}"
        super().save(*args, **kwargs)


class VariantOverride(models.Model):
    """
    Hub-specific correction of a variant's stock.

    `on_demand` is tri-state: None means "use the producer's setting".
    `count_on_hand` is None when the hub does not override the stock level.
    """
    hub = models.ForeignKey(
        'shopfront.Enterprise',
        on_delete=models.CASCADE,
        related_name='variant_overrides',
        verbose_name='Hub'
    )
    variant = models.ForeignKey(
        Variant,
        on_delete=models.CASCADE,
        related_name='overrides',
        verbose_name='Variante'
    )
    count_on_hand = models.IntegerField(
        null=True,
        blank=True,
        verbose_name='Quantidade em estoque'
    )
    on_demand = models.BooleanField(
        null=True,
        blank=True,
        verbose_name='Sob encomenda',
        help_text='Vazio usa a configuração do produtor'
    )

    history = HistoricalRecords()

    class Meta:
        unique_together = ['hub', 'variant']
        verbose_name = 'Ajuste de Estoque do Hub'
        verbose_name_plural = 'Ajustes de Estoque dos Hubs'

    def __str__(self):
        return f"{self.hub.name} - {self.variant.sku}"

from django.db import models


class Property(models.Model):
    """
    A searchable characteristic such as "Orgânico" or "Sem glúten".
    Attached to products directly or to producers (inherited by their products).
    """
    name = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='Nome'
    )
    presentation = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Apresentação'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Propriedade'
        verbose_name_plural = 'Propriedades'

    def __str__(self):
        return self.presentation or self.name


class ProductProperty(models.Model):
    product = models.ForeignKey(
        'shopfront.Product',
        on_delete=models.CASCADE,
        related_name='product_properties',
        verbose_name='Produto'
    )
    property = models.ForeignKey(
        Property,
        on_delete=models.CASCADE,
        related_name='product_properties',
        verbose_name='Propriedade'
    )
    value = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Valor'
    )

    class Meta:
        unique_together = ['product', 'property']
        verbose_name = 'Propriedade do Produto'
        verbose_name_plural = 'Propriedades dos Produtos'

    def __str__(self):
        return f"{self.product.name} - {self.property}"


class ProducerProperty(models.Model):
    """
    Property of a producer. Products whose `inherits_properties` flag is set
    can be found through the properties of their supplier.
    """
    producer = models.ForeignKey(
        'shopfront.Enterprise',
        on_delete=models.CASCADE,
        related_name='producer_properties',
        verbose_name='Produtor'
    )
    property = models.ForeignKey(
        Property,
        on_delete=models.CASCADE,
        related_name='producer_properties',
        verbose_name='Propriedade'
    )
    value = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Valor'
    )

    class Meta:
        unique_together = ['producer', 'property']
        verbose_name = 'Propriedade do Produtor'
        verbose_name_plural = 'Propriedades dos Produtores'

    def __str__(self):
        return f"{self.producer.name} - {self.property}"

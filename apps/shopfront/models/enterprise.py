from django.db import models
from django.utils.text import slugify


class Enterprise(models.Model):
    """
    A business in the network.
    Producers supply variants, hubs (distributors) sell them to customers
    through order cycles. An enterprise can be both.
    """
    SORT_BY_NAME = 'by_name'
    SORT_BY_PRODUCER = 'by_producer'
    SORT_BY_CATEGORY = 'by_category'
    SORTING_METHOD_CHOICES = [
        (SORT_BY_NAME, 'Por nome'),
        (SORT_BY_PRODUCER, 'Por produtor'),
        (SORT_BY_CATEGORY, 'Por categoria'),
    ]

    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        verbose_name='Slug'
    )
    is_producer = models.BooleanField(
        default=False,
        verbose_name='Produtor'
    )
    is_distributor = models.BooleanField(
        default=False,
        verbose_name='Distribuidor (hub)'
    )

    # Shopfront preferences, only meaningful for hubs
    shopfront_product_sorting_method = models.CharField(
        max_length=20,
        choices=SORTING_METHOD_CHOICES,
        default=SORT_BY_NAME,
        verbose_name='Ordenação dos produtos'
    )
    shopfront_producer_order = models.CharField(
        max_length=1000,
        blank=True,
        verbose_name='Ordem dos produtores',
        help_text='IDs de produtores separados por vírgula (ex: "4,2,9")'
    )
    shopfront_taxon_order = models.CharField(
        max_length=1000,
        blank=True,
        verbose_name='Ordem das categorias',
        help_text='IDs de categorias separados por vírgula (ex: "3,1")'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Empresa'
        verbose_name_plural = 'Empresas'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

from django.db import models


class Customer(models.Model):
    """A shopper registered with a hub. Tags drive the hub's visibility rules."""
    enterprise = models.ForeignKey(
        'shopfront.Enterprise',
        on_delete=models.CASCADE,
        related_name='customers',
        verbose_name='Hub'
    )
    email = models.EmailField(
        verbose_name='E-mail'
    )
    name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Nome'
    )
    tags = models.ManyToManyField(
        'shopfront.Tag',
        blank=True,
        related_name='customers',
        verbose_name='Etiquetas'
    )

    class Meta:
        ordering = ['email']
        unique_together = ['enterprise', 'email']
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'

    def __str__(self):
        return self.name or self.email


class TagRule(models.Model):
    """
    Hub rule showing or hiding tagged variants.

    Default rules apply to every shopper and hide the matching variants.
    Other rules apply only to customers carrying one of the preferred
    customer tags, and either show or hide the matching variants for them.
    """
    VISIBLE = 'visible'
    HIDDEN = 'hidden'
    VISIBILITY_CHOICES = [
        (VISIBLE, 'Visível'),
        (HIDDEN, 'Oculto'),
    ]

    enterprise = models.ForeignKey(
        'shopfront.Enterprise',
        on_delete=models.CASCADE,
        related_name='tag_rules',
        verbose_name='Hub'
    )
    is_default = models.BooleanField(
        default=False,
        verbose_name='Regra padrão'
    )
    preferred_customer_tags = models.ManyToManyField(
        'shopfront.Tag',
        blank=True,
        related_name='customer_tag_rules',
        verbose_name='Etiquetas de clientes'
    )
    preferred_variant_tags = models.ManyToManyField(
        'shopfront.Tag',
        related_name='variant_tag_rules',
        verbose_name='Etiquetas de variantes'
    )
    matched_variants_visibility = models.CharField(
        max_length=10,
        choices=VISIBILITY_CHOICES,
        default=HIDDEN,
        verbose_name='Visibilidade'
    )
    priority = models.PositiveIntegerField(
        default=0,
        verbose_name='Prioridade'
    )

    class Meta:
        ordering = ['priority', 'id']
        verbose_name = 'Regra de Etiqueta'
        verbose_name_plural = 'Regras de Etiquetas'

    def __str__(self):
        scope = 'padrão' if self.is_default else 'clientes'
        return f"{self.enterprise.name} ({scope}, {self.get_matched_variants_visibility_display()})"

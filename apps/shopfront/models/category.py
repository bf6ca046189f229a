from django.db import models
from django.utils.text import slugify


class Category(models.Model):
    """
    Hierarchical product categories (taxons).
    Examples: Hortifruti / Frutas / Cítricos
    """
    name = models.CharField(
        max_length=200,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=200,
        unique=True,
        verbose_name='Slug'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Categoria Pai'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'name']
        verbose_name = 'Categoria'
        verbose_name_plural = 'Categorias'

    def __str__(self):
        return self.full_path

    def lineage(self):
        """Categories from the root taxon down to this one."""
        chain = []
        node = self
        # A parent loop saved through the admin would never reach a root
        while node is not None and node not in chain:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    @property
    def full_path(self):
        """Shopfront breadcrumb, e.g. "Hortifruti / Frutas"."""
        return ' / '.join(category.name for category in self.lineage())

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self._unique_slug()
        super().save(*args, **kwargs)

    def _unique_slug(self):
        # Slugs carry the taxon path so that "Frutas" under two roots do not clash
        base = slugify(' '.join(category.name for category in self.lineage()))[:190] or 'categoria'
        taken = set(
            Category.objects.filter(slug__startswith=base)
            .exclude(pk=self.pk)
            .values_list('slug', flat=True)
        )
        slug, suffix = base, 2
        while slug in taken:
            slug = f"{base}-{suffix}"
            suffix += 1
        return slug

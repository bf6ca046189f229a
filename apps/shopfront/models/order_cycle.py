from django.db import models
from django.utils import timezone


class OrderCycle(models.Model):
    """
    A bounded selling period. Incoming exchanges bring variants from
    producers, outgoing exchanges make them available through hubs.
    """
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )
    coordinator = models.ForeignKey(
        'shopfront.Enterprise',
        on_delete=models.PROTECT,
        related_name='coordinated_order_cycles',
        verbose_name='Coordenador'
    )
    opens_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Abre em'
    )
    closes_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Fecha em'
    )

    class Meta:
        ordering = ['-opens_at', 'name']
        verbose_name = 'Ciclo de Pedidos'
        verbose_name_plural = 'Ciclos de Pedidos'

    def __str__(self):
        return self.name

    @property
    def is_open(self):
        if not self.opens_at or not self.closes_at:
            return False
        return self.opens_at <= timezone.now() < self.closes_at

    def distributors(self):
        from .enterprise import Enterprise
        return Enterprise.objects.filter(
            received_exchanges__order_cycle=self,
            received_exchanges__incoming=False,
        ).distinct()

    def variants_distributed_by(self, distributor):
        """Variants of the outgoing exchanges towards `distributor`, without duplicates."""
        from .variant import Variant
        exchange_variants = Exchange.variants.through.objects.filter(
            exchange__order_cycle=self,
            exchange__incoming=False,
            exchange__receiver=distributor,
        )
        return Variant.objects.filter(pk__in=exchange_variants.values('variant_id'))


class Exchange(models.Model):
    order_cycle = models.ForeignKey(
        OrderCycle,
        on_delete=models.CASCADE,
        related_name='exchanges',
        verbose_name='Ciclo de Pedidos'
    )
    sender = models.ForeignKey(
        'shopfront.Enterprise',
        on_delete=models.CASCADE,
        related_name='sent_exchanges',
        verbose_name='Remetente'
    )
    receiver = models.ForeignKey(
        'shopfront.Enterprise',
        on_delete=models.CASCADE,
        related_name='received_exchanges',
        verbose_name='Destinatário'
    )
    incoming = models.BooleanField(
        default=False,
        verbose_name='Entrada'
    )
    variants = models.ManyToManyField(
        'shopfront.Variant',
        blank=True,
        related_name='exchanges',
        verbose_name='Variantes'
    )

    class Meta:
        unique_together = ['order_cycle', 'sender', 'receiver', 'incoming']
        verbose_name = 'Troca'
        verbose_name_plural = 'Trocas'

    def __str__(self):
        direction = 'entrada' if self.incoming else 'saída'
        return f"{self.order_cycle.name}: {self.sender.name} → {self.receiver.name} ({direction})"

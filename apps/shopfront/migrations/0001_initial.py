# Generated manually

from decimal import Decimal

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import simple_history.models


HISTORY_TYPE_CHOICES = [('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')]


def history_fields():
    return [
        ('history_id', models.AutoField(primary_key=True, serialize=False)),
        ('history_date', models.DateTimeField(db_index=True)),
        ('history_change_reason', models.CharField(max_length=100, null=True)),
        ('history_type', models.CharField(choices=HISTORY_TYPE_CHOICES, max_length=1)),
        ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
    ]


def history_options(verbose_name, verbose_name_plural):
    return {
        'verbose_name': f'historical {verbose_name}',
        'verbose_name_plural': f'historical {verbose_name_plural}',
        'ordering': ('-history_date', '-history_id'),
        'get_latest_by': ('history_date', 'history_id'),
    }


def historical_fk(to):
    return models.ForeignKey(
        blank=True,
        db_constraint=False,
        null=True,
        on_delete=django.db.models.deletion.DO_NOTHING,
        related_name='+',
        to=to,
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=200, unique=True, verbose_name='Slug')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='shopfront.category', verbose_name='Categoria Pai')),
            ],
            options={
                'verbose_name': 'Categoria',
                'verbose_name_plural': 'Categorias',
                'ordering': ['display_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Enterprise',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=255, unique=True, verbose_name='Slug')),
                ('is_producer', models.BooleanField(default=False, verbose_name='Produtor')),
                ('is_distributor', models.BooleanField(default=False, verbose_name='Distribuidor (hub)')),
                ('shopfront_product_sorting_method', models.CharField(choices=[('by_name', 'Por nome'), ('by_producer', 'Por produtor'), ('by_category', 'Por categoria')], default='by_name', max_length=20, verbose_name='Ordenação dos produtos')),
                ('shopfront_producer_order', models.CharField(blank=True, help_text='IDs de produtores separados por vírgula (ex: "4,2,9")', max_length=1000, verbose_name='Ordem dos produtores')),
                ('shopfront_taxon_order', models.CharField(blank=True, help_text='IDs de categorias separados por vírgula (ex: "3,1")', max_length=1000, verbose_name='Ordem das categorias')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
            ],
            options={
                'verbose_name': 'Empresa',
                'verbose_name_plural': 'Empresas',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Property',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True, verbose_name='Nome')),
                ('presentation', models.CharField(blank=True, max_length=100, verbose_name='Apresentação')),
            ],
            options={
                'verbose_name': 'Propriedade',
                'verbose_name_plural': 'Propriedades',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Tag',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True, verbose_name='Nome')),
            ],
            options={
                'verbose_name': 'Etiqueta',
                'verbose_name_plural': 'Etiquetas',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=255, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Descrição')),
                ('inherits_properties', models.BooleanField(default=True, verbose_name='Herda propriedades do produtor')),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
            ],
            options={
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductProperty',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(blank=True, max_length=255, verbose_name='Valor')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_properties', to='shopfront.product', verbose_name='Produto')),
                ('property', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_properties', to='shopfront.property', verbose_name='Propriedade')),
            ],
            options={
                'verbose_name': 'Propriedade do Produto',
                'verbose_name_plural': 'Propriedades dos Produtos',
                'unique_together': {('product', 'property')},
            },
        ),
        migrations.AddField(
            model_name='product',
            name='properties',
            field=models.ManyToManyField(blank=True, related_name='products', through='shopfront.ProductProperty', to='shopfront.property', verbose_name='Propriedades'),
        ),
        migrations.CreateModel(
            name='ProducerProperty',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(blank=True, max_length=255, verbose_name='Valor')),
                ('producer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='producer_properties', to='shopfront.enterprise', verbose_name='Produtor')),
                ('property', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='producer_properties', to='shopfront.property', verbose_name='Propriedade')),
            ],
            options={
                'verbose_name': 'Propriedade do Produtor',
                'verbose_name_plural': 'Propriedades dos Produtores',
                'unique_together': {('producer', 'property')},
            },
        ),
        migrations.CreateModel(
            name='Variant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sku', models.CharField(max_length=100, unique=True, verbose_name='SKU')),
                ('name', models.CharField(blank=True, help_text='Nome personalizado (gerado automaticamente se vazio)', max_length=255, verbose_name='Nome')),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço')),
                ('count_on_hand', models.IntegerField(default=0, verbose_name='Quantidade em estoque')),
                ('on_demand', models.BooleanField(default=False, help_text='Pode ser vendido sem estoque', verbose_name='Sob encomenda')),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('primary_category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='variants', to='shopfront.category', verbose_name='Categoria principal')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='variants', to='shopfront.product', verbose_name='Produto')),
                ('supplier', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='supplied_variants', to='shopfront.enterprise', verbose_name='Fornecedor')),
                ('tags', models.ManyToManyField(blank=True, related_name='variants', to='shopfront.tag', verbose_name='Etiquetas')),
            ],
            options={
                'verbose_name': 'Variante',
                'verbose_name_plural': 'Variantes',
                'ordering': ['product', 'sku'],
            },
        ),
        migrations.CreateModel(
            name='VariantOverride',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('count_on_hand', models.IntegerField(blank=True, null=True, verbose_name='Quantidade em estoque')),
                ('on_demand', models.BooleanField(blank=True, help_text='Vazio usa a configuração do produtor', null=True, verbose_name='Sob encomenda')),
                ('hub', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='variant_overrides', to='shopfront.enterprise', verbose_name='Hub')),
                ('variant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='overrides', to='shopfront.variant', verbose_name='Variante')),
            ],
            options={
                'verbose_name': 'Ajuste de Estoque do Hub',
                'verbose_name_plural': 'Ajustes de Estoque dos Hubs',
                'unique_together': {('hub', 'variant')},
            },
        ),
        migrations.CreateModel(
            name='OrderCycle',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('opens_at', models.DateTimeField(blank=True, null=True, verbose_name='Abre em')),
                ('closes_at', models.DateTimeField(blank=True, null=True, verbose_name='Fecha em')),
                ('coordinator', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='coordinated_order_cycles', to='shopfront.enterprise', verbose_name='Coordenador')),
            ],
            options={
                'verbose_name': 'Ciclo de Pedidos',
                'verbose_name_plural': 'Ciclos de Pedidos',
                'ordering': ['-opens_at', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Exchange',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('incoming', models.BooleanField(default=False, verbose_name='Entrada')),
                ('order_cycle', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='exchanges', to='shopfront.ordercycle', verbose_name='Ciclo de Pedidos')),
                ('receiver', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='received_exchanges', to='shopfront.enterprise', verbose_name='Destinatário')),
                ('sender', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sent_exchanges', to='shopfront.enterprise', verbose_name='Remetente')),
                ('variants', models.ManyToManyField(blank=True, related_name='exchanges', to='shopfront.variant', verbose_name='Variantes')),
            ],
            options={
                'verbose_name': 'Troca',
                'verbose_name_plural': 'Trocas',
                'unique_together': {('order_cycle', 'sender', 'receiver', 'incoming')},
            },
        ),
        migrations.CreateModel(
            name='Customer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('email', models.EmailField(max_length=254, verbose_name='E-mail')),
                ('name', models.CharField(blank=True, max_length=255, verbose_name='Nome')),
                ('enterprise', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='customers', to='shopfront.enterprise', verbose_name='Hub')),
                ('tags', models.ManyToManyField(blank=True, related_name='customers', to='shopfront.tag', verbose_name='Etiquetas')),
            ],
            options={
                'verbose_name': 'Cliente',
                'verbose_name_plural': 'Clientes',
                'ordering': ['email'],
                'unique_together': {('enterprise', 'email')},
            },
        ),
        migrations.CreateModel(
            name='TagRule',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('is_default', models.BooleanField(default=False, verbose_name='Regra padrão')),
                ('matched_variants_visibility', models.CharField(choices=[('visible', 'Visível'), ('hidden', 'Oculto')], default='hidden', max_length=10, verbose_name='Visibilidade')),
                ('priority', models.PositiveIntegerField(default=0, verbose_name='Prioridade')),
                ('enterprise', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tag_rules', to='shopfront.enterprise', verbose_name='Hub')),
                ('preferred_customer_tags', models.ManyToManyField(blank=True, related_name='customer_tag_rules', to='shopfront.tag', verbose_name='Etiquetas de clientes')),
                ('preferred_variant_tags', models.ManyToManyField(related_name='variant_tag_rules', to='shopfront.tag', verbose_name='Etiquetas de variantes')),
            ],
            options={
                'verbose_name': 'Regra de Etiqueta',
                'verbose_name_plural': 'Regras de Etiquetas',
                'ordering': ['priority', 'id'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalProduct',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=255, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Descrição')),
                ('inherits_properties', models.BooleanField(default=True, verbose_name='Herda propriedades do produtor')),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Atualizado em')),
            ] + history_fields(),
            options=history_options('Produto', 'Produtos'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalVariant',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('sku', models.CharField(db_index=True, max_length=100, verbose_name='SKU')),
                ('name', models.CharField(blank=True, help_text='Nome personalizado (gerado automaticamente se vazio)', max_length=255, verbose_name='Nome')),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço')),
                ('count_on_hand', models.IntegerField(default=0, verbose_name='Quantidade em estoque')),
                ('on_demand', models.BooleanField(default=False, help_text='Pode ser vendido sem estoque', verbose_name='Sob encomenda')),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Atualizado em')),
                ('primary_category', historical_fk('shopfront.category')),
                ('product', historical_fk('shopfront.product')),
                ('supplier', historical_fk('shopfront.enterprise')),
            ] + history_fields(),
            options=history_options('Variante', 'Variantes'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalVariantOverride',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('count_on_hand', models.IntegerField(blank=True, null=True, verbose_name='Quantidade em estoque')),
                ('on_demand', models.BooleanField(blank=True, help_text='Vazio usa a configuração do produtor', null=True, verbose_name='Sob encomenda')),
                ('hub', historical_fk('shopfront.enterprise')),
                ('variant', historical_fk('shopfront.variant')),
            ] + history_fields(),
            options=history_options('Ajuste de Estoque do Hub', 'Ajustes de Estoque dos Hubs'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]

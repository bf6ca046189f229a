from django.apps import AppConfig


class ShopfrontConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.shopfront'
    label = 'shopfront'
    verbose_name = 'Vitrine'

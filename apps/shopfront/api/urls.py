from django.urls import path

from .views import ShopfrontProductsView

urlpatterns = [
    path(
        'hubs/<int:hub_id>/order-cycles/<int:order_cycle_id>/products/',
        ShopfrontProductsView.as_view(),
        name='shopfront-products',
    ),
]

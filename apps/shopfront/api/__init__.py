from .serializers import (
    ShopfrontProductSerializer,
    ShopfrontVariantSerializer,
)

__all__ = [
    'ShopfrontProductSerializer',
    'ShopfrontVariantSerializer',
]

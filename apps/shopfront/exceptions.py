"""
Typed conditions raised by the shopfront catalog pipeline.
"""


class ShopfrontError(Exception):
    """Base class for shopfront catalog errors."""


class NoProductsAvailable(ShopfrontError):
    """
    The request cannot be answered because the hub or the order cycle is
    missing. Distinct from a catalog that is legitimately empty.
    """


class InvalidSortPreference(ShopfrontError, ValueError):
    """A hub's stored producer/category order could not be parsed."""


class InvalidFilterParams(ShopfrontError, ValueError):
    """Filter params that do not validate, such as `supplier_in=abc`."""

    def __init__(self, errors):
        self.errors = errors
        detail = '; '.join(
            f"{field}: {' '.join(messages)}" for field, messages in errors.items()
        )
        super().__init__(f"Invalid filter params ({detail})")

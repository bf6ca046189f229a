"""
Page slicing of materialised shopfront results.
"""

from django.conf import settings
from django.core.paginator import InvalidPage, Paginator


def per_page_or_default(per_page=None) -> int:
    """
    Page size to use: the configured default when not given, capped at
    SHOPFRONT_MAX_PER_PAGE. Raises ValueError for sizes below 1.
    """
    if per_page in (None, ''):
        return settings.SHOPFRONT_DEFAULT_PER_PAGE
    per_page = int(per_page)
    if per_page < 1:
        raise ValueError(f"per_page must be at least 1, got {per_page}")
    return min(per_page, settings.SHOPFRONT_MAX_PER_PAGE)


def paginate(results, page=1, per_page=None) -> list:
    """
    Return page `page` (1-based) of `results`.

    Pages out of range, or not a number, are empty rather than an error.
    """
    paginator = Paginator(list(results), per_page_or_default(per_page))
    try:
        return list(paginator.page(1 if page is None else page).object_list)
    except InvalidPage:
        return []

"""
Product filters - search, category and price narrowing.

Every function returns a new list and leaves its input untouched.
"""

from typing import List, Optional

from app.models.filters import ALL_CATEGORIES, ProductFilters
from app.models.product import Product

from . import product_sorting as sorting


def filter_by_keyword(products: List[Product], keyword: Optional[str]) -> List[Product]:
    """Case-insensitive substring match over name, description and category."""
    if not keyword or not keyword.strip():
        return list(products)
    keyword_lower = keyword.lower()
    return [
        p for p in products
        if keyword_lower in (p.name or '').lower()
        or keyword_lower in (p.description or '').lower()
        or keyword_lower in (p.category or '').lower()
    ]


def filter_by_category(products: List[Product], category: Optional[str]) -> List[Product]:
    """Exact category match; None or 'all' keeps everything."""
    if not category or category == ALL_CATEGORIES:
        return list(products)
    return [p for p in products if p.category == category]


def filter_by_price_range(products: List[Product], min_price: Optional[float] = None,
                          max_price: Optional[float] = None) -> List[Product]:
    """Inclusive price bounds; a None bound is not applied."""
    filtered = list(products)
    if isinstance(min_price, (int, float)) and not isinstance(min_price, bool):
        filtered = [p for p in filtered if p.price >= min_price]
    if isinstance(max_price, (int, float)) and not isinstance(max_price, bool):
        filtered = [p for p in filtered if p.price <= max_price]
    return filtered


def apply_filters(products: List[Product], filters: Optional[ProductFilters]) -> List[Product]:
    """Search, then category, then price bounds, then sort."""
    if filters is None:
        return list(products)

    results = filter_by_keyword(products, filters.search)
    results = filter_by_category(results, filters.category)
    results = filter_by_price_range(results, filters.min_price, filters.max_price)
    return sorting.sort_products(results, filters.sort_by, filters.sort_order)

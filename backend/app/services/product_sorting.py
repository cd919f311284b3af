"""
Product sorting - ordering by name, price or rating.
"""

from typing import Any, List, Optional

from app.models.filters import SORT_FIELDS
from app.models.product import Product


def resolve_sort_field(sort_by: Optional[str]) -> Optional[str]:
    """Return the sortable field name, or None for missing/unknown values."""
    normalized = (sort_by or '').strip()
    return normalized if normalized in SORT_FIELDS else None


def resolve_sort_order(sort_order: Optional[str]) -> str:
    """Anything other than desc sorts ascending."""
    return 'desc' if (sort_order or '').strip().lower() == 'desc' else 'asc'


def sort_key(product: Product, field: str) -> Any:
    """Strings compare case-insensitively, numbers numerically."""
    value = getattr(product, field)
    if isinstance(value, str):
        return value.lower()
    if value is None:
        return 0
    return value


def sort_products(products: List[Product], sort_by: Optional[str] = None,
                  sort_order: Optional[str] = None) -> List[Product]:
    """Sort by name/price/rating. Unknown or missing sort_by keeps input order."""
    field = resolve_sort_field(sort_by)
    if field is None:
        return list(products)
    return sorted(
        products,
        key=lambda p: sort_key(p, field),
        reverse=resolve_sort_order(sort_order) == 'desc'
    )

import math
from typing import Any, Mapping, Optional

ALL_CATEGORIES = 'all'
SORT_FIELDS = ('name', 'price', 'rating')


class ProductFilters:
    """Catalog filter/sort options.

    Every field defaults to ``None``, meaning "do not filter (or sort) on this
    dimension". A value of ``None`` is never replaced by a default.
    """

    def __init__(self, search: Optional[str] = None, category: Optional[str] = None,
                 min_price: Optional[float] = None, max_price: Optional[float] = None,
                 sort_by: Optional[str] = None, sort_order: Optional[str] = None):
        self.search = search
        self.category = category
        self.min_price = min_price
        self.max_price = max_price
        self.sort_by = sort_by
        self.sort_order = sort_order

    @classmethod
    def from_query_args(cls, args: Mapping[str, Any]) -> 'ProductFilters':
        """Build filters from query-string parameters.

        Absent or empty parameters stay ``None``. Raises ``ValueError`` when a
        price bound is not a number.
        """
        def _text(key):
            value = args.get(key)
            if value is None or value == '':
                return None
            return value

        return cls(
            search=_text('search'),
            category=_text('category'),
            min_price=_parse_price(_text('minPrice'), 'minPrice'),
            max_price=_parse_price(_text('maxPrice'), 'maxPrice'),
            sort_by=_text('sortBy'),
            sort_order=_text('sortOrder'),
        )

    def to_dict(self):
        return {
            'search': self.search,
            'category': self.category,
            'minPrice': self.min_price,
            'maxPrice': self.max_price,
            'sortBy': self.sort_by,
            'sortOrder': self.sort_order,
        }

    def __repr__(self):
        fields = ', '.join(f"{k}={v!r}" for k, v in self.to_dict().items() if v is not None)
        return f"ProductFilters({fields})"


def _parse_price(raw: Optional[str], name: str) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number")
    if math.isnan(value):
        raise ValueError(f"{name} must be a number")
    return value

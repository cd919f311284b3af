# Services package
#
# Module structure:
# - product_service.py: payload validation and the operations the routes call
# - product_store.py: in-memory products/reviews, CRUD, rating aggregation
# - product_filters.py: search, category and price filtering
# - product_sorting.py: name/price/rating ordering

from .product_service import ProductService
from .product_store import ProductStore
from . import product_filters
from . import product_sorting

__all__ = [
    'ProductService',
    'ProductStore',
    'product_filters',
    'product_sorting',
]

"""
Product service - request-level business logic.

Validates incoming payloads and delegates to the store:
- product_store: records, CRUD and rating aggregation
- product_filters / product_sorting: catalog narrowing and ordering
"""

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.errors import NotFoundError, ValidationError
from app.models.filters import ProductFilters
from app.models.product import Product
from app.models.review import Review

from .product_store import ProductStore

PRODUCT_REQUIRED_FIELDS = ('name', 'description', 'price', 'category', 'image')
PRODUCT_TEXT_FIELDS = ('name', 'description', 'category', 'image')
REVIEW_REQUIRED_FIELDS = ('productId', 'author', 'rating', 'comment')


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _require_object(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def _check_price(price: Any) -> None:
    if not _is_number(price) or not math.isfinite(price):
        raise ValidationError('Price must be a number')
    if price <= 0:
        raise ValidationError('Price must be greater than 0')


def _is_iso_date(value: Any) -> bool:
    """True only for zero-padded YYYY-MM-DD strings naming a real date."""
    if not isinstance(value, str):
        return False
    try:
        parsed = datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        return False
    return parsed.strftime('%Y-%m-%d') == value


def _check_in_stock(data: Dict[str, Any]) -> None:
    if 'inStock' in data and not isinstance(data['inStock'], bool):
        raise ValidationError('inStock must be a boolean')


def validate_product_create(data: Any) -> Dict[str, Any]:
    """Validate a full product payload."""
    data = _require_object(data)
    if any(_is_missing(data.get(field)) for field in PRODUCT_REQUIRED_FIELDS):
        raise ValidationError('Missing required fields')
    for field in PRODUCT_TEXT_FIELDS:
        if not isinstance(data[field], str):
            raise ValidationError(f'{field} must be a string')
    _check_price(data['price'])
    _check_in_stock(data)
    return data


def validate_product_update(data: Any) -> Dict[str, Any]:
    """Validate a partial product payload; only provided fields are checked."""
    data = _require_object(data)
    for field in PRODUCT_TEXT_FIELDS:
        if field in data and (not isinstance(data[field], str) or _is_missing(data[field])):
            raise ValidationError(f'{field} must be a non-empty string')
    if 'price' in data:
        _check_price(data['price'])
    _check_in_stock(data)
    return data


def validate_review_create(data: Any) -> Dict[str, Any]:
    """Validate a review payload."""
    data = _require_object(data)
    if any(_is_missing(data.get(field)) for field in REVIEW_REQUIRED_FIELDS):
        raise ValidationError('Missing required fields')
    for field in ('productId', 'author', 'comment'):
        if not isinstance(data[field], str):
            raise ValidationError(f'{field} must be a string')

    rating = data['rating']
    if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
        raise ValidationError('Rating must be an integer between 1 and 5')

    review_date = data.get('date')
    if review_date is not None and not _is_iso_date(review_date):
        raise ValidationError('date must be an ISO date (YYYY-MM-DD)')
    return data


class ProductService:
    """Product and review operations over a single store."""

    def __init__(self, store: ProductStore):
        self.store = store

    # ========== Products ==========

    def list_products(self, product_filters: Optional[ProductFilters] = None) -> List[Product]:
        return self.store.list_products(product_filters)

    def get_product(self, product_id: str) -> Product:
        product = self.store.get_product(product_id)
        if product is None:
            raise NotFoundError('Product not found')
        return product

    def create_product(self, data: Any) -> Product:
        return self.store.create_product(validate_product_create(data))

    def update_product(self, product_id: str, data: Any) -> Product:
        product = self.store.update_product(product_id, validate_product_update(data))
        if product is None:
            raise NotFoundError('Product not found')
        return product

    def delete_product(self, product_id: str) -> bool:
        if not self.store.delete_product(product_id):
            raise NotFoundError('Product not found')
        return True

    def reset_catalog(self) -> List[Product]:
        return self.store.reset_catalog()

    def list_categories(self) -> List[str]:
        return self.store.list_categories()

    # ========== Reviews ==========

    def list_reviews(self) -> List[Review]:
        return self.store.list_reviews()

    def get_reviews_for_product(self, product_id: str) -> List[Review]:
        return self.store.get_reviews_for_product(product_id)

    def create_review(self, data: Any) -> Review:
        return self.store.create_review(validate_review_create(data))

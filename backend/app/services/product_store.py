"""
Product store - in-memory products and reviews, CRUD and rating aggregation.

One store instance is created per application and shared by the request
handlers. There is no locking: the store is meant for a single-process
deployment.
"""

import logging
import uuid
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from app.models.filters import ProductFilters
from app.models.product import Product
from app.models.review import Review

from . import product_filters as filters

logger = logging.getLogger(__name__)

# Sample catalog loaded on startup and by reset_catalog()
SAMPLE_PRODUCTS = [
    {
        'id': '1',
        'name': 'Sony PlayStation 5 Pro',
        'description': 'Next-generation gaming console with 8K support and advanced ray tracing capabilities. Experience gaming like never before with ultra-fast SSD and immersive 3D audio.',
        'price': 399.99,
        'category': 'Gaming',
        'image': '/playstation.jpg',
        'inStock': True,
        'rating': 4.8,
        'reviewCount': 156,
    },
    {
        'id': '2',
        'name': 'AirPods Pro (3rd Generation)',
        'description': 'Premium wireless earbuds with active noise cancellation, spatial audio, and adaptive transparency mode for the ultimate listening experience.',
        'price': 89.99,
        'category': 'Audio',
        'image': '/airpod.jpg',
        'inStock': True,
        'rating': 4.6,
        'reviewCount': 89,
    },
    {
        'id': '3',
        'name': 'iPhone 15 Pro Max 256GB',
        'description': 'The most advanced iPhone yet with titanium design, A17 Pro chip, and professional camera system with 5x telephoto zoom.',
        'price': 599.99,
        'category': 'Phones',
        'image': '/iphone_15.jpg',
        'inStock': True,
        'rating': 4.9,
        'reviewCount': 203,
    },
    {
        'id': '4',
        'name': 'Polaroid DSLR Camera',
        'description': 'Professional full-frame mirrorless camera with 45MP resolution, 8K video recording, and advanced image stabilization.',
        'price': 929.99,
        'category': 'Photography',
        'image': '/product.jpg',
        'inStock': True,
        'rating': 4.7,
        'reviewCount': 67,
    },
    {
        'id': '5',
        'name': 'MacBook Pro 14" M3 Pro',
        'description': 'Supercharged for pros with M3 Pro chip, up to 18-hour battery life, and stunning Liquid Retina XDR display.',
        'price': 1299.99,
        'category': 'Laptops',
        'image': '/macbook.jpg',
        'inStock': False,
        'rating': 4.9,
        'reviewCount': 124,
    },
    {
        'id': '6',
        'name': 'Amazon Echo Dot (5th Gen)',
        'description': 'Smart speaker with Alexa, improved sound quality, and built-in motion detection for smart home automation.',
        'price': 29.99,
        'category': 'Smart Home',
        'image': '/amazon_echo.jpg',
        'inStock': True,
        'rating': 4.4,
        'reviewCount': 312,
    },
]

SAMPLE_REVIEWS = [
    {
        'id': '1',
        'productId': '2',
        'author': 'John Smith',
        'rating': 5,
        'comment': 'Excellent sound quality and the noise cancellation is amazing!',
        'date': '2024-01-15',
    },
]


def new_id() -> str:
    return uuid.uuid4().hex


def average_rating(ratings: List[int]) -> float:
    """Mean of the ratings rounded half-up to one decimal place."""
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


class ProductStore:
    """In-memory product and review store."""

    def __init__(self, seed: bool = True):
        self._products: List[Product] = []
        self._reviews: List[Review] = []
        if seed:
            self._load_seed()

    def _load_seed(self) -> None:
        # Fresh objects every time so mutations never leak into the next reset
        self._products = [Product.from_dict(data) for data in SAMPLE_PRODUCTS]
        self._reviews = [Review.from_dict(data) for data in SAMPLE_REVIEWS]

    # ========== Products ==========

    def list_products(self, product_filters: Optional[ProductFilters] = None) -> List[Product]:
        """All products, narrowed and ordered when filters are given."""
        if product_filters is None:
            return list(self._products)
        return filters.apply_filters(self._products, product_filters)

    def get_product(self, product_id: str) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def create_product(self, data: Dict[str, Any]) -> Product:
        """Add a product. Identity and derived fields in data are ignored."""
        product = Product(
            id=new_id(),
            name=data.get('name'),
            description=data.get('description'),
            price=data.get('price'),
            category=data.get('category'),
            image=data.get('image'),
            in_stock=data.get('inStock', True),
        )
        self._products.append(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def update_product(self, product_id: str, data: Dict[str, Any]) -> Optional[Product]:
        """Merge editable fields over an existing product."""
        product = self.get_product(product_id)
        if product is None:
            return None
        product.apply_changes(data)
        logger.info("Updated product %s", product_id)
        return product

    def delete_product(self, product_id: str) -> bool:
        initial_length = len(self._products)
        self._products = [p for p in self._products if p.id != product_id]
        removed = len(self._products) < initial_length
        if removed:
            logger.info("Deleted product %s", product_id)
        return removed

    def reset_catalog(self) -> List[Product]:
        """Replace all products and reviews with the sample catalog."""
        self._load_seed()
        logger.info("Catalog reset to %d sample products", len(self._products))
        return list(self._products)

    def list_categories(self) -> List[str]:
        return sorted({p.category for p in self._products})

    # ========== Reviews ==========

    def list_reviews(self) -> List[Review]:
        return list(self._reviews)

    def get_reviews_for_product(self, product_id: str) -> List[Review]:
        return [r for r in self._reviews if r.product_id == product_id]

    def create_review(self, data: Dict[str, Any]) -> Review:
        """Add a review and recompute the product's rating."""
        review = Review(
            id=new_id(),
            product_id=data.get('productId'),
            author=data.get('author'),
            rating=data.get('rating'),
            comment=data.get('comment'),
            date=data.get('date'),
        )
        self._reviews.append(review)
        logger.info("Created review %s for product %s", review.id, review.product_id)
        self._recompute_rating(review.product_id)
        return review

    def _recompute_rating(self, product_id: str) -> None:
        reviews = self.get_reviews_for_product(product_id)
        if not reviews:
            return

        product = self.get_product(product_id)
        if product is None:
            # Orphaned reviews are allowed; there is nothing to update.
            logger.info("Review target %s not found, rating not recomputed", product_id)
            return

        product.update_rating(average_rating([r.rating for r in reviews]), len(reviews))

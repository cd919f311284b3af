"""
Tests for the in-memory product store and rating aggregation.
"""

import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(PROJECT_ROOT, "backend"))

import pytest  # noqa: E402

from app.models.filters import ProductFilters  # noqa: E402
from app.services.product_store import ProductStore, average_rating  # noqa: E402


def _product_payload(**overrides):
    payload = {
        "name": "Mechanical Keyboard",
        "description": "Hot-swappable 75% keyboard",
        "price": 149.0,
        "category": "Accessories",
        "image": "/keyboard.jpg",
        "inStock": True,
    }
    payload.update(overrides)
    return payload


def _review_payload(product_id, rating, **overrides):
    payload = {
        "productId": product_id,
        "author": "Tester",
        "rating": rating,
        "comment": "Works as described",
        "date": "2024-02-01",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def store():
    return ProductStore()


class TestCatalog:

    def test_seed_catalog(self, store):
        assert len(store.list_products()) == 6
        assert len(store.list_reviews()) == 1

    def test_unseeded_store_is_empty(self):
        empty = ProductStore(seed=False)
        assert empty.list_products() == []
        assert empty.list_reviews() == []
        assert empty.list_categories() == []

    def test_list_products_with_filters(self, store):
        gaming = store.list_products(ProductFilters(category="Gaming"))
        assert [p.name for p in gaming] == ["Sony PlayStation 5 Pro"]

        mid_range = store.list_products(ProductFilters(min_price=500, max_price=1000))
        assert [(p.name, p.price) for p in mid_range] == [
            ("iPhone 15 Pro Max 256GB", 599.99),
            ("Polaroid DSLR Camera", 929.99),
        ]

    def test_list_products_returns_new_list(self, store):
        listed = store.list_products()
        listed.clear()
        assert len(store.list_products()) == 6

    def test_categories_sorted_and_stable(self, store):
        first = store.list_categories()
        assert first == ["Audio", "Gaming", "Laptops", "Phones", "Photography", "Smart Home"]
        assert store.list_categories() == first

    def test_categories_are_distinct(self, store):
        store.create_product(_product_payload(category="Audio"))
        assert store.list_categories().count("Audio") == 1

    def test_reset_restores_seed(self, store):
        store.delete_product("1")
        store.update_product("3", {"name": "Renamed"})
        store.create_product(_product_payload())
        store.create_review(_review_payload("4", 1))

        products = store.reset_catalog()

        assert len(products) == 6
        assert store.get_product("1") is not None
        assert store.get_product("3").name == "iPhone 15 Pro Max 256GB"
        assert [r.id for r in store.list_reviews()] == ["1"]

    def test_reset_does_not_share_records_between_resets(self, store):
        store.reset_catalog()
        store.update_product("2", {"price": 1.0})
        store.reset_catalog()
        assert store.get_product("2").price == 89.99


class TestProductCrud:

    def test_create_ignores_derived_fields(self, store):
        product = store.create_product(
            _product_payload(id="forged", rating=4.9, reviewCount=1000, createdAt="1999-01-01")
        )
        assert product.id != "forged"
        assert product.rating == 0
        assert product.review_count == 0
        assert product.created_at != "1999-01-01"
        assert product.updated_at is None

    def test_create_then_get_round_trip(self, store):
        product = store.create_product(_product_payload())
        fetched = store.get_product(product.id)
        assert fetched == product
        assert fetched.to_dict() == product.to_dict()

    def test_created_ids_are_unique(self, store):
        ids = {store.create_product(_product_payload()).id for _ in range(50)}
        assert len(ids) == 50

    def test_in_stock_defaults_to_true(self, store):
        payload = _product_payload()
        del payload["inStock"]
        assert store.create_product(payload).in_stock is True

    def test_update_merges_fields(self, store):
        updated = store.update_product("1", {"price": 349.99, "inStock": False})
        assert updated.price == 349.99
        assert updated.in_stock is False
        assert updated.name == "Sony PlayStation 5 Pro"
        assert updated.updated_at is not None

    def test_update_ignores_derived_fields(self, store):
        updated = store.update_product("1", {"rating": 1.0, "reviewCount": 3, "id": "other"})
        assert updated.id == "1"
        assert updated.rating == 4.8
        assert updated.review_count == 156

    def test_update_unknown_returns_none(self, store):
        assert store.update_product("missing", {"name": "x"}) is None

    def test_delete(self, store):
        assert store.delete_product("1") is True
        assert store.get_product("1") is None
        assert store.delete_product("1") is False
        assert len(store.list_products()) == 5


class TestReviews:

    def test_review_on_seeded_product(self, store):
        store.create_review(_review_payload("2", 5, author="A", comment="x", date="2024-01-01"))
        product = store.get_product("2")
        assert product.rating == 5.0
        assert product.review_count == 2

    @pytest.mark.parametrize(
        "ratings, expected",
        [
            ([5], 5.0),
            ([4, 5], 4.5),
            ([1, 2, 2], 1.7),
            ([3, 4, 4], 3.7),
            ([1, 1, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2], 1.9),
        ],
    )
    def test_rating_is_rounded_average(self, ratings, expected):
        store = ProductStore(seed=False)
        product = store.create_product(_product_payload())
        for rating in ratings:
            store.create_review(_review_payload(product.id, rating))

        refreshed = store.get_product(product.id)
        assert refreshed.rating == expected
        assert refreshed.review_count == len(ratings)

    def test_average_rating_rounds_half_up(self):
        # 4.25 and 4.75 sit exactly on the rounding boundary
        assert average_rating([4, 4, 4, 5]) == 4.3
        assert average_rating([4, 5, 5, 5]) == 4.8
        assert average_rating([1, 2]) == 1.5

    def test_review_for_missing_product_is_kept(self, store):
        review = store.create_review(_review_payload("ghost", 3))
        assert review in store.list_reviews()
        assert store.get_product("ghost") is None

    def test_review_for_deleted_product(self, store):
        store.delete_product("4")
        store.create_review(_review_payload("4", 2))
        assert [r.rating for r in store.get_reviews_for_product("4")] == [2]
        assert store.get_product("4") is None

    def test_reviews_by_product(self, store):
        store.create_review(_review_payload("3", 4))
        assert [r.product_id for r in store.get_reviews_for_product("3")] == ["3"]
        assert store.get_reviews_for_product("nothing") == []

    def test_review_without_date_gets_today(self, store):
        payload = _review_payload("3", 4)
        del payload["date"]
        review = store.create_review(payload)
        assert len(review.date) == 10
        assert review.date.count("-") == 2

    def test_review_ids_are_unique(self, store):
        ids = {store.create_review(_review_payload("5", 5)).id for _ in range(20)}
        assert len(ids) == 20
        assert store.get_product("5").review_count == 20


def test_records_compare_by_value_and_are_unhashable(store):
    product = store.get_product("1")
    assert product == store.list_products()[0]
    with pytest.raises(TypeError):
        hash(product)
    with pytest.raises(TypeError):
        {store.list_reviews()[0]}

from flask import Blueprint, request

from app.errors import StoreError
from app.routes.responses import error, failure, get_service, success

reviews_bp = Blueprint('reviews', __name__)


@reviews_bp.route('', methods=['GET'])
def list_reviews():
    try:
        return success([r.to_dict() for r in get_service().list_reviews()])
    except Exception:
        return failure('Failed to fetch reviews')


@reviews_bp.route('/<product_id>', methods=['GET'])
def get_product_reviews(product_id):
    """Reviews for one product (empty list for unknown products)"""
    try:
        reviews = get_service().get_reviews_for_product(product_id)
        return success([r.to_dict() for r in reviews])
    except Exception:
        return failure('Failed to fetch reviews')


@reviews_bp.route('', methods=['POST'])
def create_review():
    """Create a review and refresh the product's rating"""
    try:
        review = get_service().create_review(request.get_json(silent=True))
        return success(review.to_dict(), 201)
    except StoreError as e:
        return error(e.message, e.status_code)
    except Exception:
        return failure('Failed to create review')

from flask import Blueprint, request

from app.errors import StoreError
from app.models.filters import ProductFilters
from app.routes.responses import error, failure, get_service, success

products_bp = Blueprint('products', __name__)


@products_bp.route('', methods=['GET'])
def list_products():
    """List products

    Query Parameters:
    - search: substring over name/description/category
    - category: exact category ('all' disables the filter)
    - minPrice / maxPrice: inclusive price bounds
    - sortBy: name/price/rating
    - sortOrder: asc/desc
    """
    try:
        try:
            product_filters = ProductFilters.from_query_args(request.args)
        except ValueError as e:
            return error(str(e), 400)

        products = get_service().list_products(product_filters)
        return success([p.to_dict() for p in products])
    except Exception:
        return failure('Failed to fetch products')


@products_bp.route('', methods=['POST'])
def create_product():
    try:
        product = get_service().create_product(request.get_json(silent=True))
        return success(product.to_dict(), 201)
    except StoreError as e:
        return error(e.message, e.status_code)
    except Exception:
        return failure('Failed to create product')


@products_bp.route('/categories', methods=['GET'])
def get_categories():
    """Distinct categories, sorted"""
    try:
        return success(get_service().list_categories())
    except Exception:
        return failure('Failed to fetch categories')


@products_bp.route('/reset', methods=['POST'])
def reset_products():
    """Replace the catalog with the sample data"""
    try:
        products = get_service().reset_catalog()
        return success([p.to_dict() for p in products])
    except Exception:
        return failure('Failed to reset products')


@products_bp.route('/<product_id>', methods=['GET'])
def get_product(product_id):
    try:
        return success(get_service().get_product(product_id).to_dict())
    except StoreError as e:
        return error(e.message, e.status_code)
    except Exception:
        return failure('Failed to fetch product')


@products_bp.route('/<product_id>', methods=['PUT'])
def update_product(product_id):
    try:
        product = get_service().update_product(product_id, request.get_json(silent=True))
        return success(product.to_dict())
    except StoreError as e:
        return error(e.message, e.status_code)
    except Exception:
        return failure('Failed to update product')


@products_bp.route('/<product_id>', methods=['DELETE'])
def delete_product(product_id):
    try:
        return success(get_service().delete_product(product_id))
    except StoreError as e:
        return error(e.message, e.status_code)
    except Exception:
        return failure('Failed to delete product')

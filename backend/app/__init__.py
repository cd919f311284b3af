import logging

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import Config
from app.routes.responses import error, success
from app.services.product_service import ProductService
from app.services.product_store import ProductStore


def create_app(config_object=None, store=None):
    """Create the Flask application.

    A store can be passed in (tests do); otherwise a fresh one is built,
    seeded according to SEED_CATALOG.
    """
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.json.sort_keys = False

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # CORS: use explicit allowlist in production when provided.
    cors_origins = app.config.get('CORS_ALLOWED_ORIGINS', [])
    if cors_origins:
        CORS(app, resources={r"/api/*": {"origins": cors_origins}})
    else:
        CORS(app, resources={r"/api/*": {"origins": "*"}})

    if store is None:
        store = ProductStore(seed=app.config.get('SEED_CATALOG', True))
    app.extensions['product_store'] = store
    app.extensions['product_service'] = ProductService(store)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return error(e.description, e.code)

    # Blueprints
    from app.routes.products import products_bp
    from app.routes.reviews import reviews_bp

    prefix = app.config.get('API_PREFIX', '/api')
    app.register_blueprint(products_bp, url_prefix=f'{prefix}/products')
    app.register_blueprint(reviews_bp, url_prefix=f'{prefix}/reviews')

    @app.route(f'{prefix}/health', methods=['GET'])
    def health():
        return success({'status': 'ok'})

    return app

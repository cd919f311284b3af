"""
Shared helpers for building the {success, data, error} envelope.
"""

from flask import current_app, jsonify


def get_service():
    return current_app.extensions['product_service']


def success(data, status=200):
    return jsonify({
        'success': True,
        'data': data
    }), status


def error(message, status):
    return jsonify({
        'success': False,
        'error': message
    }), status


def failure(message):
    """Log the active exception and return a generic 500 envelope."""
    current_app.logger.exception(message)
    return error(message, 500)

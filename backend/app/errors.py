"""
Error types raised by the service layer and translated to HTTP envelopes.
"""


class StoreError(Exception):
    """Base error for storefront operations."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    """Missing or invalid input; reported to the caller as 400."""

    status_code = 400


class NotFoundError(StoreError):
    """Unknown identifier; reported to the caller as 404."""

    status_code = 404

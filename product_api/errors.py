# product_api/errors.py
from typing import List, Optional


class ProductStoreError(Exception):
    """Base error; carries the HTTP status and the message shown to clients."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(ProductStoreError):
    status_code = 400
    message = "All fields are required"

    def __init__(self, missing: Optional[List[str]] = None, message: Optional[str] = None):
        self.missing = missing or []
        super().__init__(message)


class NotFoundError(ProductStoreError):
    status_code = 404
    message = "Product not found"


class StorageError(ProductStoreError):
    status_code = 500
    message = "Storage failure"

"""
Domain errors raised by the services layer.

Every error carries the HTTP status it is rendered with; the API layer turns
them into ``{"success": false, "message": ...}`` responses.
"""
from fastapi import status


class InventoryError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(InventoryError):
    """Missing or malformed input (too few images, bad content type)."""


class InvalidArgumentError(InventoryError):
    """Argument outside the accepted set, e.g. an unknown dropdown field."""


class DuplicateKeyError(InventoryError):
    """Unique constraint violation."""


class InvalidReferenceError(InventoryError):
    """Brand/model reference that does not resolve or does not match."""


class NotFoundError(InventoryError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(InventoryError):
    """Deletion blocked by dependent records."""
    status_code = status.HTTP_409_CONFLICT


class ImageStorageError(InventoryError):
    status_code = status.HTTP_502_BAD_GATEWAY

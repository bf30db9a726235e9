from __future__ import annotations


class StoreError(Exception):
    """Base class for errors surfaced to API callers as 404 responses."""

    message = "Resource not found"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ResourceNotFoundError(StoreError):
    message = "Resource not found"


class ItemNotFoundError(StoreError):
    message = "Item not found"


class NotACollectionError(StoreError):
    message = "Resource not found or not a collection"

from __future__ import annotations

from .bootstrap import initialize_store
from .disk_store import DiskJsonDocumentStore
from .errors import ItemNotFoundError, NotACollectionError, ResourceNotFoundError, StoreError
from .repositories import AsyncDiskResourceRepository, AsyncResourceRepository
from .resources import DiskResourceRepository, ResourceRepository
from .schema import RESOURCE_KINDS, ResourceKind

__all__ = [
    "initialize_store",
    "DiskJsonDocumentStore",
    "StoreError",
    "ResourceNotFoundError",
    "ItemNotFoundError",
    "NotACollectionError",
    "ResourceRepository",
    "DiskResourceRepository",
    "AsyncResourceRepository",
    "AsyncDiskResourceRepository",
    "RESOURCE_KINDS",
    "ResourceKind",
]

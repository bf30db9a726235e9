from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Mapping, Protocol

from .disk_store import DiskJsonDocumentStore
from .resources import DiskResourceRepository
from .schema import Record


class AsyncResourceRepository(Protocol):
    """
    Resource-level persistence interface used by the HTTP endpoints.
    Operations are addressed by resource name, mirroring the /api/{resource} routes.
    """

    async def list_items(self, resource: str) -> list[Record] | Record: ...
    async def get_item(self, resource: str, item_id: Any) -> Record: ...
    async def create_item(self, resource: str, payload: Mapping[str, Any]) -> Record: ...
    async def update_item(self, resource: str, item_id: Any, payload: Mapping[str, Any]) -> Record: ...
    async def delete_item(self, resource: str, item_id: Any) -> dict[str, Any]: ...
    async def replace_active_orders(self, payload: Mapping[str, Any]) -> Record: ...


class AsyncDiskResourceRepository(AsyncResourceRepository):
    """
    Async wrapper around the disk-backed resource repository.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    Each call runs one whole load/mutate/save cycle in the worker thread, so the
    store's path lock covers the cycle.
    """

    def __init__(self, path: Path | None) -> None:
        self._store = DiskJsonDocumentStore(path)
        self._repo = DiskResourceRepository(self._store)

    @property
    def path(self) -> Path | None:
        return self._store.path

    async def list_items(self, resource: str) -> list[Record] | Record:
        return await asyncio.to_thread(self._repo.list_items, resource)

    async def get_item(self, resource: str, item_id: Any) -> Record:
        return await asyncio.to_thread(self._repo.get_item, resource, item_id)

    async def create_item(self, resource: str, payload: Mapping[str, Any]) -> Record:
        return await asyncio.to_thread(self._repo.create_item, resource, payload)

    async def update_item(self, resource: str, item_id: Any, payload: Mapping[str, Any]) -> Record:
        return await asyncio.to_thread(self._repo.update_item, resource, item_id, payload)

    async def delete_item(self, resource: str, item_id: Any) -> dict[str, Any]:
        return await asyncio.to_thread(self._repo.delete_item, resource, item_id)

    async def replace_active_orders(self, payload: Mapping[str, Any]) -> Record:
        return await asyncio.to_thread(self._repo.replace_active_orders, payload)

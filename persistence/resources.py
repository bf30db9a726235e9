from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from .errors import ItemNotFoundError, NotACollectionError, ResourceNotFoundError
from .interfaces import KeyValueDocumentStore
from .schema import ACTIVE_ORDERS, RESOURCE_KINDS, Record, ResourceKind, ids_match, next_id, resolve_resource

logger = logging.getLogger(__name__)


class ResourceRepository(Protocol):
    def list_items(self, resource: str) -> list[Record] | Record:
        ...

    def get_item(self, resource: str, item_id: Any) -> Record:
        ...

    def create_item(self, resource: str, payload: Mapping[str, Any]) -> Record:
        ...

    def update_item(self, resource: str, item_id: Any, payload: Mapping[str, Any]) -> Record:
        ...

    def delete_item(self, resource: str, item_id: Any) -> dict[str, Any]:
        ...

    def replace_active_orders(self, payload: Mapping[str, Any]) -> Record:
        ...


class DiskResourceRepository(ResourceRepository):
    """
    Generic CRUD over the named resources of the shared document.

    Every call reloads the document from the store; writes run inside
    store.transaction() so concurrent cycles cannot interleave.
    """

    def __init__(self, store: KeyValueDocumentStore):
        self._store = store

    @property
    def store(self) -> KeyValueDocumentStore:
        return self._store

    def list_items(self, resource: str) -> list[Record] | Record:
        doc = self._store.load()
        resolve_resource(doc, resource)
        return doc[resource]

    def get_item(self, resource: str, item_id: Any) -> Record:
        doc = self._store.load()
        kind = resolve_resource(doc, resource)
        if kind is ResourceKind.SINGLETON:
            return doc[resource]
        for item in doc[resource]:
            if ids_match(item, item_id):
                return item
        raise ItemNotFoundError()

    def create_item(self, resource: str, payload: Mapping[str, Any]) -> Record:
        with self._store.transaction() as doc:
            kind = resolve_resource(doc, resource)
            new_item = dict(payload)
            if kind is ResourceKind.COLLECTION:
                new_item["id"] = next_id(doc[resource])
                doc[resource].append(new_item)
                logger.debug("CREATE %s: id=%s", resource, new_item["id"])
            else:
                doc[resource] = {**doc[resource], **new_item}
        return new_item

    def update_item(self, resource: str, item_id: Any, payload: Mapping[str, Any]) -> Record:
        with self._store.transaction() as doc:
            kind = resolve_resource(doc, resource)
            if kind is ResourceKind.SINGLETON:
                doc[resource] = {**doc[resource], **payload}
                return doc[resource]

            items = doc[resource]
            for index, existing in enumerate(items):
                if ids_match(existing, item_id):
                    # The stored id wins so ids stay unique within the collection.
                    items[index] = {**existing, **payload, "id": existing["id"]}
                    return items[index]
            raise ItemNotFoundError()

    def delete_item(self, resource: str, item_id: Any) -> dict[str, Any]:
        with self._store.transaction() as doc:
            if RESOURCE_KINDS.get(resource) is not ResourceKind.COLLECTION:
                raise NotACollectionError()
            try:
                resolve_resource(doc, resource)
            except ResourceNotFoundError as e:
                raise NotACollectionError() from e
            before = len(doc[resource])
            doc[resource] = [item for item in doc[resource] if not ids_match(item, item_id)]
            logger.debug("DELETE %s/%s: removed=%d", resource, item_id, before - len(doc[resource]))
        return {"success": True, "message": "Item deleted"}

    def replace_active_orders(self, payload: Mapping[str, Any]) -> Record:
        with self._store.transaction() as doc:
            resolve_resource(doc, ACTIVE_ORDERS)
            doc[ACTIVE_ORDERS] = dict(payload)
            return doc[ACTIVE_ORDERS]

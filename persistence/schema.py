from __future__ import annotations

import enum
import re
from typing import Any, Mapping

from .errors import ResourceNotFoundError

Record = dict[str, Any]

_INT_RE = re.compile(r"^[+-]?\d+$")


class ResourceKind(str, enum.Enum):
    COLLECTION = "collection"
    SINGLETON = "singleton"


# Closed registry: the only names the API will address.
RESOURCE_KINDS: dict[str, ResourceKind] = {
    "users": ResourceKind.COLLECTION,
    "menu": ResourceKind.COLLECTION,
    "orders": ResourceKind.COLLECTION,
    "activeOrders": ResourceKind.SINGLETON,
}

_KIND_TYPES: dict[ResourceKind, type] = {
    ResourceKind.COLLECTION: list,
    ResourceKind.SINGLETON: dict,
}

ACTIVE_ORDERS = "activeOrders"


def default_document() -> dict[str, Any]:
    """
    The empty shared data file:
      {
        "users": [ {"id": 1, ...}, ... ],
        "menu": [ {"id": 1, ...}, ... ],
        "orders": [ {"id": 1, ...}, ... ],
        "activeOrders": { ... }
      }
    """
    return {"users": [], "menu": [], "orders": [], "activeOrders": {}}


def resolve_resource(doc: Mapping[str, Any], resource: str) -> ResourceKind:
    """
    Single validation point for resource names.

    Raises ResourceNotFoundError unless the name is registered and `doc` holds
    a value of the registered shape under it. Other resources in the document
    are not affected by one of the wrong shape.
    """
    kind = RESOURCE_KINDS.get(resource)
    if kind is None or not isinstance(doc.get(resource), _KIND_TYPES[kind]):
        raise ResourceNotFoundError()
    return kind


def normalize_id(value: Any) -> int | None:
    """
    Identity used for every id comparison: ints and whole floats as-is,
    integer strings parsed.

    Anything else (bool, 2.5, None, "abc") has no identity and never matches.
    """
    if isinstance(value, bool):  # bool is subclass of int in Python
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        s = value.strip()
        if _INT_RE.match(s):
            return int(s)
    return None


def ids_match(record: Any, item_id: Any) -> bool:
    # Rows that are not objects stay in place but never match.
    if not isinstance(record, Mapping):
        return False
    wanted = normalize_id(item_id)
    return wanted is not None and normalize_id(record.get("id")) == wanted


def next_id(records: list[Any]) -> int:
    ids = [normalize_id(r.get("id")) for r in records if isinstance(r, Mapping)]
    ids = [i for i in ids if i is not None]
    return max(ids) + 1 if ids else 1

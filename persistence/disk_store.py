from __future__ import annotations

import contextlib
import logging
import threading
from pathlib import Path
from typing import Any, Iterator

from json_store import atomic_write_json, read_json

from .interfaces import KeyValueDocumentStore
from .locks import GLOBAL_PATH_LOCKS
from .schema import default_document

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores the shared POS document on disk at a fixed path.

    - Always returns a dict (the default empty document on unset path,
      missing file or invalid JSON).
    - Writes atomically; write failures propagate.
    - transaction() holds the path lock for the whole load -> mutate -> save cycle.
    """

    def __init__(self, path: Path | None):
        self._path = path
        self._unbound_lock = threading.RLock()

    @property
    def path(self) -> Path | None:
        return self._path

    def _lock(self):
        if self._path is None:
            return self._unbound_lock
        return GLOBAL_PATH_LOCKS.lock_for(self._path)

    def load(self) -> dict[str, Any]:
        if self._path is None:
            return default_document()
        with self._lock():
            raw = read_json(self._path)
        if not isinstance(raw, dict):
            if raw is not None:
                logger.warning("DB LOAD: %s does not hold a JSON object; using empty document", self._path)
            return default_document()
        # Row and resource shapes are not checked here; a bad resource is only
        # unaddressable, it never empties the rest of the document.
        return raw

    def save(self, doc: dict[str, Any]) -> None:
        if self._path is None:
            return
        with self._lock():
            try:
                atomic_write_json(self._path, doc)
            except OSError:
                logger.exception("DB SAVE: failed to write %s", self._path)
                raise

    @contextlib.contextmanager
    def transaction(self) -> Iterator[dict[str, Any]]:
        """
        Yield the loaded document; save it when the block exits normally.

        An exception raised inside the block skips the save.
        """
        with self._lock():
            doc = self.load()
            yield doc
            self.save(doc)

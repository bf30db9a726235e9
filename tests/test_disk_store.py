from __future__ import annotations

import json

import pytest

from persistence.disk_store import DiskJsonDocumentStore

EMPTY = {"users": [], "menu": [], "orders": [], "activeOrders": {}}


def test_load_returns_default_document_when_unset_or_missing(tmp_path):
    assert DiskJsonDocumentStore(None).load() == EMPTY
    assert DiskJsonDocumentStore(tmp_path / "missing.json").load() == EMPTY


def test_load_masks_corrupt_files_as_empty_datastore(tmp_path):
    path = tmp_path / "db.json"

    path.write_text("{not json", encoding="utf-8")
    assert DiskJsonDocumentStore(path).load() == EMPTY

    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert DiskJsonDocumentStore(path).load() == EMPTY

    # shapes inside an object are left alone
    odd = {"users": {"id": 1}, "menu": [{"id": 1}, "legacy-row"]}
    path.write_text(json.dumps(odd), encoding="utf-8")
    assert DiskJsonDocumentStore(path).load() == odd


def test_load_keeps_missing_resources_missing_and_extra_keys(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps({"menu": [{"id": 1, "note": None}], "settings": {"tax": 0.16}}), encoding="utf-8")

    doc = DiskJsonDocumentStore(path).load()
    assert doc == {"menu": [{"id": 1, "note": None}], "settings": {"tax": 0.16}}


def test_save_writes_full_document(tmp_path):
    path = tmp_path / "nested" / "db.json"
    store = DiskJsonDocumentStore(path)
    doc = {"users": [{"id": 1, "name": "Señor"}], "menu": [], "orders": [], "activeOrders": {"mesa1": [1]}}

    store.save(doc)

    assert json.loads(path.read_text(encoding="utf-8")) == doc
    assert "Señor" in path.read_text(encoding="utf-8")
    assert store.load() == doc


def test_save_is_noop_without_path():
    DiskJsonDocumentStore(None).save({"users": [{"id": 1}]})


def test_save_failure_propagates(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = DiskJsonDocumentStore(blocker / "db.json")

    with pytest.raises(OSError):
        store.save({"users": []})


def test_transaction_saves_on_success_and_skips_on_error(tmp_path):
    path = tmp_path / "db.json"
    store = DiskJsonDocumentStore(path)

    with store.transaction() as doc:
        doc["users"].append({"id": 1})
    assert store.load()["users"] == [{"id": 1}]

    with pytest.raises(RuntimeError):
        with store.transaction() as doc:
            doc["users"].append({"id": 2})
            raise RuntimeError("boom")
    assert store.load()["users"] == [{"id": 1}]

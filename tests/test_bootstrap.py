from __future__ import annotations

import dataclasses
import logging

from persistence.bootstrap import initialize_store
from persistence.paths import bundled_template


def test_initialize_copies_template_byte_for_byte(sandbox_settings, db_file):
    assert not db_file.exists()

    path = initialize_store(sandbox_settings)

    assert path == db_file
    assert db_file.read_bytes() == bundled_template().read_bytes()


def test_initialize_is_idempotent(sandbox_settings, db_file):
    initialize_store(sandbox_settings)
    db_file.write_text('{"users": [], "menu": [], "orders": [], "activeOrders": {"a": 1}}', encoding="utf-8")

    initialize_store(sandbox_settings)

    assert '"a": 1' in db_file.read_text(encoding="utf-8")


def test_initialize_logs_and_continues_when_template_missing(sandbox_settings, db_file, tmp_path, caplog):
    settings = dataclasses.replace(sandbox_settings, template_file=tmp_path / "nope.json")

    with caplog.at_level(logging.ERROR, logger="persistence.bootstrap"):
        path = initialize_store(settings)

    assert path == db_file
    assert not db_file.exists()
    assert "failed to initialize" in caplog.text


def test_template_holds_every_registered_resource():
    import json

    from persistence.schema import RESOURCE_KINDS, ResourceKind

    doc = json.loads(bundled_template().read_text(encoding="utf-8"))
    for name, kind in RESOURCE_KINDS.items():
        expected = list if kind is ResourceKind.COLLECTION else dict
        assert isinstance(doc[name], expected)

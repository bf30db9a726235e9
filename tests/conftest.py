from __future__ import annotations

import dataclasses
import json
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_settings(tmp_path: Path):
    """
    Settings pointing the per-user data directory at a temp dir so tests never touch the real one.
    """
    from settings import get_settings

    return dataclasses.replace(get_settings(), data_dir=tmp_path / "data", template_file=None)


@pytest.fixture
def db_file(sandbox_settings) -> Path:
    from persistence.paths import db_path

    return db_path(sandbox_settings)


@pytest.fixture
def write_db(db_file: Path):
    def _write(doc: dict) -> Path:
        db_file.parent.mkdir(parents=True, exist_ok=True)
        db_file.write_text(json.dumps(doc), encoding="utf-8")
        return db_file

    return _write

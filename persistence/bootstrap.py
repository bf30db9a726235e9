from __future__ import annotations

import logging
import shutil
from pathlib import Path

from settings import Settings

from .paths import db_path, ensure_dir, template_path

logger = logging.getLogger(__name__)


def initialize_store(settings: Settings) -> Path:
    """
    Resolve the shared data file and seed it from the template on first run.

    Safe to call repeatedly: an existing data file is never touched. A failed
    copy is logged and startup continues; reads then see an empty document
    until the first write creates the file.
    """
    path = db_path(settings)
    if path.exists():
        logger.info("DB INIT: shared database found at %s", path)
        return path

    template = template_path(settings)
    logger.info("DB INIT: shared database not found; seeding from %s", template)
    try:
        ensure_dir(path.parent)
        shutil.copyfile(template, path)
    except OSError:
        logger.exception("DB INIT: failed to initialize %s from %s", path, template)
    else:
        logger.info("DB INIT: shared database initialized at %s", path)
    return path

from __future__ import annotations

import os
import sys
from pathlib import Path

from settings import Settings

TEMPLATE_FILENAME = "database-template.json"


def package_dir() -> Path:
    # persistence/paths.py -> persistence
    return Path(__file__).resolve().parent


def bundled_template() -> Path:
    return package_dir() / TEMPLATE_FILENAME


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def user_data_root() -> Path:
    """Per-user application data root for the current platform."""
    if sys.platform.startswith("win"):
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.getenv("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else Path.home() / ".config"


def data_dir(settings: Settings) -> Path:
    if settings.data_dir is not None:
        return settings.data_dir
    return user_data_root() / settings.app_name


def db_path(settings: Settings) -> Path:
    return data_dir(settings) / settings.db_filename


def template_path(settings: Settings) -> Path:
    return settings.template_file or bundled_template()

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_APP_NAME = "app-mesero"
DEFAULT_DB_FILENAME = "restaurante_nice2_shared_data.json"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Path | None:
    raw = (os.getenv(name) or "").strip()
    return Path(raw).expanduser() if raw else None


@dataclass(frozen=True)
class Settings:
    # Storage
    app_name: str
    data_dir: Path | None
    db_filename: str
    template_file: Path | None

    # Server
    host: str
    port: int
    cors_origins: list[str]

    # Debug
    log_level: str
    debug_log_requests: bool


def get_settings() -> Settings:
    app_name = os.getenv("POS_APP_NAME", DEFAULT_APP_NAME).strip() or DEFAULT_APP_NAME

    # None means "use the platform's per-user data directory".
    data_dir = _env_path("POS_DATA_DIR")
    db_filename = os.getenv("POS_DB_FILENAME", DEFAULT_DB_FILENAME).strip() or DEFAULT_DB_FILENAME
    template_file = _env_path("POS_TEMPLATE_FILE")

    host = os.getenv("POS_HOST", "127.0.0.1")
    port = _env_int("POS_PORT", 3001)
    cors_origins = [o.strip() for o in os.getenv("POS_CORS_ORIGINS", "*").split(",") if o.strip()]

    log_level = os.getenv("POS_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    return Settings(
        app_name=app_name,
        data_dir=data_dir,
        db_filename=db_filename,
        template_file=template_file,
        host=host,
        port=port,
        cors_origins=cors_origins or ["*"],
        log_level=log_level,
        debug_log_requests=debug_log_requests,
    )

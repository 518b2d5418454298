"""
Configuration helpers for the Songbook backend.

Routers/services read settings from here instead of touching os.environ
directly. ``get_settings`` is cached; tests call ``get_settings.cache_clear()``
after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: Path
    storage_backend: str
    database_url: str
    web_dir: Path
    cors_origins: tuple[str, ...]
    log_level: str
    log_file: str
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _origins(value: str | None) -> tuple[str, ...]:
        items = [item.strip() for item in (value or "").split(",")]
        return tuple(item for item in items if item) or ("*",)

    storage = (os.getenv("SONGBOOK_STORAGE") or "json").strip().lower()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=Path(os.getenv("SONGBOOK_DATA_FILE") or ROOT_DIR / "data" / "canciones.json"),
        storage_backend=storage if storage in {"json", "sql"} else "json",
        database_url=os.getenv("DATABASE_URL", ""),
        web_dir=Path(os.getenv("SONGBOOK_WEB_DIR") or ROOT_DIR / "web"),
        cors_origins=_origins(os.getenv("SONGBOOK_CORS_ORIGINS")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "3000"), 3000),
    )

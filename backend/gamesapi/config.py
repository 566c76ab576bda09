"""Конфигурация приложения."""
import os
from functools import lru_cache
from pathlib import Path

DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "public" / "images"


def _env_int(name: str, default: int) -> int:
    raw = (os.environ.get(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


@lru_cache
def get_config():
    debug = os.environ.get("DEBUG", "0").lower() in ("1", "true", "yes")
    return type("Config", (), {
        "host": os.environ.get("HOST", "0.0.0.0"),
        "port": _env_int("PORT", DEFAULT_PORT),
        "debug": debug,
        "log_level": os.environ.get("LOG_LEVEL", "DEBUG" if debug else "INFO").upper(),
        "allowed_origins": os.environ.get("ALLOWED_ORIGINS", "*").split(","),
        "static_dir": Path(os.environ.get("STATIC_DIR") or DEFAULT_STATIC_DIR),
        "static_prefix": os.environ.get("STATIC_PREFIX", "/images"),
    })()

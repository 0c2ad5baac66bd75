"""Analyzer configuration read from the environment at call time."""

from __future__ import annotations

import os
from typing import Optional

DEFAULT_MAX_WORKERS = 4


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "1" if default else "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


def default_routes_dir() -> Optional[str]:
    value = os.getenv("ROUTESCOPE_ROUTES_DIR", "").strip()
    return value or None


def max_workers() -> int:
    raw = os.getenv("ROUTESCOPE_MAX_WORKERS", str(DEFAULT_MAX_WORKERS)).strip()
    try:
        return max(1, int(raw))
    except ValueError:
        return DEFAULT_MAX_WORKERS


def include_options_default() -> bool:
    return env_flag("ROUTESCOPE_INCLUDE_OPTIONS", False)


def log_level() -> str:
    value = os.getenv("ROUTESCOPE_LOG_LEVEL", "INFO").strip().upper()
    if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return "INFO"
    return value


def allowed_origins() -> list[str]:
    raw = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]

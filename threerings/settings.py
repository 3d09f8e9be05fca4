"""
Process-level settings read from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_CANVAS_SIZE = 800
DEFAULT_CORS_ORIGINS = ["http://localhost:5173"]


def env_int(name: str, default: int, min_value: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if min_value is not None and value < min_value:
        value = min_value
    return value


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    if s in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    items = [item.strip() for item in raw.split(",")]
    return [item for item in items if item]


@dataclass
class Settings:
    canvas_size: int = DEFAULT_CANVAS_SIZE
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    debug: bool = False
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build settings from THREE_RINGS_* environment variables."""
    debug = env_bool("THREE_RINGS_DEBUG", False)
    log_level = os.getenv("THREE_RINGS_LOG_LEVEL", "INFO").upper()
    if debug:
        log_level = "DEBUG"
    return Settings(
        canvas_size=env_int("THREE_RINGS_CANVAS_SIZE", DEFAULT_CANVAS_SIZE, min_value=1),
        cors_origins=env_list("THREE_RINGS_CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        debug=debug,
        log_level=log_level,
    )

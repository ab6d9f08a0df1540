# src/chad_bot/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "CHAD"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Console output ----
    divider_width: int

    # ---- Command parsing ----
    allow_blank_fields: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "ChadGPT").strip() or "ChadGPT"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_dir = _env_path(_k("LOG_DIR"), None)

        divider_width = _env_int(_k("DIVIDER_WIDTH"), 60)
        if divider_width <= 0:
            divider_width = 60

        allow_blank_fields = _env_bool(_k("ALLOW_BLANK_FIELDS"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            divider_width=divider_width,
            allow_blank_fields=allow_blank_fields,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

# src/taskflow/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: the tracker runs with an empty environment.
- No log file unless TASKFLOW_LOG_DIR is set (tasks themselves are never persisted).
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKFLOW"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _default_color() -> bool:
    # https://no-color.org: any non-empty NO_COLOR disables color.
    if os.getenv("NO_COLOR"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Console ----
    color: bool
    prompt: str
    show_banner: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "TaskFlow").strip() or "TaskFlow"

        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper()
        if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            log_level = "WARNING"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=_env_path(_k("LOG_DIR")),
            color=_env_bool(_k("COLOR"), _default_color()),
            prompt=_env(_k("PROMPT"), "taskflow> "),
            show_banner=_env_bool(_k("SHOW_BANNER"), True),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

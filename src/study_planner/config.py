# src/study_planner/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time.
- Malformed values fall back to defaults instead of failing at import.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "PLANNER"

DEFAULT_TASKS_KEY = "kpss-planner-tasks-v2"
DEFAULT_LEGACY_TASKS_KEY = "kpss-planner-tasks"
DEFAULT_EXAM_DATE = date(2026, 9, 6)

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


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_date(name: str, default: date) -> date:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    db_path: Path

    # ---- Persistence keys ----
    tasks_key: str
    legacy_tasks_key: str

    # ---- Planner ----
    exam_date: date
    week_start: int  # 0 = Monday (date.weekday numbering)
    stats_locale: str

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "study-planner") or "study-planner"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/study_planner"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "planner.sqlite3")

        tasks_key = _env(_k("TASKS_KEY"), DEFAULT_TASKS_KEY).strip() or DEFAULT_TASKS_KEY
        legacy_tasks_key = (
            _env(_k("LEGACY_TASKS_KEY"), DEFAULT_LEGACY_TASKS_KEY).strip() or DEFAULT_LEGACY_TASKS_KEY
        )

        exam_date = _env_date(_k("EXAM_DATE"), DEFAULT_EXAM_DATE)

        week_start = _env_int(_k("WEEK_START"), 0)
        if not 0 <= week_start <= 6:
            week_start = 0

        stats_locale = _env(_k("STATS_LOCALE"), "tr").strip() or "tr"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            data_dir=data_dir,
            db_path=db_path,
            tasks_key=tasks_key,
            legacy_tasks_key=legacy_tasks_key,
            exam_date=exam_date,
            week_start=week_start,
            stats_locale=stats_locale,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

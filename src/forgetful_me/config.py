# src/forgetful_me/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- The task file path is explicit configuration, never derived from the executable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "FORGETFUL"

DEFAULT_DATA_DIR = Path("~/.local/share/forgetful_me")


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


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default.expanduser()
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Console ----
    color: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    log_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Forgetful Me").strip() or "Forgetful Me"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        # NO_COLOR is a cross-tool convention; it wins over our own switch.
        color = _env_bool(_k("COLOR"), True) and os.getenv("NO_COLOR") is None

        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR)
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        log_path = _env_path(_k("LOG_PATH"), data_dir / "forgetful_me.log")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            color=color,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_path=log_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings, read once (after loading .env) on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS

# src/forgetful_me/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the task file and store into AppState and loads the saved tasks.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import date

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, today: Callable[[], date] = date.today) -> AppState:
    """
    Create AppState from the provided settings and load the task file.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises StorageError/DocumentError if the task file cannot be loaded.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(TaskFile(settings.tasks_path), today=today)
    store.load()

    use_color = bool(getattr(settings, "color", False)) and sys.stdout.isatty()

    return AppState(
        settings=settings,
        task_store=store,
        color=use_color,
        today=today,
    )

# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from forgetful_me.core.state import AppState
from forgetful_me.tasks.task_file import TaskFile
from forgetful_me.tasks.task_store import TaskStore

TODAY = date(2026, 3, 10)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Forgetful Me",
        log_level="WARNING",
        color=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        log_path=tmp_path / "forgetful_me.log",
    )


@pytest.fixture()
def task_file(settings: SimpleNamespace) -> TaskFile:
    return TaskFile(settings.tasks_path)


@pytest.fixture()
def store(task_file: TaskFile) -> TaskStore:
    """Loaded store over a fresh file, with "today" pinned to TODAY."""
    s = TaskStore(task_file, today=lambda: TODAY)
    s.load()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, color=False, today=lambda: TODAY)

# src/forgetful_me/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them (app name, colors).
    settings: object

    task_store: TaskRepo
    color: bool = False

    # Source of "today" for urgency; injectable for tests.
    today: Callable[[], date] = field(default=date.today)

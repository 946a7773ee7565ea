# src/forgetful_me/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the console shell.

The shell depends on Protocols instead of concrete implementations,
so commands can be driven by a scripted prompter in tests.
"""

from collections.abc import Iterable
from datetime import date
from typing import Any, Callable, Protocol

Prompt = Callable[[str], str]
# Reads one line of user input for the given prompt (e.g. builtins.input).

Emitter = Callable[[str], None]
# Shows one line of output to the user.


class TaskRepo(Protocol):
    """What the shell needs from the task store."""

    def list(self) -> list[Any]: ...
    def create(self, name: str, description: str, deadline: date | None = None) -> Any: ...
    def delete(self, ids: Iterable[int]) -> int: ...
    def toggle_status(self, ids: Iterable[int]) -> int: ...

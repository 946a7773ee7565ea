# src/forgetful_me/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskStoreError(Exception):
    """Base class for failures raised by the task subsystem."""


class StorageError(TaskStoreError):
    """The task file could not be read or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Task file {self.path}: {reason}")


class DocumentError(TaskStoreError):
    """The task file exists but is not UTF-8 JSON text."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Malformed task file {self.path}: {reason}")


class TaskValidationError(TaskStoreError, ValueError):
    """A task field is out of range (too long, wrong type)."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)

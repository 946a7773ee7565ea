# src/forgetful_me/tasks/task_file.py

"""
JSON task file.

The whole collection lives in one document:

    {"task-list": [{"id": 0, "name": ..., "date_deadline": "0000-00-00"}, ...]}

Failure policy:
- I/O errors are fatal (StorageError)
- a document that is not UTF-8 JSON is fatal (DocumentError)
- a non-object document, or a missing or malformed "task-list", is recovered
  as an empty collection
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .errors import DocumentError, StorageError
from .task_models import Task

logger = logging.getLogger(__name__)

TASK_LIST_KEY = "task-list"


class TaskFile:
    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def ensure_exists(self) -> None:
        """Create the file with an empty collection if it is missing."""
        if self._path.exists():
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(self._path, f"cannot create directory: {e}") from e
        self.persist([])
        logger.info("Created empty task file %s", self._path)

    def load(self) -> list[Task]:
        try:
            raw = self._path.read_text("utf-8")
        except OSError as e:
            raise StorageError(self._path, f"cannot read: {e}") from e
        except UnicodeDecodeError as e:
            raise DocumentError(self._path, f"not UTF-8 text: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DocumentError(self._path, str(e)) from e

        if not isinstance(data, dict):
            logger.warning("Task file %s: top level is not an object; using an empty list.", self._path)
            return []

        tasks = self._decode_task_list(data.get(TASK_LIST_KEY))
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def _decode_task_list(self, items: Any) -> list[Task]:
        if items is None:
            logger.warning("Task file %s has no %r key; using an empty list.", self._path, TASK_LIST_KEY)
            return []
        if not isinstance(items, list):
            logger.warning("Task file %s: %r is not an array; using an empty list.", self._path, TASK_LIST_KEY)
            return []

        tasks: list[Task] = []
        for item in items:
            try:
                tasks.append(Task.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                # One bad entry invalidates the whole list, same as a bad key.
                logger.warning(
                    "Task file %s: malformed entry %r (%s); using an empty list.",
                    self._path,
                    item,
                    e,
                )
                return []
        return tasks

    def persist(self, tasks: Iterable[Task]) -> None:
        doc = {TASK_LIST_KEY: [t.to_dict() for t in tasks]}
        payload = json.dumps(doc, ensure_ascii=False, indent=2) + "\n"

        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(self._path, f"cannot write: {e}") from e
        logger.debug("Persisted %d tasks to %s", len(doc[TASK_LIST_KEY]), self._path)

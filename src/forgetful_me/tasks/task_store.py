# src/forgetful_me/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import date

from .task_file import TaskFile
from .task_models import Task, TaskStatus, validate_fields

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task collection backed by a TaskFile.

    Public ids are positional: after every delete the remaining tasks are
    renumbered 0..n-1 in their current order, so callers must not keep ids
    across a delete. Internally each task sits under a private key that never
    changes, and public ids are resolved through a lookup.

    Every mutation is flushed to disk before the method returns.
    """

    def __init__(self, task_file: TaskFile, *, today: Callable[[], date] = date.today) -> None:
        self._file = task_file
        self._today = today
        self._keys = itertools.count()
        self._tasks: dict[int, Task] = {}

    @property
    def task_file(self) -> TaskFile:
        return self._file

    def __len__(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    # ---- low-level helpers ----

    def _replace_all(self, tasks: Iterable[Task]) -> None:
        self._tasks = {next(self._keys): t for t in tasks}

    def _renumber(self) -> bool:
        changed = False
        for i, task in enumerate(self._tasks.values()):
            if task.id != i:
                task.id = i
                changed = True
        return changed

    def _key_by_id(self) -> dict[int, int]:
        return {task.id: key for key, task in self._tasks.items()}

    def _next_id(self) -> int:
        if not self._tasks:
            return 0
        return max(t.id for t in self._tasks.values()) + 1

    def _flush(self) -> None:
        self._file.ensure_exists()
        self._file.persist(self._tasks.values())

    # ---- public API ----

    def load(self) -> None:
        """Replace the in-memory collection with the file's content."""
        self._file.ensure_exists()
        self._replace_all(self._file.load())
        if self._renumber():
            logger.warning("Task ids in %s were not sequential; renumbered.", self._file.path)
        logger.info("TaskStore ready file=%s total=%s", self._file.path, len(self._tasks))

    def list(self) -> list[Task]:
        return [replace(t) for t in self._tasks.values()]

    def create(self, name: str, description: str, deadline: date | None = None) -> Task:
        validate_fields(name, description, deadline)

        task = Task(
            id=self._next_id(),
            name=name,
            description=description,
            status=TaskStatus.INCOMPLETE,
            date_posted=self._today(),
            date_deadline=deadline,
        )
        self._tasks[next(self._keys)] = task
        self._flush()
        logger.debug("Task created id=%s deadline=%s", task.id, deadline)
        return replace(task)

    def delete(self, ids: Iterable[int]) -> int:
        """Remove the given ids, then renumber. Unknown ids are skipped."""
        wanted = set(ids)
        by_id = self._key_by_id()
        removed = 0
        for task_id in sorted(wanted):
            key = by_id.get(task_id)
            if key is None:
                logger.debug("delete: no task with id=%s", task_id)
                continue
            del self._tasks[key]
            removed += 1

        self._renumber()
        self._flush()
        logger.debug("Deleted %d task(s) ids=%s remaining=%d", removed, sorted(wanted), len(self._tasks))
        return removed

    def toggle_status(self, ids: Iterable[int]) -> int:
        """Flip Incomplete <-> Complete for each id. Unknown ids are skipped."""
        by_id = self._key_by_id()
        toggled = 0
        for task_id in sorted(set(ids)):
            key = by_id.get(task_id)
            if key is None:
                logger.debug("toggle_status: no task with id=%s", task_id)
                continue
            task = self._tasks[key]
            task.status = task.status.toggled()
            toggled += 1

        self._renumber()
        self._flush()
        logger.debug("Toggled %d task(s)", toggled)
        return toggled

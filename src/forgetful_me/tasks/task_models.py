# src/forgetful_me/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from .errors import TaskValidationError

NAME_CHAR_LIMIT = 30
DESCRIPTION_CHAR_LIMIT = 100

# On-disk value for "no deadline"; in memory the deadline is None.
NO_DEADLINE = "0000-00-00"


class TaskStatus(StrEnum):
    """
    Task completion status.

    The only transition is a toggle between the two values, in either direction.
    """

    INCOMPLETE = "Incomplete"
    COMPLETE = "Complete"

    def toggled(self) -> TaskStatus:
        if self is TaskStatus.COMPLETE:
            return TaskStatus.INCOMPLETE
        return TaskStatus.COMPLETE


@dataclass(slots=True)
class Task:
    id: int
    name: str
    description: str
    status: TaskStatus
    date_posted: date
    date_deadline: date | None = None

    @property
    def has_deadline(self) -> bool:
        return self.date_deadline is not None

    def to_dict(self) -> dict[str, Any]:
        # Key order is part of the file format.
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "date_posted": self.date_posted.isoformat(),
            "date_deadline": format_deadline(self.date_deadline),
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Decode one entry of the task-list array.

        Raises ValueError/TypeError/KeyError on any malformed field; the caller
        decides how to recover.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"task entry must be an object, got {type(raw).__name__}")

        task_id = raw["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 0:
            raise ValueError(f"invalid task id: {task_id!r}")

        name = raw["name"]
        description = raw["description"]
        if not isinstance(name, str) or not isinstance(description, str):
            raise TypeError("name and description must be strings")

        return cls(
            id=task_id,
            name=name,
            description=description,
            status=TaskStatus(raw["status"]),
            date_posted=date.fromisoformat(raw["date_posted"]),
            date_deadline=parse_deadline(raw["date_deadline"]),
        )


def format_deadline(deadline: date | None) -> str:
    return NO_DEADLINE if deadline is None else deadline.isoformat()


def parse_deadline(raw: str) -> date | None:
    """Parse a stored deadline; the sentinel maps to None."""
    if raw == NO_DEADLINE:
        return None
    return date.fromisoformat(raw)


def validate_fields(name: str, description: str, deadline: date | None = None) -> None:
    if not isinstance(name, str):
        raise TaskValidationError("name", "Task name must be a string.")
    if not isinstance(description, str):
        raise TaskValidationError("description", "Task description must be a string.")
    if len(name) > NAME_CHAR_LIMIT:
        raise TaskValidationError(
            "name",
            f"Task name must be {NAME_CHAR_LIMIT} characters or less. Current: {len(name)}.",
        )
    if len(description) > DESCRIPTION_CHAR_LIMIT:
        raise TaskValidationError(
            "description",
            f"Task description must be {DESCRIPTION_CHAR_LIMIT} characters or less. "
            f"Current: {len(description)}.",
        )
    # datetime is a date subclass; a deadline is a calendar day only.
    if deadline is not None and (not isinstance(deadline, date) or isinstance(deadline, datetime)):
        raise TaskValidationError("date_deadline", "Task deadline must be a calendar date.")

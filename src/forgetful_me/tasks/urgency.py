# src/forgetful_me/tasks/urgency.py

"""
Deadline urgency.

Incomplete tasks with a real deadline fall into one bucket by days left:

    >= 7   ON_TRACK
    1..6   APPROACHING
    0      DUE_TODAY
    < 0    OVERDUE

Complete tasks and tasks without a deadline are not classified.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from enum import StrEnum

from .task_models import Task, TaskStatus

ON_TRACK_DAYS = 7


class Urgency(StrEnum):
    ON_TRACK = "on_track"
    APPROACHING = "approaching"
    DUE_TODAY = "due_today"
    OVERDUE = "overdue"


def days_until(deadline: date, reference: date) -> int:
    """Signed day count; negative means overdue."""
    return (deadline - reference).days


def deadline_urgency(deadline: date, reference: date) -> Urgency:
    days = days_until(deadline, reference)
    if days >= ON_TRACK_DAYS:
        return Urgency.ON_TRACK
    if days > 0:
        return Urgency.APPROACHING
    if days == 0:
        return Urgency.DUE_TODAY
    return Urgency.OVERDUE


def classify(task: Task, reference: date) -> Urgency | None:
    if task.status is not TaskStatus.INCOMPLETE or task.date_deadline is None:
        return None
    return deadline_urgency(task.date_deadline, reference)


def urgency_counts(tasks: Iterable[Task], reference: date) -> dict[Urgency, int]:
    counts = {u: 0 for u in Urgency}
    for task in tasks:
        bucket = classify(task, reference)
        if bucket is not None:
            counts[bucket] += 1
    return counts


def status_counts(tasks: Iterable[Task]) -> dict[TaskStatus, int]:
    counts = {s: 0 for s in TaskStatus}
    for task in tasks:
        counts[task.status] += 1
    return counts

# src/forgetful_me/connectors/console_render.py

"""Text rendering for the console: task cards and the status summary.

Deadlines are colored by urgency with plain ANSI codes. When color is off
the text is returned unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from ..tasks.task_models import Task, TaskStatus
from ..tasks.urgency import Urgency, deadline_urgency, status_counts, urgency_counts

RESET = "\033[0m"
BOLD = "\033[1m"

URGENCY_COLOR: dict[Urgency, str] = {
    Urgency.ON_TRACK: "\033[32m",  # green
    Urgency.APPROACHING: "\033[33m",  # yellow
    Urgency.DUE_TODAY: "\033[31m",  # red
    Urgency.OVERDUE: "\033[35m",  # magenta
}

URGENCY_LABEL: dict[Urgency, str] = {
    Urgency.ON_TRACK: "Green (on track)",
    Urgency.APPROACHING: "Yellow (approaching)",
    Urgency.DUE_TODAY: "Red (due today)",
    Urgency.OVERDUE: "Magenta (overdue)",
}


def color(text: str, style: str, *, enabled: bool) -> str:
    if not enabled or not style:
        return text
    return style + text + RESET


def format_deadline(task: Task, today: date, *, enabled: bool) -> str:
    if task.date_deadline is None:
        return "No deadline"
    # Completed tasks keep their deadline color in listings; only the counts skip them.
    bucket = deadline_urgency(task.date_deadline, today)
    return color(task.date_deadline.isoformat(), URGENCY_COLOR[bucket], enabled=enabled)


def format_task(task: Task, today: date, *, enabled: bool = False) -> str:
    return (
        f"{color(f'ID:{task.id}', BOLD, enabled=enabled)}\n"
        f" Name: {task.name}\n"
        f" Description: {task.description}\n"
        f" Status: {task.status.value}\n"
        f" Date Posted: {task.date_posted.isoformat()}\n"
        f" Deadline: {format_deadline(task, today, enabled=enabled)}\n"
    )


def format_task_list(tasks: Iterable[Task], today: date, *, enabled: bool = False) -> str:
    return "\n".join(format_task(t, today, enabled=enabled) for t in tasks)


def format_status_summary(tasks: list[Task], today: date, *, enabled: bool = False) -> str:
    by_status = status_counts(tasks)
    by_urgency = urgency_counts(tasks, today)

    lines = [
        f"Completed tasks:{by_status[TaskStatus.COMPLETE]}, "
        f"Incomplete tasks:{by_status[TaskStatus.INCOMPLETE]}",
        "",
    ]
    for bucket in Urgency:
        label = color(URGENCY_LABEL[bucket], URGENCY_COLOR[bucket], enabled=enabled)
        lines.append(f"\t{label}: {by_urgency[bucket]}")
    return "\n".join(lines)

# src/chad_bot/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class TaskKind(StrEnum):
    """Task variants; the value doubles as the command keyword that creates it."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def tag(self) -> str:
        return self.value[0].upper()


@dataclass(slots=True)
class Task:
    description: str
    done: bool = False

    kind: ClassVar[TaskKind]

    def mark_as_done(self) -> None:
        self.done = True

    def mark_as_incomplete(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def details(self) -> str:
        """Type-specific suffix appended after the description."""
        return ""

    def __str__(self) -> str:
        return f"[{self.kind.tag}][{self.status_icon}] {self.description}{self.details()}"


@dataclass(slots=True)
class Todo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    by: str = ""

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def details(self) -> str:
        return f" (by: {self.by})"


@dataclass(slots=True)
class Event(Task):
    start: str = ""
    end: str = ""

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def details(self) -> str:
        return f" (from: {self.start} to: {self.end})"

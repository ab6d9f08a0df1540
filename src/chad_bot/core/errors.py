# src/chad_bot/core/errors.py

"""
User-facing error values.

Handlers return these instead of raising: the console loop prints
`error.message` and keeps reading. None of them is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BotError:
    @property
    def message(self) -> str:
        return "Something went wrong."


@dataclass(frozen=True, slots=True)
class MalformedLine(BotError):
    line: str = ""

    @property
    def message(self) -> str:
        return "Command not found"


@dataclass(frozen=True, slots=True)
class UnknownCommand(BotError):
    keyword: str

    @property
    def message(self) -> str:
        return f'I\'m sorry, but I don\'t know what "{self.keyword}" means.'


@dataclass(frozen=True, slots=True)
class InvalidTaskDescription(BotError):
    raw: str

    @property
    def message(self) -> str:
        return f"Invalid task description: {self.raw}"


@dataclass(frozen=True, slots=True)
class EmptyDescription(BotError):
    @property
    def message(self) -> str:
        return "The description of a todo cannot be empty."


@dataclass(frozen=True, slots=True)
class InvalidTaskId(BotError):
    # 1-based id as typed, or the raw token when it is not a number
    task_id: int | str

    @property
    def message(self) -> str:
        return f"Invalid task id: {self.task_id}"

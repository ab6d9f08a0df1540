# src/chad_bot/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.errors import (
    BotError,
    EmptyDescription,
    InvalidTaskDescription,
    MalformedLine,
    UnknownCommand,
)
from ..core.state import AppState
from ..tasks.task_models import Deadline, Event, Task, Todo

logger = logging.getLogger(__name__)

LINE_REGEX = re.compile(r"(\w+)\s*(.*)", re.ASCII)
DEADLINE_REGEX = re.compile(r"(.*)\s/by\s(.*)", re.ASCII)
EVENT_REGEX = re.compile(r"(.*)\s/from\s(.*)\s/to\s(.*)", re.ASCII)


class Command(StrEnum):
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    BYE = "bye"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @classmethod
    def from_keyword(cls, keyword: str) -> Command | UnknownCommand:
        """Case-sensitive lookup; `List` or `LIST` are unknown."""
        try:
            return cls(keyword)
        except ValueError:
            return UnknownCommand(keyword)


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    # True only for `bye`: the console loop stops after printing it.
    exit: bool = False


CommandResult = Reply | BotError
CommandHandler = Callable[[AppState, str], CommandResult]


def parse_line(line: str) -> tuple[str, str] | MalformedLine:
    """Split a line into (keyword, remainder)."""
    m = LINE_REGEX.fullmatch(line)
    if not m:
        return MalformedLine(line)
    return m.group(1), m.group(2)


class CommandRegistry:
    """Maps every Command to its handler and dispatches parsed lines."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}

    def register(self, command: Command, handler: CommandHandler) -> None:
        self._handlers[command] = handler

    def handle(self, state: AppState, line: str) -> CommandResult:
        parsed = parse_line(line)
        if isinstance(parsed, MalformedLine):
            return parsed
        keyword, args = parsed

        command = Command.from_keyword(keyword)
        if isinstance(command, UnknownCommand):
            return command

        handler = self._handlers.get(command)
        if handler is None:
            return MalformedLine(line)
        return handler(state, args)


registry = CommandRegistry()


def _added(state: AppState, task: Task) -> Reply:
    state.task_store.add(task)
    return Reply(
        "Got it. I've added this task:\n"
        f"  {task}\n"
        f"Now you have {state.task_store.count_tasks()} task(s) in the list."
    )


def _blank_fields_rejected(state: AppState, *fields: str) -> bool:
    if getattr(state.settings, "allow_blank_fields", False):
        return False
    return any(not f.strip() for f in fields)


def cmd_list(state: AppState, args: str) -> CommandResult:
    return Reply("Here are the tasks in your list:\n" + state.task_store.format_list())


def cmd_todo(state: AppState, args: str) -> CommandResult:
    if not args:
        return EmptyDescription()
    return _added(state, Todo(args))


def cmd_deadline(state: AppState, args: str) -> CommandResult:
    """
    deadline <desc> /by <when>
    """
    m = DEADLINE_REGEX.fullmatch(args)
    if not m or _blank_fields_rejected(state, m.group(1), m.group(2)):
        return InvalidTaskDescription(args)
    return _added(state, Deadline(m.group(1), by=m.group(2)))


def cmd_event(state: AppState, args: str) -> CommandResult:
    """
    event <desc> /from <start> /to <end>
    """
    m = EVENT_REGEX.fullmatch(args)
    if not m or _blank_fields_rejected(state, m.group(1), m.group(2), m.group(3)):
        return InvalidTaskDescription(args)
    return _added(state, Event(m.group(1), start=m.group(2), end=m.group(3)))


def cmd_mark(state: AppState, args: str) -> CommandResult:
    index = state.task_store.resolve_index(args)
    if isinstance(index, BotError):
        return index
    task = state.task_store.mark_done(index)
    return Reply(f"Nice! I've marked this task as done:\n{task}")


def cmd_unmark(state: AppState, args: str) -> CommandResult:
    index = state.task_store.resolve_index(args)
    if isinstance(index, BotError):
        return index
    task = state.task_store.mark_incomplete(index)
    return Reply(f"OK, I've marked this task as not done yet:\n{task}")


def cmd_delete(state: AppState, args: str) -> CommandResult:
    index = state.task_store.resolve_index(args)
    if isinstance(index, BotError):
        return index
    task = state.task_store.remove(index)
    return Reply(
        "Noted. I've removed this task:\n"
        f"  {task}\n"
        f"Now you have {state.task_store.count_tasks()} task(s) in the list."
    )


def cmd_bye(state: AppState, args: str) -> CommandResult:
    return Reply("Bye. Hope to see you again soon!", exit=True)


registry.register(Command.LIST, cmd_list)
registry.register(Command.TODO, cmd_todo)
registry.register(Command.DEADLINE, cmd_deadline)
registry.register(Command.EVENT, cmd_event)
registry.register(Command.MARK, cmd_mark)
registry.register(Command.UNMARK, cmd_unmark)
registry.register(Command.DELETE, cmd_delete)
registry.register(Command.BYE, cmd_bye)

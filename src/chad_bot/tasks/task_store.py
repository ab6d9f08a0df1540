# src/chad_bot/tasks/task_store.py

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from ..core.errors import InvalidTaskId
from .task_models import Task

logger = logging.getLogger(__name__)

# Plain ASCII integers only: no "1_0", no non-ASCII digits.
TASK_ID_REGEX = re.compile(r"[+-]?[0-9]+")


class TaskStore:
    """
    In-memory ordered task list.

    Position is the only identifier: the task at offset i is shown to the user
    as i + 1, and every later task moves down by one after a delete.
    Callers validate offsets with resolve_index() before mutating.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        logger.debug("TaskStore ready")

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    # ---- lookup ----

    def resolve_index(self, token: str) -> int | InvalidTaskId:
        """
        Turn the first space-delimited word of `token` into a zero-based offset.

        Returns InvalidTaskId when the word is not an integer or the offset is
        outside the current list.
        """
        raw = token.split(" ")[0] if token else ""
        if not TASK_ID_REGEX.fullmatch(raw):
            return InvalidTaskId(raw)
        task_id = int(raw)

        index = task_id - 1
        if index < 0 or index >= len(self._tasks):
            return InvalidTaskId(task_id)
        return index

    def get(self, index: int) -> Task:
        return self._tasks[index]

    # ---- mutation ----

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        logger.debug("Added task #%d: %s", len(self._tasks), task)
        return task

    def remove(self, index: int) -> Task:
        task = self._tasks.pop(index)
        logger.debug("Removed task #%d: %s", index + 1, task)
        return task

    def mark_done(self, index: int) -> Task:
        task = self._tasks[index]
        task.mark_as_done()
        logger.debug("Marked task #%d done", index + 1)
        return task

    def mark_incomplete(self, index: int) -> Task:
        task = self._tasks[index]
        task.mark_as_incomplete()
        logger.debug("Marked task #%d not done", index + 1)
        return task

    # ---- rendering ----

    def format_list(self) -> str:
        return "\n".join(f"{i}.{task}" for i, task in enumerate(self._tasks, start=1))

"""In-memory task models and store."""

from .task_models import Deadline, Event, Task, TaskKind, Todo
from .task_store import TaskStore

__all__ = ["Deadline", "Event", "Task", "TaskKind", "TaskStore", "Todo"]

# src/chad_bot/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """Everything a session needs; built once by cli.bootstrap and passed around."""

    # Settings or any object with the same attributes (tests use SimpleNamespace).
    settings: object
    task_store: TaskStore

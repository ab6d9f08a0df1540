# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from chad_bot.core.state import AppState
from chad_bot.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console loop.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests independent of the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="ChadGPT",
        log_level="WARNING",
        log_dir=None,
        divider_width=10,
        allow_blank_fields=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, task_store=TaskStore())

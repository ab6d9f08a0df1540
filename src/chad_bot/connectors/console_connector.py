# src/chad_bot/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import Reply
from ..cli.commands import registry as command_registry
from ..core.errors import BotError
from ..core.state import AppState

logger = logging.getLogger(__name__)

DEFAULT_DIVIDER_WIDTH = 60


def format_bot_message(msg: str, width: int = DEFAULT_DIVIDER_WIDTH) -> str:
    """Frame a reply between two divider lines, body indented."""
    divider = "    " + "_" * width
    body = "\n".join(f"     {line}" for line in msg.split("\n"))
    return f"{divider}\n{body}\n{divider}"


def run_console_loop(
    state: AppState,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    """
    Read commands line by line until `bye` or end of input.

    Returns True if the session ended with `bye`, False on EOF.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    width = int(getattr(state.settings, "divider_width", DEFAULT_DIVIDER_WIDTH))
    app_name = str(getattr(state.settings, "app_name", "ChadGPT"))

    def say(text: str) -> None:
        print(format_bot_message(text, width), file=stdout, flush=True)

    logger.info("Console connector started.")
    say(f"Hello! I'm {app_name}. What can I do for you?")

    for raw_line in stdin:
        line = raw_line.rstrip("\r\n")

        try:
            result = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            say("Internal error while handling a command.")
            continue

        if isinstance(result, BotError):
            logger.info("Rejected %r: %s", line, type(result).__name__)
            say(result.message)
            continue

        if isinstance(result, Reply):
            say(result.text)
            if result.exit:
                logger.info("Console exit command received.")
                return True

    logger.info("Console EOF received, exiting.")
    return False

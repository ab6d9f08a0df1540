# src/chad_bot/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console loop on stdin
until `bye` or end of input.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=getattr(settings, "log_dir", None), console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "ChadGPT"))

    state = create_initial_state(settings=settings)

    # Undecodable input bytes become U+FFFD instead of ending the session.
    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")

    try:
        said_bye = run_console_loop(state)
    except KeyboardInterrupt:
        logger.info("Console KeyboardInterrupt, exiting.")
        print()
        return 0

    logger.info("Session ended (%s).", "bye" if said_bye else "eof")
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()

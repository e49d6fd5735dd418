# src/termtodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then hands control to the curses front-end
until the user quits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.curses_connector import run_curses_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        console=settings.log_to_console,
    )

    logger.info("Starting %s (tasks=%s, log=%s)", settings.app_name, settings.tasks_path, log_file)

    state = create_initial_state(settings=settings)

    try:
        run_curses_loop(state)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, exiting.")
    finally:
        logger.info("Bye (%d tasks).", len(state.store))


if __name__ == "__main__":
    main()

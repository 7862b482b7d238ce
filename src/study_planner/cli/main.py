# src/study_planner/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading or migrating saved data),
then runs the console REPL.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import SnapshotFormatError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except SnapshotFormatError:
        logger.exception("Saved planner data is unreadable (db=%s); not starting.", settings.db_path)
        return 2

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing to run.")
    finally:
        close = getattr(state.kv, "close", None)
        if close is not None:
            close()
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

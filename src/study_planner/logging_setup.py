# src/study_planner/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "planner.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_OWN_PREFIX = "study_planner."
_STORAGE_PREFIX = "study_planner.storage."


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keeps the planner prompt readable.

    Every snapshot commit goes through the persister and the SQLite store,
    which log at DEBUG/INFO on each write; those only reach the console when
    a write fails (WARNING and up). Other planner records pass. Anything
    outside the package, including captured `warnings`, needs ERROR.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(_STORAGE_PREFIX):
            return record.levelno >= logging.WARNING
        if record.name.startswith(_OWN_PREFIX):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/study_planner",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """Install the stderr and `planner.log` handlers on the root logger and return the log path."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    # setup_logging may run again (tests, re-entry from main); start clean.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    console.addFilter(_ConsoleNoiseFilter())

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)

    root.addHandler(console)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file

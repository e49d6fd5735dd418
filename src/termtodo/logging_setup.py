# src/termtodo/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "termtodo.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep stderr readable when console logging is turned on:
    - allow termtodo logs
    - suppress everything else (third-party, captured 'py.warnings') unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("termtodo."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: bool = False,
) -> Path | None:
    """
    Configure logging with:
    - File handler: full logs for debugging
    - Console handler (optional): filtered, only when not drawing a full-screen UI

    Call this ONCE, very early (before first logger.info). Returns the log file path,
    or None when the log directory/file cannot be created (logging then stays
    console-only or silent; the app keeps running).
    """
    log_file: Path | None = None
    target = Path(log_dir) / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(console_level)
        ch.setFormatter(fmt)
        ch.addFilter(_ConsoleNoiseFilter())
        root.addHandler(ch)

    fh: logging.Handler
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(target), encoding="utf-8")
        log_file = target
    except OSError:
        fh = logging.NullHandler()
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    if log_file is None:
        logging.getLogger(__name__).warning("Log directory %s is not writable; file logging disabled.", log_dir)
    return log_file

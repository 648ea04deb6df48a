"""
Logging setup for the Education Management API.

``setup_logging`` attaches the service's console handler (and a file
handler when ``LOG_FILE`` is set) to the root logger.  Handlers are
tagged by name so a repeated call, e.g. one ``create_app`` per test,
neither duplicates them nor touches handlers installed by someone else
such as pytest's log capture.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "education-console"
FILE_HANDLER = "education-file"


def _named_handler(logger: logging.Logger, name: str) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    ``level`` and ``logfile`` default to ``settings.log_level`` and
    ``settings.log_file``.  An unknown level name falls back to INFO.
    The file handler is replaced when a different ``logfile`` is given.
    """
    level = level or settings.log_level
    logfile = logfile or settings.log_file or None

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if _named_handler(root, CONSOLE_HANDLER) is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if not logfile:
        return
    log_path = str(Path(logfile).resolve())
    current = _named_handler(root, FILE_HANDLER)
    if current is not None:
        if getattr(current, "baseFilename", None) == log_path:
            return
        root.removeHandler(current)
        current.close()
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.set_name(FILE_HANDLER)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    logging.getLogger(__name__).info("Writing logs to %s", log_path)

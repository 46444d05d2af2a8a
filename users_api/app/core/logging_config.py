"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console and, optionally, a file handler.  Log format includes the
timestamp, logger name, log level and message.  Logging is set up
exactly once per process.

What the service logs:

* ``services.user_service`` at INFO: every user created, replaced or
  deleted, every email change, each rejected birth date and each
  lookup of an unknown id.
* ``api.errors`` at WARNING: one ``ErrorMessageResponse`` line for
  every request answered with 400 or 404.
* ``core.db`` at INFO: each schema migration applied on startup.
* ``repositories.user_repository`` at DEBUG: individual row writes
  and deletes.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a
    console handler and optionally a file handler.  The root
    logger's level is set based on the provided ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # create_app may run several times in one process (tests).
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

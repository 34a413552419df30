"""Logging setup.

The interactive session owns the terminal, so records either go to a log
file or, without one, only warnings reach stderr.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "gmail_triage"

_LOG_FILE_MAX_BYTES = 5_242_880
_LOG_FILE_BACKUPS = 3


def setup_logging(log_file: Path | None = None, verbose: bool = False) -> logging.Logger:
    """Configure the ``gmail_triage`` logger and return it.

    Calling it again closes and replaces the previous handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=_LOG_FILE_MAX_BYTES,
            backupCount=_LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setLevel(logging.WARNING)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))

    logger.addHandler(handler)
    logger.propagate = False
    return logger

"""
Logging for sqlwalk.

The walkthrough prints its results on stdout, so log lines go to stderr in
a short ``LEVEL: message`` form that reads cleanly between result tables.
A log file, when given, keeps a timestamped run history (opens, closes,
query timings) at INFO or below, even while the console only shows
warnings.
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional


CONSOLE_FORMAT = "%(levelname)s: %(message)s"
DEBUG_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    quiet: bool = False
) -> None:
    """
    Configure the ``sqlwalk`` loggers.

    Args:
        log_level: Console level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional run history file; records INFO even when the
            console level is higher
        quiet: Drop the console handler and only write to ``log_file``
    """
    console_level = getattr(logging, log_level.upper())
    file_level = min(console_level, logging.INFO)

    handlers = {}
    if not quiet:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": console_level,
            "formatter": "debug_console" if console_level <= logging.DEBUG else "console",
            "stream": "ext://sys.stderr"
        }
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "level": file_level,
            "formatter": "file",
            "filename": str(log_file),
            "mode": "a",
            "encoding": "utf-8"
        }
    if not handlers:
        handlers["null"] = {"class": "logging.NullHandler"}

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": CONSOLE_FORMAT},
            "debug_console": {"format": DEBUG_CONSOLE_FORMAT},
            "file": {"format": FILE_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"}
        },
        "handlers": handlers,
        "loggers": {
            "sqlwalk": {
                "level": file_level if log_file else console_level,
                "handlers": list(handlers),
                "propagate": False
            },
            # Engine chatter (pool checkouts, echo) never reaches the walkthrough
            "sqlalchemy": {"level": "WARNING"}
        }
    })


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``sqlwalk.`` namespace."""
    return logging.getLogger(f"sqlwalk.{name}")

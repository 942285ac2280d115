"""Tests for logging setup."""

import logging

import pytest

from sqlwalk.config.logging_config import (
    CONSOLE_FORMAT,
    DEBUG_CONSOLE_FORMAT,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    setup_logging("WARNING", quiet=True)


def handlers_by_name():
    return {handler.name: handler for handler in logging.getLogger("sqlwalk").handlers}


def test_console_only_by_default():
    setup_logging()
    handlers = handlers_by_name()
    assert set(handlers) == {"console"}
    assert handlers["console"].level == logging.WARNING
    assert handlers["console"].formatter._fmt == CONSOLE_FORMAT
    assert logging.getLogger("sqlalchemy").level == logging.WARNING


def test_debug_console_names_the_logger():
    setup_logging("debug")
    assert handlers_by_name()["console"].formatter._fmt == DEBUG_CONSOLE_FORMAT
    assert get_logger("catalog.runner").isEnabledFor(logging.DEBUG)


def test_file_records_info_while_console_shows_errors(tmp_path):
    log_path = tmp_path / "nested" / "walk.log"
    setup_logging("ERROR", log_path)

    handlers = handlers_by_name()
    assert handlers["console"].level == logging.ERROR
    assert handlers["file"].level == logging.INFO

    get_logger("database.manager").info("Opened database sales.sqlite")
    get_logger("database.manager").debug("not recorded")
    handlers["file"].flush()

    history = log_path.read_text()
    assert "INFO    sqlwalk.database.manager: Opened database sales.sqlite" in history
    assert "not recorded" not in history


def test_quiet_without_file_discards_records():
    setup_logging("INFO", quiet=True)
    handlers = handlers_by_name()
    assert set(handlers) == {"null"}
    get_logger("cli").info("nothing to see")

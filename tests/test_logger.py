import logging

import pytest
import fnkit as fk
from fnkit.core.config import settings
from fnkit.logger.logger import logger, setup_logger


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def captured():
    handler = ListHandler()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler.records
    logger.removeHandler(handler)
    logger.setLevel(previous)


def test_setup_logger_configures_once():
    test_logger = setup_logger("fnkit.tests.once", level="DEBUG")
    again = setup_logger("fnkit.tests.once", level="ERROR")
    assert test_logger is again
    assert len(again.handlers) == 1
    assert again.level == logging.DEBUG
    assert again.propagate is False


def test_project_logger_name():
    assert logger.name == "fnkit"


def test_misuse_is_logged_before_raising(captured):
    with pytest.raises(ValueError):
        fk.partition([1, 2], 0)
    with pytest.raises(IndexError):
        fk.zip([1, 2], [1])

    messages = [record.getMessage() for record in captured]
    assert any("partition()" in message for message in messages)
    assert any("zip()" in message for message in messages)
    assert all(record.levelno == logging.DEBUG for record in captured)


def test_successful_calls_do_not_log(captured):
    fk.partition([1, 2, 3], 2)
    fk.range(3)
    assert captured == []


def test_setup_logger_accepts_level_aliases():
    assert setup_logger("fnkit.tests.alias", level="warn").level == logging.WARNING


def test_setup_logger_unknown_level_uses_settings():
    test_logger = setup_logger("fnkit.tests.unknown", level="loud")
    assert test_logger.level == logging.getLevelName(settings.LOG_LEVEL)


def test_handler_uses_configured_formats():
    formatter = setup_logger("fnkit.tests.format").handlers[0].formatter
    assert formatter._fmt == settings.LOG_FORMAT
    assert formatter.datefmt == settings.LOG_DATEFMT


def test_rejected_aggregate_input_is_logged(captured):
    with pytest.raises(TypeError):
        fk.mean([1, None])
    assert [record.levelno for record in captured] == [logging.DEBUG]
    assert "mean()" in captured[0].getMessage()

import io
import logging

import pytest

from config import LOG_LEVEL
from utils import logger as logger_module
from utils.logger import configure_logging, get_logger


@pytest.fixture()
def stream():
    previous = logger_module._handler.stream
    buffer = io.StringIO()
    configure_logging("DEBUG", stream=buffer)
    yield buffer
    configure_logging(LOG_LEVEL, stream=previous)


def test_single_handler_after_repeated_configuration(stream):
    configure_logging("INFO")
    configure_logging(logging.WARNING)

    root = logging.getLogger()
    assert root.handlers.count(logger_module._handler) == 1
    assert root.level == logging.WARNING


def test_messages_use_shared_format(stream):
    get_logger("db.connection").debug("executed query | SELECT 1;")

    line = stream.getvalue().strip()
    assert "| DEBUG    | db.connection | executed query | SELECT 1;" in line


def test_unknown_level_is_rejected(stream):
    with pytest.raises(ValueError):
        configure_logging("LOUD")

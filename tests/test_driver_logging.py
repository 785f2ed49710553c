import io
import json
import logging
import os
import sys
from unittest import mock

import pytest
from loguru import logger as loguru_logger

from config.settings import LoggingSettings, LogSink
from mongo_ops_exceptions import ConfigurationError
from monitoring import (
    BufferedLogSink,
    COMPONENT_LOGGERS,
    LoguruSink,
    configure_driver_logging,
    configure_loguru,
    extract_command_name,
    reset_driver_logging,
)
from monitoring.driver_logging import MAX_DOCUMENT_LENGTH_ENV


@pytest.fixture(autouse=True)
def reset_loggers():
    with mock.patch.dict(os.environ):
        os.environ.pop(MAX_DOCUMENT_LENGTH_ENV, None)
        yield
    reset_driver_logging()


def command_message(name="insert"):
    return json.dumps({"message": "Command started", "commandName": name, "databaseName": "testDB"})


def make_record(level, message, exc_info=None):
    return logging.LogRecord("pymongo.command", level, __file__, 1, message, None, exc_info)


def test_buffered_sink_format():
    sink = BufferedLogSink()

    sink.handle(make_record(logging.DEBUG, "Command started"))
    sink.handle(make_record(logging.INFO, "Connection pool created"))
    try:
        raise RuntimeError("socket closed")
    except RuntimeError:
        sink.handle(make_record(logging.ERROR, "Command failed", sys.exc_info()))

    assert sink.getvalue().splitlines() == [
        "level: 1 DEBUG, message: Command started",
        "level: 0 INFO, message: Connection pool created",
        "error: socket closed, message: Command failed",
    ]


def test_component_levels():
    settings = LoggingSettings(level="WARNING", component_levels={"command": "DEBUG", "connection": "DEBUG"})

    configure_driver_logging(settings)

    assert logging.getLogger(COMPONENT_LOGGERS["command"]).level == logging.DEBUG
    assert logging.getLogger(COMPONENT_LOGGERS["connection"]).level == logging.DEBUG
    assert logging.getLogger(COMPONENT_LOGGERS["topology"]).level == logging.WARNING


def test_buffer_sink_receives_driver_records():
    settings = LoggingSettings(sink=LogSink.BUFFER, component_levels={"command": "DEBUG"})

    sink = configure_driver_logging(settings)
    logging.getLogger("pymongo.command").debug(command_message())

    assert isinstance(sink, BufferedLogSink)
    assert '"commandName": "insert"' in sink.getvalue()


def test_standard_sink_writes_to_stream():
    stream = io.StringIO()
    settings = LoggingSettings(component_levels={"command": "DEBUG"})

    configure_driver_logging(settings, stream=stream)
    logging.getLogger("pymongo.command").debug("Command succeeded")

    assert "pymongo.command DEBUG Command succeeded" in stream.getvalue()


def test_max_document_length():
    configure_driver_logging(LoggingSettings(max_document_length=25))

    assert os.environ[MAX_DOCUMENT_LENGTH_ENV] == "25"


def test_unknown_component():
    with pytest.raises(ConfigurationError, match="components"):
        configure_driver_logging(LoggingSettings(component_levels={"storage": "DEBUG"}))


def test_unknown_level():
    with pytest.raises(ConfigurationError, match="level"):
        configure_driver_logging(LoggingSettings(level="CHATTY"))


def test_reset_detaches_handlers():
    sink = configure_driver_logging(LoggingSettings(sink=LogSink.BUFFER, component_levels={"command": "DEBUG"}))

    reset_driver_logging()
    logging.getLogger("pymongo.command").debug("after reset")

    assert sink not in logging.getLogger("pymongo").handlers
    assert "after reset" not in sink.getvalue()


def test_extract_command_name():
    assert extract_command_name(make_record(logging.DEBUG, command_message("find"))) == "find"
    assert extract_command_name(make_record(logging.DEBUG, "not json")) is None
    assert extract_command_name(make_record(logging.DEBUG, "[1, 2]")) is None


def test_loguru_sink_binds_command_name():
    output = io.StringIO()
    settings = LoggingSettings(level="DEBUG", sink=LogSink.LOGURU, component_levels={"command": "DEBUG"})
    handler_id = configure_loguru(settings, sink=output)
    try:
        handler = configure_driver_logging(settings)
        logging.getLogger("pymongo.command").debug(command_message("delete"))
    finally:
        loguru_logger.remove(handler_id)

    assert isinstance(handler, LoguruSink)
    line = output.getvalue().strip()
    assert line.startswith("[DEBUG]: ")
    assert line.endswith("<delete>")

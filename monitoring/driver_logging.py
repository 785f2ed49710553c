"""
Driver Logging

The driver emits structured log records on standard logging loggers, one per
component (command, connection, serverSelection, topology). This module sets
per-component levels and routes the records to one of three sinks:

- standard: a plain StreamHandler
- buffer: BufferedLogSink, formatting records into an in-memory buffer
- loguru: LoguruSink, forwarding records to loguru with the command name bound
"""

import io
import json
import logging
import os
import sys
import threading
from typing import Dict, List, Optional, TextIO

from loguru import logger as loguru_logger

from config.settings import LoggingSettings, LogSink
from mongo_ops_exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DRIVER_LOGGER = "pymongo"

COMPONENT_LOGGERS: Dict[str, str] = {
    "command": "pymongo.command",
    "connection": "pymongo.connection",
    "serverSelection": "pymongo.serverSelection",
    "topology": "pymongo.topology",
}

# Read by the driver when it truncates logged command documents
MAX_DOCUMENT_LENGTH_ENV = "MONGOB_LOG_MAX_DOCUMENT_LENGTH"

_installed_handlers: List[logging.Handler] = []


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def extract_command_name(record: logging.LogRecord) -> Optional[str]:
    """Return the commandName field of a structured driver message, if any."""
    try:
        payload = json.loads(record.getMessage())
    except (TypeError, ValueError):
        return None
    if isinstance(payload, dict):
        return payload.get("commandName")
    return None


class BufferedLogSink(logging.Handler):
    """
    Handler writing driver records into a buffer.

    Informational records are written as `level: <n> <LEVEL>, message: <msg>`
    where n is 1 for debug records and 0 otherwise; error records as
    `error: <exception>, message: <msg>`.
    """

    def __init__(self, buffer: Optional[io.StringIO] = None):
        super().__init__(logging.DEBUG)
        self.buffer = buffer if buffer is not None else io.StringIO()
        self._buffer_lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.levelno >= logging.ERROR:
                error = record.exc_info[1] if record.exc_info else None
                line = f"error: {error}, message: {message}\n"
            elif record.levelno <= logging.DEBUG:
                line = f"level: 1 DEBUG, message: {message}\n"
            else:
                line = f"level: 0 INFO, message: {message}\n"
            with self._buffer_lock:
                self.buffer.write(line)
        except Exception:
            self.handleError(record)

    def getvalue(self) -> str:
        with self._buffer_lock:
            return self.buffer.getvalue()


class LoguruSink(logging.Handler):
    """Handler forwarding driver records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        command_name = extract_command_name(record) or "-"
        loguru_logger.bind(commandName=command_name).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_loguru(settings: LoggingSettings, sink: TextIO = sys.stderr) -> int:
    """
    Replace loguru's default handler with one using the configured format.

    Returns:
        The loguru handler id
    """
    loguru_logger.remove()
    loguru_logger.configure(extra={"commandName": "-"})
    return loguru_logger.add(sink, level=_resolve_level(settings.level), format=settings.format)


def _build_handler(settings: LoggingSettings, stream: Optional[TextIO]) -> logging.Handler:
    sink = LogSink(settings.sink)
    if sink is LogSink.BUFFER:
        return BufferedLogSink()
    if sink is LogSink.LOGURU:
        return LoguruSink()
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    return handler


def configure_driver_logging(settings: LoggingSettings, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Configure the driver loggers and attach the selected sink.

    Args:
        settings: Logging settings (default level, per-component levels,
                  sink, maximum logged document length)
        stream: Output stream for the standard sink

    Returns:
        The handler attached to the driver's root logger

    Raises:
        ConfigurationError: Unknown component or level name
    """
    unknown = set(settings.component_levels) - set(COMPONENT_LOGGERS)
    if unknown:
        raise ConfigurationError(f"Unknown driver log components: {sorted(unknown)}")

    default_level = _resolve_level(settings.level)
    for component, logger_name in COMPONENT_LOGGERS.items():
        override = settings.component_levels.get(component)
        level = _resolve_level(override) if override else default_level
        logging.getLogger(logger_name).setLevel(level)

    if settings.max_document_length is not None:
        os.environ[MAX_DOCUMENT_LENGTH_ENV] = str(settings.max_document_length)

    handler = _build_handler(settings, stream)
    logging.getLogger(DRIVER_LOGGER).addHandler(handler)
    _installed_handlers.append(handler)
    logger.debug(f"Driver logging configured with {type(handler).__name__}")
    return handler


def reset_driver_logging() -> None:
    """Detach handlers added by configure_driver_logging and reset levels."""
    driver_logger = logging.getLogger(DRIVER_LOGGER)
    while _installed_handlers:
        driver_logger.removeHandler(_installed_handlers.pop())
    for logger_name in COMPONENT_LOGGERS.values():
        logging.getLogger(logger_name).setLevel(logging.NOTSET)

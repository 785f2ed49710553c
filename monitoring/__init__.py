"""
Monitoring Module

Driver logging for the usage examples:
- Per-component log levels for the driver's command, connection,
  server selection and topology loggers
- Truncation of logged command documents
- Standard, in-memory and loguru sinks
"""

from .driver_logging import (
    BufferedLogSink,
    LoguruSink,
    COMPONENT_LOGGERS,
    configure_driver_logging,
    configure_loguru,
    extract_command_name,
    reset_driver_logging
)

__all__ = [
    'BufferedLogSink',
    'LoguruSink',
    'COMPONENT_LOGGERS',
    'configure_driver_logging',
    'configure_loguru',
    'extract_command_name',
    'reset_driver_logging'
]

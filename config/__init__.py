"""
Configuration Module

This module provides centralized configuration management for the examples:
- Connection string and cluster/pool options
- TLS material and authentication mechanisms
- Driver logging sinks and per-component levels
- Transaction write concern
- Search index readiness polling

Settings are read from a .env file, environment variables or a YAML file
and validated with Pydantic.
"""

from .settings import (
    MongoSettings,
    ConnectionSettings,
    TLSSettings,
    AuthSettings,
    LoggingSettings,
    TransactionSettings,
    SearchIndexSettings,
    LogSink,
    SearchIndexType,
    load_settings
)

__all__ = [
    'MongoSettings',
    'ConnectionSettings',
    'TLSSettings',
    'AuthSettings',
    'LoggingSettings',
    'TransactionSettings',
    'SearchIndexSettings',
    'LogSink',
    'SearchIndexType',
    'load_settings'
]

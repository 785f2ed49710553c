"""
Pydantic Settings for MongoDB Usage Examples

This module provides strongly-typed configuration settings using Pydantic,
with support for environment variables, .env files and YAML configuration files.
"""

from typing import Dict, Any, Optional, Union
from enum import Enum
from pathlib import Path
import logging
import os

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mongo_ops_exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Token mounted into every pod that runs with a Kubernetes service account
DEFAULT_K8S_TOKEN_FILE = "/var/run/secrets/kubernetes.io/serviceaccount/token"


class LogSink(str, Enum):
    """
    Destination for the driver's log records.

    - STANDARD: records go through the standard logging handlers of the process
    - BUFFER: records are formatted into an in-memory buffer
    - LOGURU: records are forwarded to loguru
    """
    STANDARD = "standard"
    BUFFER = "buffer"
    LOGURU = "loguru"


class SearchIndexType(str, Enum):
    """Atlas search index flavours accepted by createSearchIndexes."""
    SEARCH = "search"  # Full-text Atlas Search index
    VECTOR_SEARCH = "vectorSearch"  # Atlas Vector Search index


class ConnectionSettings(BaseSettings):
    """
    Connection settings for reaching a MongoDB deployment.

    The connection string carries the deployment address and may itself carry
    options (serverSelectionTimeoutMS, maxPoolSize, ...). Explicit settings
    below are only sent to the driver when they are set, so options embedded
    in the URI are never silently overridden.
    """
    model_config = SettingsConfigDict(env_prefix="MONGODB_", case_sensitive=False, extra="ignore")

    uri: str = Field("", description="Connection string identifying the target deployment")
    database: str = Field("sample_mflix", description="Database used when an example does not name one")
    server_selection_timeout_ms: Optional[int] = Field(
        None, description="How long the driver waits to find an available server")
    local_threshold_ms: Optional[int] = Field(
        None, description="Latency window for choosing among suitable servers")
    connect_timeout_ms: Optional[int] = Field(
        None, description="Timeout for establishing a single socket connection")
    min_pool_size: Optional[int] = Field(
        None, description="Minimum number of connections kept open in the pool")
    max_pool_size: Optional[int] = Field(
        None, description="Maximum number of concurrent connections in the pool")
    max_idle_time_ms: Optional[int] = Field(
        None, description="How long a pooled connection may sit idle before it is closed")
    app_name: Optional[str] = Field(
        None, description="Application name reported to the server in the handshake")
    ping_on_connect: bool = Field(
        True, description="Whether to ping the deployment right after creating the client")


class TLSSettings(BaseSettings):
    """
    TLS material for encrypted connections.

    The driver expects the client certificate and its private key in one PEM
    file (certificate_key_file).
    """
    model_config = SettingsConfigDict(env_prefix="MONGODB_TLS_", case_sensitive=False, extra="ignore")

    enabled: bool = Field(False, description="Whether to connect over TLS")
    ca_file: Optional[str] = Field(None, description="Path to the CA certificate bundle")
    certificate_key_file: Optional[str] = Field(
        None, description="Path to the PEM file holding the client certificate and private key")
    certificate_key_file_password: Optional[str] = Field(
        None, description="Password protecting the private key, if any")
    allow_invalid_certificates: bool = Field(
        False, description="Disable server certificate validation (never in production)")


class AuthSettings(BaseSettings):
    """
    Authentication settings for mechanisms configured outside the URI.

    For MONGODB-OIDC either name a built-in environment (azure, gcp, k8s)
    through oidc_environment, or leave it unset to read the access token
    from token_file through a machine callback.
    """
    model_config = SettingsConfigDict(env_prefix="MONGODB_AUTH_", case_sensitive=False, extra="ignore")

    mechanism: Optional[str] = Field(None, description="Authentication mechanism, e.g. MONGODB-OIDC")
    oidc_environment: Optional[str] = Field(
        None, description="Built-in OIDC provider integration (azure, gcp, k8s)")
    token_resource: Optional[str] = Field(
        None, description="Audience requested from the identity provider")
    token_file: str = Field(
        DEFAULT_K8S_TOKEN_FILE, description="File holding the OIDC access token for the callback")


class LoggingSettings(BaseSettings):
    """
    Driver logging settings.

    component_levels maps driver log components (command, connection,
    serverSelection, topology) to a level name. Components that are not
    listed keep the default level.
    """
    model_config = SettingsConfigDict(env_prefix="MONGODB_LOG_", case_sensitive=False, extra="ignore",
                                      use_enum_values=True)

    level: str = Field("INFO", description="Default level for the driver loggers")
    sink: LogSink = Field(LogSink.STANDARD, description="Where driver log records are sent")
    component_levels: Dict[str, str] = Field(
        default_factory=dict, description="Per-component overrides of the driver log level")
    max_document_length: Optional[int] = Field(
        None, description="Truncate logged command documents to this many characters")
    format: str = Field(
        "[{level}]: {time:YYYY-MM-DD HH:mm:ss} - {message} \\<{extra[commandName]}>",
        description="Record format used by the loguru sink")


class TransactionSettings(BaseSettings):
    """Write and read concerns applied to multi-statement transactions."""
    model_config = SettingsConfigDict(env_prefix="MONGODB_TXN_", case_sensitive=False, extra="ignore")

    write_concern: Union[str, int] = Field("majority", description="Write concern w value for commits")
    read_concern: Optional[str] = Field(None, description="Read concern level inside the transaction")
    max_commit_time_ms: Optional[int] = Field(None, description="Upper bound for the commit to complete")


class SearchIndexSettings(BaseSettings):
    """
    Search index readiness polling.

    A build_timeout of None polls until the index becomes queryable without
    any deadline.
    """
    model_config = SettingsConfigDict(env_prefix="MONGODB_SEARCH_INDEX_", case_sensitive=False,
                                      extra="ignore")

    poll_interval: float = Field(5.0, description="Seconds between two readiness checks")
    build_timeout: Optional[float] = Field(
        300.0, description="Seconds to wait for the index to become queryable (None = no deadline)")


class MongoSettings(BaseSettings):
    """
    Main settings class that consolidates all configuration categories.

    Usage:
        # Load from environment variables and defaults
        settings = MongoSettings()

        # Load from YAML file
        settings = MongoSettings.from_yaml('config.yaml')

        # Access nested settings
        uri = settings.connection.uri
        interval = settings.search_index.poll_interval
    """
    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False, env_nested_delimiter="__",
                                      extra="ignore")

    connection: ConnectionSettings = Field(default_factory=ConnectionSettings,
                                           description="Connection settings")
    tls: TLSSettings = Field(default_factory=TLSSettings, description="TLS settings")
    auth: AuthSettings = Field(default_factory=AuthSettings, description="Authentication settings")
    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Driver logging settings")
    transaction: TransactionSettings = Field(default_factory=TransactionSettings,
                                             description="Transaction settings")
    search_index: SearchIndexSettings = Field(default_factory=SearchIndexSettings,
                                              description="Search index polling settings")

    @classmethod
    def from_yaml(cls, yaml_file: Union[str, Path]) -> "MongoSettings":
        """Load settings from YAML file"""
        import yaml
        with open(yaml_file, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def require_uri(self) -> str:
        """
        Return the configured connection string.

        Raises:
            ConfigurationError: If no connection string is configured. This is
                fatal for every example; there is nothing to retry.
        """
        uri = (self.connection.uri or "").strip()
        if not uri:
            raise ConfigurationError(
                "You must set your 'MONGODB_URI' environment variable. See "
                "https://www.mongodb.com/docs/manual/reference/connection-string/"
            )
        return uri

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


def load_settings(config_path: Optional[str] = None, env_file: Optional[str] = ".env") -> MongoSettings:
    """
    Load settings from file and/or environment variables.

    - A .env file, when present, is loaded into the environment first
      (variables that are already set win)
    - If config_path is provided and exists, loads settings from the YAML file
    - Otherwise, creates a new settings instance from the environment

    Args:
        config_path: Path to YAML configuration file.
        env_file: Path of the .env file to load, None to skip it.

    Returns:
        MongoSettings object with loaded configuration
    """
    if env_file:
        if not load_dotenv(env_file):
            logger.debug(f"No .env file found at {env_file}")
    if config_path and os.path.exists(config_path):
        return MongoSettings.from_yaml(config_path)
    return MongoSettings()

"""
MongoDB Connection Manager

This module provides the connection lifecycle shared by every usage example:
acquire a client from validated settings, run a bounded set of operations,
and release the client exactly once on every exit path.

    Unconnected -> Connected -> (Operating)* -> Disconnected

Disconnected is terminal and reachable from every other state.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Iterator, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import (
    ConfigurationError as DriverConfigurationError,
    OperationFailure,
    PyMongoError,
    ServerSelectionTimeoutError,
)

from config import MongoSettings, load_settings
from connection_management.client_options import build_client_options
from connection_management.connection_exceptions import (
    ConnectionAuthenticationError,
    ConnectionClosedError,
    ConnectionInitializationError,
    ServerUnavailableError,
)
from mongo_ops_exceptions import ConfigurationError

# Logger setup
logger = logging.getLogger(__name__)

# Server error code for AuthenticationFailed
AUTHENTICATION_FAILED = 18


class ConnectionState(str, Enum):
    """Lifecycle states of a ConnectionManager."""
    UNCONNECTED = "unconnected"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class ConnectionManager:
    """
    Scoped owner of a single MongoClient.

    The manager is used as a context manager by the examples:

        with ConnectionManager(settings) as manager:
            movies = manager.collection("movies")
            ...

    Leaving the block closes the client, whether the block finished,
    returned early or raised. A manager is single use: once disconnected
    it cannot be connected again.
    """

    def __init__(
        self,
        config: Optional[MongoSettings] = None,
        client_factory: Optional[Callable[..., MongoClient]] = None,
        **client_options: Any
    ):
        """
        Initialize the connection manager.

        Args:
            config: MongoSettings object containing connection configuration.
                   If None, settings are loaded from .env and the environment.
            client_factory: Callable creating the driver client from a URI and
                   keyword options. Defaults to MongoClient.
            **client_options: Raw MongoClient keyword options applied on top of
                   the ones derived from settings.
        """
        self.config = config if config is not None else load_settings()
        self._client_factory = client_factory or MongoClient
        self._client_options = client_options
        self._client: Optional[MongoClient] = None
        self._state = ConnectionState.UNCONNECTED

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    @property
    def client(self) -> MongoClient:
        """The connected driver client."""
        if not self.is_connected:
            raise ConnectionClosedError(f"No open connection (state: {self._state.value})")
        return self._client

    def connect(self) -> "ConnectionManager":
        """
        Open the client against the configured deployment.

        Any failure here is fatal for the caller: there is no retry. The
        half-built client, if any, is closed and the manager moves straight
        to the terminal Disconnected state.

        Returns:
            The manager itself, so that `with ConnectionManager() as m` works.

        Raises:
            ConfigurationError: Missing or malformed connection string or options
            ServerUnavailableError: No server could be selected in time
            ConnectionAuthenticationError: Credentials were rejected
            ConnectionInitializationError: Any other failure while connecting
            ConnectionClosedError: The manager was already closed
        """
        if self._state is ConnectionState.CONNECTED:
            return self
        if self._state is ConnectionState.DISCONNECTED:
            raise ConnectionClosedError("Connection manager has already been closed")

        try:
            uri = self.config.require_uri()
            options = build_client_options(self.config, self._client_options)
            self._client = self._client_factory(uri, **options)
            if self.config.connection.ping_on_connect:
                self._client.admin.command("ping")
        except Exception as e:
            self._abandon()
            raise self._translate_connect_error(e) from e

        self._state = ConnectionState.CONNECTED
        logger.info("Connected to MongoDB deployment")
        return self

    def _abandon(self) -> None:
        """Close a client whose connect step failed and enter the terminal state."""
        client, self._client = self._client, None
        self._state = ConnectionState.DISCONNECTED
        if client is not None:
            try:
                client.close()
            except PyMongoError as e:
                logger.warning(f"Error closing client after failed connect: {e}")

    @staticmethod
    def _translate_connect_error(error: Exception) -> Exception:
        if isinstance(error, ConfigurationError):
            return error
        if isinstance(error, (DriverConfigurationError, ValueError, TypeError)):
            return ConfigurationError(f"Invalid connection configuration: {error}")
        if isinstance(error, ServerSelectionTimeoutError):
            return ServerUnavailableError(f"MongoDB deployment is not reachable: {error}")
        if isinstance(error, OperationFailure) and error.code == AUTHENTICATION_FAILED:
            return ConnectionAuthenticationError(f"Authentication failed: {error}")
        return ConnectionInitializationError(f"Failed to connect to MongoDB: {error}")

    def check_server_status(self) -> bool:
        """
        Ping the deployment.

        Returns:
            True if the server answered the ping, False otherwise
        """
        try:
            self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"Server status check failed: {e}")
            return False

    def database(self, name: Optional[str] = None) -> Database:
        """Return a database handle; defaults to the configured database."""
        return self.client[name or self.config.connection.database]

    def collection(self, name: str, database: Optional[str] = None) -> Collection:
        """Return a collection handle from the given or configured database."""
        return self.database(database)[name]

    def close(self) -> None:
        """
        Release the client.

        The client is closed at most once; closing an already disconnected
        manager is a no-op, and closing one that never connected only moves
        it to the terminal state. A failure while closing is logged, never
        raised, so it cannot mask the error that ended a `with` block.
        """
        if self._state is ConnectionState.DISCONNECTED:
            logger.debug("Connection already closed")
            return

        client, self._client = self._client, None
        self._state = ConnectionState.DISCONNECTED
        if client is not None:
            try:
                client.close()
            except PyMongoError as e:
                logger.warning(f"Error closing MongoDB connection: {e}")
                return
            logger.info("MongoDB connection closed")

    def __enter__(self) -> "ConnectionManager":
        return self.connect()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False


@contextmanager
def managed_connection(config: Optional[MongoSettings] = None, **client_options: Any) -> Iterator[ConnectionManager]:
    """
    Function form of `with ConnectionManager(...)`.

    Example:
        >>> with managed_connection(settings, serverSelectionTimeoutMS=20000) as manager:
        ...     manager.collection("movies").find_one()
    """
    manager = ConnectionManager(config, **client_options)
    try:
        yield manager.connect()
    finally:
        manager.close()

"""
Connection Management Exceptions

This module defines specialized exceptions for MongoDB connection management,
so that examples can tell a misconfigured connection string apart from an
unreachable deployment or rejected credentials.
"""

from mongo_ops_exceptions import ConnectionError as BaseConnectionError
from mongo_ops_exceptions import OperationTimeoutError


class ConnectionError(BaseConnectionError):
    """
    Base exception for all connection-related errors.

    Allows callers to catch every connection failure uniformly while still
    providing access to specific error details.
    """
    pass


class ConnectionTimeoutError(ConnectionError, OperationTimeoutError):
    """
    Raised when a connection attempt times out.

    Indicates network issues, an overloaded server or an unreachable host.
    """
    pass


class ConnectionAuthenticationError(ConnectionError):
    """
    Raised when authentication to the deployment fails.

    Signals credential or authorization issues, including a failing OIDC
    callback.
    """
    pass


class ConnectionClosedError(ConnectionError):
    """
    Raised when attempting to use a closed or never opened connection.
    """
    pass


class ConnectionInitializationError(ConnectionError):
    """
    Raised when the client cannot be created.
    """
    pass


class ServerUnavailableError(ConnectionTimeoutError):
    """
    Raised when no suitable server could be selected before the
    server selection timeout expired.
    """
    pass

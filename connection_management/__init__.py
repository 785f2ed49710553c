"""
Connection Management Module

This module provides the connection lifecycle used by every usage example:
- Validation of the connection string before anything touches the network
- Client creation with cluster, pool, TLS and authentication options
- An optional ping so that unreachable deployments fail at connect time
- Scoped acquisition with guaranteed, exactly-once release
- Translation of driver failures into specific exception types

Connection failures are fatal for an example; nothing here retries.
"""

from .connection_manager import ConnectionManager, ConnectionState, managed_connection
from .client_options import (
    OIDC_MECHANISM,
    KubernetesTokenCallback,
    build_auth_options,
    build_client_options,
    build_oidc_properties,
    build_tls_options,
)
from .connection_exceptions import (
    ConnectionError,
    ConnectionTimeoutError,
    ConnectionAuthenticationError,
    ConnectionClosedError,
    ConnectionInitializationError,
    ServerUnavailableError
)

__all__ = [
    'ConnectionManager',
    'ConnectionState',
    'managed_connection',
    'OIDC_MECHANISM',
    'KubernetesTokenCallback',
    'build_auth_options',
    'build_client_options',
    'build_oidc_properties',
    'build_tls_options',
    'ConnectionError',
    'ConnectionTimeoutError',
    'ConnectionAuthenticationError',
    'ConnectionClosedError',
    'ConnectionInitializationError',
    'ServerUnavailableError',
]

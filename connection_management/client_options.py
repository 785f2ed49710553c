"""
Client Options

Translates MongoSettings into keyword options for pymongo.MongoClient:
cluster settings, connection pool bounds, TLS material and authentication
mechanisms, including a machine callback for MONGODB-OIDC.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pymongo.auth_oidc import OIDCCallback, OIDCCallbackContext, OIDCCallbackResult

from config import MongoSettings
from config.settings import AuthSettings, TLSSettings
from mongo_ops_exceptions import ConfigurationError

logger = logging.getLogger(__name__)

OIDC_MECHANISM = "MONGODB-OIDC"

# settings attribute -> MongoClient keyword
_CLUSTER_OPTIONS = {
    "server_selection_timeout_ms": "serverSelectionTimeoutMS",
    "local_threshold_ms": "localThresholdMS",
    "connect_timeout_ms": "connectTimeoutMS",
    "min_pool_size": "minPoolSize",
    "max_pool_size": "maxPoolSize",
    "max_idle_time_ms": "maxIdleTimeMS",
    "app_name": "appname",
}


class KubernetesTokenCallback(OIDCCallback):
    """
    OIDC machine callback returning the service account token of the pod.

    On GKE (and any Kubernetes cluster with projected service account
    tokens) the token is mounted as a file; it is re-read on every fetch
    so that rotated tokens are picked up.
    """

    def __init__(self, token_file: str):
        self.token_file = token_file

    def fetch(self, context: OIDCCallbackContext) -> OIDCCallbackResult:
        token = Path(self.token_file).read_text().strip()
        return OIDCCallbackResult(access_token=token)


def build_oidc_properties(auth: AuthSettings) -> Dict[str, Any]:
    """
    Build authMechanismProperties for MONGODB-OIDC.

    A named environment uses the driver's built-in integration; otherwise
    the access token is read from auth.token_file by KubernetesTokenCallback.
    The driver rejects ENVIRONMENT and OIDC_CALLBACK together, so exactly
    one of them is set.
    """
    if auth.oidc_environment:
        properties: Dict[str, Any] = {"ENVIRONMENT": auth.oidc_environment}
        if auth.token_resource:
            properties["TOKEN_RESOURCE"] = auth.token_resource
        return properties
    return {"OIDC_CALLBACK": KubernetesTokenCallback(auth.token_file)}


def build_tls_options(tls: TLSSettings) -> Dict[str, Any]:
    """
    Build TLS keyword options.

    Raises:
        ConfigurationError: If a configured certificate file does not exist.
    """
    if not tls.enabled:
        return {}

    options: Dict[str, Any] = {"tls": True}
    for path, keyword in ((tls.ca_file, "tlsCAFile"), (tls.certificate_key_file, "tlsCertificateKeyFile")):
        if path is None:
            continue
        if not os.path.isfile(path):
            raise ConfigurationError(f"TLS file not found for {keyword}: {path}")
        options[keyword] = path
    if tls.certificate_key_file_password:
        options["tlsCertificateKeyFilePassword"] = tls.certificate_key_file_password
    if tls.allow_invalid_certificates:
        logger.warning("Server certificate validation is disabled")
        options["tlsAllowInvalidCertificates"] = True
    return options


def build_auth_options(auth: AuthSettings) -> Dict[str, Any]:
    """Build authentication keyword options; empty when the URI carries them."""
    if not auth.mechanism:
        return {}

    options: Dict[str, Any] = {"authMechanism": auth.mechanism}
    if auth.mechanism.upper() == OIDC_MECHANISM:
        options["authMechanismProperties"] = build_oidc_properties(auth)
    return options


def build_client_options(settings: MongoSettings, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Produce the keyword options passed to MongoClient alongside the URI.

    Only options that are explicitly set are emitted, so the same options
    written into the connection string keep working.

    Args:
        settings: Loaded settings
        overrides: Raw MongoClient keywords applied last

    Returns:
        Dictionary of MongoClient keyword options
    """
    options: Dict[str, Any] = {}
    for attribute, keyword in _CLUSTER_OPTIONS.items():
        value = getattr(settings.connection, attribute)
        if value is not None:
            options[keyword] = value

    options.update(build_tls_options(settings.tls))
    options.update(build_auth_options(settings.auth))
    if overrides:
        options.update(overrides)
    return options

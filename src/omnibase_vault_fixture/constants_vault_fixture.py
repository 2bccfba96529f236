# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Fixture Constants.

Paths inside the container, port numbers, and the test identities that the
backend provisioner writes into a fresh Vault server. Test suites import the
identity constants to log in against the provisioned backends.

Container Layout:
    /vault/config/startup.sh      read-only, generates TLS material then runs Vault
    /vault/config/config.json     read-only, server configuration (two listeners)
    /vault/config/libressl.conf   read-only, certificate request configuration
    /vault/config/ssl/            read-write, generated CA, server and client certs
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Image and ports
# =============================================================================

DEFAULT_VAULT_IMAGE: Final[str] = "vault:1.1.3"

# HTTPS listener used by every functional request
VAULT_TLS_PORT: Final[int] = 8200
# Plain HTTP listener used only for readiness detection
VAULT_HEALTH_PORT: Final[int] = 8280

HEALTH_CHECK_PATH: Final[str] = "/v1/sys/seal-status"
# The seal-status endpoint answers 200 even before "operator init" has run
HEALTH_CHECK_STATUS: Final[int] = 200

DEFAULT_STARTUP_TIMEOUT_SECONDS: Final[float] = 120.0
DEFAULT_POLL_INTERVAL_SECONDS: Final[float] = 0.5

# =============================================================================
# Container file layout
# =============================================================================

CONTAINER_CONFIG_DIRECTORY: Final[str] = "/vault/config"
CONTAINER_STARTUP_SCRIPT: Final[str] = f"{CONTAINER_CONFIG_DIRECTORY}/startup.sh"
CONTAINER_CONFIG_FILE: Final[str] = f"{CONTAINER_CONFIG_DIRECTORY}/config.json"
CONTAINER_OPENSSL_CONFIG_FILE: Final[str] = (
    f"{CONTAINER_CONFIG_DIRECTORY}/libressl.conf"
)
CONTAINER_SSL_DIRECTORY: Final[str] = f"{CONTAINER_CONFIG_DIRECTORY}/ssl"
CONTAINER_CERT_PEMFILE: Final[str] = f"{CONTAINER_SSL_DIRECTORY}/root-cert.pem"
CONTAINER_CLIENT_CERT_PEMFILE: Final[str] = (
    f"{CONTAINER_SSL_DIRECTORY}/client-cert.pem"
)

# Host-side file names inside the read-write TLS directory
CERT_PEMFILE_NAME: Final[str] = "root-cert.pem"
CLIENT_CERT_PEMFILE_NAME: Final[str] = "client-cert.pem"
CLIENT_KEY_PEMFILE_NAME: Final[str] = "client-key.pem"

STARTUP_SCRIPT_NAME: Final[str] = "startup.sh"
CONFIG_FILE_NAME: Final[str] = "config.json"
OPENSSL_CONFIG_FILE_NAME: Final[str] = "libressl.conf"

# Address the in-container CLI talks to
CONTAINER_VAULT_ADDR: Final[str] = f"https://127.0.0.1:{VAULT_TLS_PORT}"

# =============================================================================
# Client defaults
# =============================================================================

OPEN_TIMEOUT_SECONDS: Final[int] = 5
READ_TIMEOUT_SECONDS: Final[int] = 30
MAX_RETRIES: Final[int] = 5
RETRY_INTERVAL_MS: Final[int] = 1000

# =============================================================================
# Test identities written by the backend provisioner
# =============================================================================

APP_ID: Final[str] = "fake_app"
USER_ID: Final[str] = "fake_user"
PASSWORD: Final[str] = "fake_password"  # noqa: S105
APP_ROLE_NAME: Final[str] = "testrole"
CERT_ROLE_NAME: Final[str] = "web"

__all__: list[str] = [
    "APP_ID",
    "APP_ROLE_NAME",
    "CERT_PEMFILE_NAME",
    "CERT_ROLE_NAME",
    "CLIENT_CERT_PEMFILE_NAME",
    "CLIENT_KEY_PEMFILE_NAME",
    "CONFIG_FILE_NAME",
    "CONTAINER_CERT_PEMFILE",
    "CONTAINER_CLIENT_CERT_PEMFILE",
    "CONTAINER_CONFIG_DIRECTORY",
    "CONTAINER_CONFIG_FILE",
    "CONTAINER_OPENSSL_CONFIG_FILE",
    "CONTAINER_SSL_DIRECTORY",
    "CONTAINER_STARTUP_SCRIPT",
    "CONTAINER_VAULT_ADDR",
    "DEFAULT_POLL_INTERVAL_SECONDS",
    "DEFAULT_STARTUP_TIMEOUT_SECONDS",
    "DEFAULT_VAULT_IMAGE",
    "HEALTH_CHECK_PATH",
    "HEALTH_CHECK_STATUS",
    "MAX_RETRIES",
    "OPENSSL_CONFIG_FILE_NAME",
    "OPEN_TIMEOUT_SECONDS",
    "PASSWORD",
    "READ_TIMEOUT_SECONDS",
    "RETRY_INTERVAL_MS",
    "STARTUP_SCRIPT_NAME",
    "USER_ID",
    "VAULT_HEALTH_PORT",
    "VAULT_TLS_PORT",
]

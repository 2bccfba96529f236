# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Test Container Definition.

Declarative testcontainers definition of a TLS-enabled Vault server:

    - Pinned image (default ``vault:1.1.3``)
    - Read-only mounts: startup.sh, config.json, libressl.conf
    - Read-write mount: host directory receiving the generated CA, server
      certificate and client certificate
    - ``IPC_LOCK`` capability so Vault can lock memory pages
    - Exposed ports: 8200 (HTTPS) and 8280 (plain HTTP, readiness only)
    - Command: ``/bin/sh /vault/config/startup.sh``

Docker uses bridged networking, so the host never talks to 8200 directly.
Every address handed out is built from the ephemeral host port Docker maps
to it at start time.
"""

from __future__ import annotations

from pathlib import Path

from testcontainers.core.container import DockerContainer

from omnibase_vault_fixture.constants_vault_fixture import (
    CONFIG_FILE_NAME,
    CONTAINER_CONFIG_FILE,
    CONTAINER_OPENSSL_CONFIG_FILE,
    CONTAINER_SSL_DIRECTORY,
    CONTAINER_STARTUP_SCRIPT,
    CONTAINER_VAULT_ADDR,
    OPENSSL_CONFIG_FILE_NAME,
    STARTUP_SCRIPT_NAME,
)
from omnibase_vault_fixture.models import ModelVaultContainerConfig


class VaultContainer(DockerContainer):  # type: ignore[misc]
    """Vault server container with a TLS listener and a plaintext side channel."""

    def __init__(
        self,
        config: ModelVaultContainerConfig,
        ssl_directory: Path,
    ) -> None:
        super().__init__(config.image)
        self.config = config
        self.ssl_directory = ssl_directory

        resources = config.resource_directory
        self.with_volume_mapping(
            str(resources / STARTUP_SCRIPT_NAME), CONTAINER_STARTUP_SCRIPT, mode="ro"
        )
        self.with_volume_mapping(
            str(resources / CONFIG_FILE_NAME), CONTAINER_CONFIG_FILE, mode="ro"
        )
        self.with_volume_mapping(
            str(resources / OPENSSL_CONFIG_FILE_NAME),
            CONTAINER_OPENSSL_CONFIG_FILE,
            mode="ro",
        )
        self.with_volume_mapping(
            str(ssl_directory), CONTAINER_SSL_DIRECTORY, mode="rw"
        )

        self.with_kwargs(cap_add=["IPC_LOCK"])
        self.with_exposed_ports(config.tls_port, config.health_port)
        # The in-container CLI talks to the TLS listener on loopback
        self.with_env("VAULT_ADDR", CONTAINER_VAULT_ADDR)
        self.with_command(f"/bin/sh {CONTAINER_STARTUP_SCRIPT}")

    def get_tls_port(self) -> int:
        """Return the host port mapped to the HTTPS listener."""
        return int(self.get_exposed_port(self.config.tls_port))

    def get_health_port(self) -> int:
        """Return the host port mapped to the plaintext readiness listener."""
        return int(self.get_exposed_port(self.config.health_port))

    def get_address(self) -> str:
        """Return the HTTPS URL of the Vault server as seen from the host."""
        return f"https://{self.get_container_host_ip()}:{self.get_tls_port()}"

    def get_health_url(self) -> str:
        """Return the plaintext readiness URL as seen from the host."""
        return (
            f"http://{self.get_container_host_ip()}:{self.get_health_port()}"
            f"{self.config.health_path}"
        )


__all__: list[str] = ["VaultContainer"]

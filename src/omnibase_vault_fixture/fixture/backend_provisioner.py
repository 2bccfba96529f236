# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Backend Provisioner.

Mounts auth methods and secrets engines and writes their test data through
the in-container CLI. Every public method follows the same protocol:

    1. Obtain the root credentials (fails unless Vault is unsealed)
    2. ``vault login`` with the root token
    3. Run the backend's mounts, then its writes, in order

Every step is checked. Enabling a backend at a path that is already mounted
makes Vault exit non-zero, so calling the same method twice fails with
VaultCommandError instead of silently succeeding. Provisioning is additive
with no rollback; the remedy for a failure is a fresh container.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from omnibase_vault_fixture.constants_vault_fixture import CONTAINER_CERT_PEMFILE
from omnibase_vault_fixture.container.command_runner import VaultCommandRunner
from omnibase_vault_fixture.fixture.backend_definitions import (
    APP_ID_BACKEND,
    APPROLE_BACKEND,
    CERT_BACKEND,
    KV_ENGINE_VERSIONS,
    KV_VERSIONED_PATH,
    PKI_BACKEND,
    USERPASS_BACKEND,
)
from omnibase_vault_fixture.models import (
    ModelBackendDefinition,
    ModelBootstrapCredentials,
    ModelCommandResult,
)

logger = logging.getLogger(__name__)


class VaultBackendProvisioner:
    """Applies backend definitions to an unsealed Vault server.

    Args:
        runner: Command runner bound to the Vault container.
        credentials_provider: Returns the root credentials, raising
            VaultFixtureStateError while Vault is not yet unsealed.
        ca_cert: CA certificate path inside the container.
    """

    def __init__(
        self,
        runner: VaultCommandRunner,
        credentials_provider: Callable[[], ModelBootstrapCredentials],
        ca_cert: str = CONTAINER_CERT_PEMFILE,
    ) -> None:
        self._runner = runner
        self._credentials_provider = credentials_provider
        self._ca_cert = ca_cert

    def login(self) -> ModelBootstrapCredentials:
        """Log the in-container CLI in with the root token."""
        credentials = self._credentials_provider()
        root_token = credentials.root_token.get_secret_value()
        self._runner.run(
            "vault",
            "login",
            f"-ca-cert={self._ca_cert}",
            root_token,
            check=True,
            redact=(root_token,),
            operation="login",
        )
        return credentials

    def provision(self, definition: ModelBackendDefinition) -> list[ModelCommandResult]:
        """Log in as root, then apply ``definition``.

        Raises:
            VaultFixtureStateError: If Vault is not unsealed yet.
            VaultCommandError: If any mount or write exits non-zero.
        """
        credentials = self.login()
        return self._apply(definition, credentials)

    def setup_backend_app_id(self) -> list[ModelCommandResult]:
        """Mount the app-id auth method and map ``fake_app`` to ``fake_user``."""
        return self.provision(APP_ID_BACKEND)

    def setup_backend_user_pass(self) -> list[ModelCommandResult]:
        """Mount the userpass auth method with user ``fake_user``."""
        return self.provision(USERPASS_BACKEND)

    def setup_backend_app_role(self) -> list[ModelCommandResult]:
        """Mount the approle auth method with role ``testrole``."""
        return self.provision(APPROLE_BACKEND)

    def setup_backend_pki(self) -> list[ModelCommandResult]:
        """Mount five PKI engines and generate a root CA at ``pki/``."""
        return self.provision(PKI_BACKEND)

    def setup_backend_cert(self) -> list[ModelCommandResult]:
        """Mount the cert auth method and register the generated client cert."""
        return self.provision(CERT_BACKEND)

    def set_engine_versions(self) -> list[ModelCommandResult]:
        """Move ``secret/`` to KV v2 and add two KV v1 mounts.

        ``kv enable-versioning secret/`` upgrades an existing v1 mount and
        fails when ``secret/`` is not mounted yet, which is the normal case on
        a non-dev server; that failure is tolerated and the v2 mount below
        creates it.
        """
        credentials = self.login()
        results = [
            self._runner.run(
                "vault",
                "kv",
                "enable-versioning",
                f"-ca-cert={self._ca_cert}",
                KV_VERSIONED_PATH,
                operation="provision",
            )
        ]
        results.extend(self._apply(KV_ENGINE_VERSIONS, credentials))
        return results

    def _apply(
        self,
        definition: ModelBackendDefinition,
        credentials: ModelBootstrapCredentials,
    ) -> list[ModelCommandResult]:
        root_token = credentials.root_token.get_secret_value()
        results = [
            self._runner.run(
                *command,
                check=True,
                redact=(root_token,),
                operation="provision",
            )
            for command in definition.to_commands(self._ca_cert)
        ]
        logger.info(
            "Provisioned backend %s",
            definition.name,
            extra={
                "backend": definition.name,
                "commands": len(results),
                "correlation_id": str(self._runner.correlation_id),
            },
        )
        return results


__all__: list[str] = ["VaultBackendProvisioner"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Bootstrap Sequencer.

Drives the one-time ``operator init`` / ``operator unseal`` exchange through
the in-container CLI. Each command talks to the TLS listener and trusts the
CA generated by startup.sh via ``-ca-cert``.

A single key share with a threshold of one is requested; test fixtures have
no use for Shamir quorum semantics.
"""

from __future__ import annotations

import logging

from omnibase_vault_fixture.constants_vault_fixture import CONTAINER_CERT_PEMFILE
from omnibase_vault_fixture.container.command_runner import VaultCommandRunner
from omnibase_vault_fixture.fixture.util_init_output_parser import parse_init_output
from omnibase_vault_fixture.models import (
    ModelBootstrapCredentials,
    ModelCommandResult,
)

logger = logging.getLogger(__name__)


class VaultBootstrapSequencer:
    """Initializes and unseals a fresh Vault server."""

    def __init__(
        self,
        runner: VaultCommandRunner,
        ca_cert: str = CONTAINER_CERT_PEMFILE,
    ) -> None:
        self._runner = runner
        self._ca_cert = ca_cert

    def initialize(self) -> ModelBootstrapCredentials:
        """Run ``vault operator init`` and parse the issued credentials.

        Raises:
            VaultCommandError: If the init command exits non-zero.
            VaultInitOutputParseError: If the output format is not recognised.
        """
        result = self._runner.run(
            "vault",
            "operator",
            "init",
            f"-ca-cert={self._ca_cert}",
            "-key-shares=1",
            "-key-threshold=1",
            check=True,
            sensitive_output=True,
            operation="init",
        )
        credentials = parse_init_output(result.stdout)
        logger.info(
            "Vault initialized",
            extra={"correlation_id": str(self._runner.correlation_id)},
        )
        return credentials

    def unseal(self, credentials: ModelBootstrapCredentials) -> ModelCommandResult:
        """Run ``vault operator unseal`` with the captured key.

        Raises:
            VaultCommandError: If the unseal command exits non-zero.
        """
        unseal_key = credentials.unseal_key.get_secret_value()
        result = self._runner.run(
            "vault",
            "operator",
            "unseal",
            f"-ca-cert={self._ca_cert}",
            unseal_key,
            check=True,
            redact=(unseal_key,),
            operation="unseal",
        )
        logger.info(
            "Vault unsealed",
            extra={"correlation_id": str(self._runner.correlation_id)},
        )
        return result

    def init_and_unseal(self) -> ModelBootstrapCredentials:
        """Initialize then unseal, returning the captured credentials."""
        credentials = self.initialize()
        self.unseal(credentials)
        return credentials


__all__: list[str] = ["VaultBootstrapSequencer"]

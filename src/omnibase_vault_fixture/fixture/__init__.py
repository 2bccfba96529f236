# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fixture layer: bootstrap, provisioning, client handles and the facade.

Exports:
    VaultBackendProvisioner: Root-authenticated backend provisioning
    VaultBootstrapSequencer: ``operator init`` / ``operator unseal`` driver
    VaultClientFactory: Pre-configured ``hvac.Client`` handles
    VaultFixture: Lifecycle owner of one Vault container
    parse_init_output: ``operator init`` console output parser
"""

from omnibase_vault_fixture.fixture.backend_provisioner import VaultBackendProvisioner
from omnibase_vault_fixture.fixture.bootstrap_sequencer import VaultBootstrapSequencer
from omnibase_vault_fixture.fixture.client_factory import VaultClientFactory
from omnibase_vault_fixture.fixture.util_init_output_parser import parse_init_output
from omnibase_vault_fixture.fixture.vault_fixture import VaultFixture

__all__: list[str] = [
    "VaultBackendProvisioner",
    "VaultBootstrapSequencer",
    "VaultClientFactory",
    "VaultFixture",
    "parse_init_output",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""OmniNode Vault Test Fixture - disposable TLS Vault servers for integration tests.

This package provisions a HashiCorp Vault server inside a Docker container,
brings it to an initialized and unsealed state, and hands out configured
``hvac`` clients to integration tests.

Key Components:
    - VaultFixture: Lifecycle owner (start, bootstrap, provision, teardown)
    - VaultContainer: Declarative testcontainers definition of the server
    - VaultBootstrapSequencer: ``operator init`` / ``operator unseal`` driver
    - VaultBackendProvisioner: Auth method and secrets engine test data
    - VaultClientFactory: Pre-configured ``hvac.Client`` handles
    - plugin: pytest fixtures (``vault_fixture``, ``bootstrapped_vault``)
"""

from omnibase_vault_fixture.fixture.vault_fixture import VaultFixture

__all__: list[str] = ["VaultFixture"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Container layer: declaration, readiness gate and in-container exec.

Exports:
    VaultCommandRunner: Executes argument vectors inside the container
    VaultContainer: testcontainers definition of the Vault server
    wait_for_http_status: Plaintext readiness polling
"""

from omnibase_vault_fixture.container.command_runner import VaultCommandRunner
from omnibase_vault_fixture.container.readiness_gate import wait_for_http_status
from omnibase_vault_fixture.container.vault_container import VaultContainer

__all__: list[str] = [
    "VaultCommandRunner",
    "VaultContainer",
    "wait_for_http_status",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Fixture Models Module.

Exports:
    ModelBackendDefinition: Ordered mounts and writes for one backend
    ModelBackendMount: One auth/secrets enable invocation
    ModelBackendWrite: One ``vault write`` of flat parameters
    ModelBootstrapCredentials: Root token and unseal key
    ModelCommandResult: Outcome of an in-container command
    ModelVaultClientConfig: Connection settings of a client handle
    ModelVaultContainerConfig: Container declaration and readiness contract
    ModelVaultRetryPolicy: Fixed-interval retry policy of a client handle
"""

from omnibase_vault_fixture.models.model_backend_configuration import (
    ModelBackendDefinition,
    ModelBackendMount,
    ModelBackendWrite,
)
from omnibase_vault_fixture.models.model_bootstrap_credentials import (
    ModelBootstrapCredentials,
)
from omnibase_vault_fixture.models.model_command_result import ModelCommandResult
from omnibase_vault_fixture.models.model_vault_client_config import (
    ModelVaultClientConfig,
)
from omnibase_vault_fixture.models.model_vault_container_config import (
    ModelVaultContainerConfig,
)
from omnibase_vault_fixture.models.model_vault_retry_policy import (
    ModelVaultRetryPolicy,
)

__all__: list[str] = [
    "ModelBackendDefinition",
    "ModelBackendMount",
    "ModelBackendWrite",
    "ModelBootstrapCredentials",
    "ModelCommandResult",
    "ModelVaultClientConfig",
    "ModelVaultContainerConfig",
    "ModelVaultRetryPolicy",
]

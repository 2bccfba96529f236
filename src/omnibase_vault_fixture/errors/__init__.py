# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Fixture Errors Module.

Exports:
    ModelFixtureErrorContext: Configuration model for bundled error context
    VaultFixtureError: Base fixture error class
    ProtocolConfigurationError: Invalid fixture or client configuration
    VaultContainerStartupError: Container failed to start
    VaultContainerNotReadyError: Readiness gate timed out
    VaultCommandError: Checked in-container command exited non-zero
    VaultInitOutputParseError: Unrecognised ``operator init`` output
    VaultFixtureStateError: Operation called in the wrong lifecycle state

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - The root token or unseal key
        - Raw stdout of ``vault operator init``

    SAFE to include:
        - Operation names (e.g., "init", "unseal", "provision")
        - Redacted command lines, exit codes, mapped ports
        - Lifecycle state names
"""

from omnibase_vault_fixture.errors.fixture_errors import (
    ProtocolConfigurationError,
    VaultCommandError,
    VaultContainerNotReadyError,
    VaultContainerStartupError,
    VaultFixtureError,
    VaultFixtureStateError,
    VaultInitOutputParseError,
)
from omnibase_vault_fixture.errors.model_fixture_error_context import (
    ModelFixtureErrorContext,
)

__all__: list[str] = [
    "ModelFixtureErrorContext",
    "ProtocolConfigurationError",
    "VaultCommandError",
    "VaultContainerNotReadyError",
    "VaultContainerStartupError",
    "VaultFixtureError",
    "VaultFixtureStateError",
    "VaultInitOutputParseError",
]

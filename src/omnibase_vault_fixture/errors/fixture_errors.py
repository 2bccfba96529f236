# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Fixture Error Classes.

Error Hierarchy:
    VaultFixtureError (base fixture error)
    ├── ProtocolConfigurationError
    ├── VaultContainerStartupError
    │   └── VaultContainerNotReadyError
    ├── VaultCommandError
    ├── VaultInitOutputParseError
    └── VaultFixtureStateError

All errors:
    - Support proper error chaining with ``raise ... from e``
    - Accept ModelFixtureErrorContext for bundled context parameters
    - Keep extra keyword arguments as structured context for debugging
    - Never carry the root token or unseal key

Docker and I/O errors raised while a command executes inside the container
are not wrapped; there is no safe local recovery for a failed privileged
configuration step, so they reach the test unchanged.
"""

from typing import Optional
from uuid import UUID

from omnibase_vault_fixture.errors.model_fixture_error_context import (
    ModelFixtureErrorContext,
)


class VaultFixtureError(Exception):
    """Base error class for the Vault test fixture.

    Structured Fields (via ModelFixtureErrorContext):
        operation: Operation being performed
        target_name: Target resource name
        correlation_id: Correlation ID of the fixture instance

    Example:
        >>> context = ModelFixtureErrorContext(operation="unseal")
        >>> raise VaultFixtureError("Unseal failed", context=context, exit_code=2)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelFixtureErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize VaultFixtureError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled fixture context (operation, target, correlation)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.correlation_id: Optional[UUID] = None

        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class ProtocolConfigurationError(VaultFixtureError):
    """Raised when fixture or client configuration validation fails.

    Example:
        >>> raise ProtocolConfigurationError(
        ...     "Invalid VAULT_FIXTURE_STARTUP_TIMEOUT_SECONDS",
        ...     context=ModelFixtureErrorContext(operation="load_config"),
        ... )
    """


class VaultContainerStartupError(VaultFixtureError):
    """Raised when the Vault container cannot be started.

    A container that fails to start indicates a broken environment, so this
    error is fatal to the enclosing test and never retried.
    """


class VaultContainerNotReadyError(VaultContainerStartupError):
    """Raised when the side-channel health endpoint never reports healthy.

    Example:
        >>> raise VaultContainerNotReadyError(
        ...     "Vault did not become ready within 120.0s",
        ...     context=context,
        ...     url="http://localhost:49154/v1/sys/seal-status",
        ...     last_status=503,
        ... )
    """


class VaultCommandError(VaultFixtureError):
    """Raised when a checked command exits non-zero inside the container.

    Enabling a backend at a path that is already mounted lands here, which
    makes repeated provisioning fail deterministically.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelFixtureErrorContext] = None,
        exit_code: Optional[int] = None,
        **extra_context: object,
    ) -> None:
        """Initialize VaultCommandError.

        Args:
            message: Human-readable error message
            context: Bundled fixture context
            exit_code: Exit status of the failed command
            **extra_context: Additional context (redacted command, stderr)
        """
        if exit_code is not None:
            extra_context["exit_code"] = exit_code
        super().__init__(message, context=context, **extra_context)
        self.exit_code = exit_code


class VaultInitOutputParseError(VaultFixtureError):
    """Raised when ``vault operator init`` output has an unexpected format.

    The console wording is tied to one server version; a mismatch is a
    breaking change for the fixture, not a transient condition.
    """


class VaultFixtureStateError(VaultFixtureError):
    """Raised when an operation is called in the wrong lifecycle state.

    Example:
        >>> raise VaultFixtureStateError(
        ...     "Vault must be initialized and unsealed before provisioning",
        ...     context=context,
        ...     state="uninitialized",
        ... )
    """


__all__: list[str] = [
    "ProtocolConfigurationError",
    "VaultCommandError",
    "VaultContainerNotReadyError",
    "VaultContainerStartupError",
    "VaultFixtureError",
    "VaultFixtureStateError",
    "VaultInitOutputParseError",
]

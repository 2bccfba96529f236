# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Container Configuration Model.

Declarative settings for the disposable Vault container: image, ports, the
readiness contract and the host directories that get bind-mounted.

Environment Variables (all optional):
    VAULT_FIXTURE_IMAGE: Image reference (default: vault:1.1.3)
    VAULT_FIXTURE_SSL_DIR: Host directory for generated TLS material
        (default: a fresh temporary directory per fixture)
    VAULT_FIXTURE_STARTUP_TIMEOUT_SECONDS: Readiness timeout (default: 120)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from omnibase_vault_fixture.constants_vault_fixture import (
    DEFAULT_POLL_INTERVAL_SECONDS,
    DEFAULT_STARTUP_TIMEOUT_SECONDS,
    DEFAULT_VAULT_IMAGE,
    HEALTH_CHECK_PATH,
    HEALTH_CHECK_STATUS,
    VAULT_HEALTH_PORT,
    VAULT_TLS_PORT,
)
from omnibase_vault_fixture.errors import (
    ModelFixtureErrorContext,
    ProtocolConfigurationError,
)

RESOURCE_DIRECTORY: Path = Path(__file__).parent.parent / "resources"

ENV_IMAGE = "VAULT_FIXTURE_IMAGE"
ENV_SSL_DIR = "VAULT_FIXTURE_SSL_DIR"
ENV_STARTUP_TIMEOUT = "VAULT_FIXTURE_STARTUP_TIMEOUT_SECONDS"


class ModelVaultContainerConfig(BaseModel):
    """Configuration for the Vault test container.

    Attributes:
        image: Pinned image reference
        tls_port: Container port of the HTTPS listener
        health_port: Container port of the plaintext readiness listener
        health_path: Path polled on the readiness listener
        healthy_status_code: Status code that marks the server as ready
        startup_timeout_seconds: Upper bound on the readiness wait
        poll_interval_seconds: Delay between readiness probes
        ssl_directory: Host directory mounted read-write for TLS material
        resource_directory: Host directory holding startup.sh, config.json
            and libressl.conf
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    image: str = Field(
        default=DEFAULT_VAULT_IMAGE,
        min_length=1,
        description="Pinned Vault image reference",
    )
    tls_port: int = Field(default=VAULT_TLS_PORT, ge=1, le=65535)
    health_port: int = Field(default=VAULT_HEALTH_PORT, ge=1, le=65535)
    health_path: str = Field(default=HEALTH_CHECK_PATH)
    healthy_status_code: int = Field(default=HEALTH_CHECK_STATUS, ge=100, le=599)
    startup_timeout_seconds: float = Field(
        default=DEFAULT_STARTUP_TIMEOUT_SECONDS,
        ge=1.0,
        le=900.0,
        description="Seconds to wait for the readiness endpoint",
    )
    poll_interval_seconds: float = Field(
        default=DEFAULT_POLL_INTERVAL_SECONDS,
        gt=0.0,
        le=10.0,
        description="Seconds between readiness probes",
    )
    ssl_directory: Path | None = Field(
        default=None,
        description="Host directory for generated TLS material (temp dir if unset)",
    )
    resource_directory: Path = Field(
        default=RESOURCE_DIRECTORY,
        description="Host directory with startup.sh, config.json, libressl.conf",
    )

    @field_validator("health_path")
    @classmethod
    def _validate_health_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("health_path must start with '/'")
        return value

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None
    ) -> ModelVaultContainerConfig:
        """Build a configuration from ``VAULT_FIXTURE_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (for tests).

        Returns:
            Validated container configuration.

        Raises:
            ProtocolConfigurationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        if env.get(ENV_IMAGE):
            overrides["image"] = env[ENV_IMAGE]
        if env.get(ENV_SSL_DIR):
            overrides["ssl_directory"] = Path(env[ENV_SSL_DIR])
        if env.get(ENV_STARTUP_TIMEOUT):
            overrides["startup_timeout_seconds"] = env[ENV_STARTUP_TIMEOUT]

        try:
            return cls.model_validate(overrides)
        except ValidationError as e:
            raise ProtocolConfigurationError(
                f"Invalid Vault fixture configuration: {e.error_count()} error(s)",
                context=ModelFixtureErrorContext(operation="load_config"),
                fields=[".".join(map(str, err["loc"])) for err in e.errors()],
            ) from e


__all__: list[str] = [
    "ENV_IMAGE",
    "ENV_SSL_DIR",
    "ENV_STARTUP_TIMEOUT",
    "ModelVaultContainerConfig",
    "RESOURCE_DIRECTORY",
]

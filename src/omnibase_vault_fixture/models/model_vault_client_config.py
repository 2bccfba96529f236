# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Configuration Model.

Connection settings for one ``hvac.Client`` handle. The model is frozen, so a
handle built from it is bound to one address, one token (or none) and one TLS
trust anchor for its whole life.

Security Note:
    The token field uses SecretStr to prevent accidental logging of the root
    token when a configuration object ends up in a test report.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    field_validator,
    model_validator,
)

from omnibase_vault_fixture.constants_vault_fixture import (
    OPEN_TIMEOUT_SECONDS,
    READ_TIMEOUT_SECONDS,
)


class ModelVaultClientConfig(BaseModel):
    """Configuration for a Vault client handle.

    Attributes:
        address: Vault server URL (scheme, host and mapped port)
        token: Authentication token (None for an unauthenticated handle)
        open_timeout_seconds: Connect timeout in seconds
        read_timeout_seconds: Read timeout in seconds
        ca_cert_path: PEM file of the CA that signed the server certificate
        client_cert_path: Optional client certificate for TLS cert auth
        client_key_path: Private key matching ``client_cert_path``

    Example:
        >>> config = ModelVaultClientConfig(
        ...     address="https://localhost:49153",
        ...     token=SecretStr("s.1234"),
        ...     ca_cert_path=Path("/tmp/vault-ssl/root-cert.pem"),
        ... )
        >>> config.timeout
        (5, 30)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    address: str = Field(
        description="Vault server URL (e.g., 'https://localhost:49153')",
    )
    token: SecretStr | None = Field(
        default=None,
        description="Vault authentication token",
    )
    open_timeout_seconds: int = Field(
        default=OPEN_TIMEOUT_SECONDS,
        ge=1,
        le=300,
        description="Connect timeout in seconds",
    )
    read_timeout_seconds: int = Field(
        default=READ_TIMEOUT_SECONDS,
        ge=1,
        le=300,
        description="Read timeout in seconds",
    )
    ca_cert_path: Path | None = Field(
        default=None,
        description="PEM file used as the TLS trust anchor",
    )
    client_cert_path: Path | None = Field(
        default=None,
        description="Client certificate PEM file for TLS certificate auth",
    )
    client_key_path: Path | None = Field(
        default=None,
        description="Client private key PEM file for TLS certificate auth",
    )

    @field_validator("address")
    @classmethod
    def _validate_address(cls, value: str) -> str:
        if not value.startswith(("https://", "http://")):
            raise ValueError("address must start with https:// or http://")
        return value.rstrip("/")

    @model_validator(mode="after")
    def _validate_client_cert_pair(self) -> ModelVaultClientConfig:
        if (self.client_cert_path is None) != (self.client_key_path is None):
            raise ValueError(
                "client_cert_path and client_key_path must be set together"
            )
        return self

    @property
    def timeout(self) -> tuple[int, int]:
        """Return the (connect, read) timeout pair used by requests."""
        return (self.open_timeout_seconds, self.read_timeout_seconds)

    @property
    def verify(self) -> str | bool:
        """Return the TLS verification setting for requests."""
        if self.ca_cert_path is None:
            return True
        return str(self.ca_cert_path)

    @property
    def client_cert(self) -> tuple[str, str] | None:
        """Return the (cert, key) pair for TLS client auth, if configured."""
        if self.client_cert_path is None or self.client_key_path is None:
            return None
        return (str(self.client_cert_path), str(self.client_key_path))


__all__: list[str] = ["ModelVaultClientConfig"]

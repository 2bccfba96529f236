# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bootstrap Credentials Model.

Holds the root token and unseal key captured from ``vault operator init``.
Both are wrapped in SecretStr so that a fixture object printed in a failing
test report never exposes them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class ModelBootstrapCredentials(BaseModel):
    """Credentials issued once when a Vault server is initialized.

    Attributes:
        root_token: Highest-privilege token issued at initialization
        unseal_key: The single key share needed to unseal the server

    Example:
        >>> credentials = ModelBootstrapCredentials(
        ...     root_token=SecretStr("s.Xy1..."),
        ...     unseal_key=SecretStr("aGVsbG8..."),
        ... )
        >>> print(credentials.root_token)
        **********
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    root_token: SecretStr = Field(description="Root token issued by operator init")
    unseal_key: SecretStr = Field(description="Unseal key share number 1")

    @field_validator("root_token", "unseal_key")
    @classmethod
    def _reject_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("bootstrap credential must not be blank")
        return value


__all__: list[str] = ["ModelBootstrapCredentials"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Retry Policy Model.

Fixed-interval retry policy applied to the HTTP session of a client handle.
The fixture itself never retries; this policy belongs to the handles it
hands out.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_vault_fixture.constants_vault_fixture import (
    MAX_RETRIES,
    RETRY_INTERVAL_MS,
)


class ModelVaultRetryPolicy(BaseModel):
    """Retry policy for a Vault client handle.

    Attributes:
        max_retries: Retry attempts after the first request (0 disables retries)
        retry_interval_ms: Delay between attempts in milliseconds

    Example:
        >>> policy = ModelVaultRetryPolicy(max_retries=5, retry_interval_ms=1000)
        >>> policy.retry_interval_seconds
        1.0
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
    )

    max_retries: int = Field(
        default=MAX_RETRIES,
        ge=0,
        le=100,
        description="Retry attempts after the first request",
    )
    retry_interval_ms: int = Field(
        default=RETRY_INTERVAL_MS,
        ge=0,
        le=60_000,
        description="Delay between attempts in milliseconds",
    )

    @classmethod
    def disabled(cls) -> ModelVaultRetryPolicy:
        """Return a policy that performs exactly one attempt."""
        return cls(max_retries=0, retry_interval_ms=0)

    @property
    def enabled(self) -> bool:
        """Return True when at least one retry is allowed."""
        return self.max_retries > 0

    @property
    def retry_interval_seconds(self) -> float:
        """Return the inter-attempt delay in seconds."""
        return self.retry_interval_ms / 1000.0


__all__: list[str] = ["ModelVaultRetryPolicy"]

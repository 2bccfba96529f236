# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fixture Error Context Configuration Model.

Bundles the structured fields every fixture error carries, so error
constructors stay small while keeping strong typing.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelFixtureErrorContext(BaseModel):
    """Configuration model for fixture error context.

    Attributes:
        operation: Operation being performed (start_container, init, unseal, ...)
        target_name: Target resource name (usually the container image)
        correlation_id: Correlation ID shared by every log line of one fixture

    Example:
        >>> context = ModelFixtureErrorContext(
        ...     operation="wait_for_ready",
        ...     target_name="vault:1.1.3",
        ... )
        >>> raise VaultContainerNotReadyError("Never ready", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (start_container, init, unseal, etc.)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlation ID for tracing one fixture lifetime",
    )


__all__ = ["ModelFixtureErrorContext"]

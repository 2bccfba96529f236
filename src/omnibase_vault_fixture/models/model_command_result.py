# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command Invocation Result Model.

Captures the outcome of one argument vector executed inside the Vault
container. The fixture never retries at this layer; callers decide whether a
non-zero exit is fatal.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelCommandResult(BaseModel):
    """Result of a command executed inside the Vault container.

    Attributes:
        command: Argument vector that was executed
        exit_code: Exit status reported by the Docker exec API
        stdout: Captured standard output, decoded as UTF-8
        stderr: Captured standard error, decoded as UTF-8

    Example:
        >>> result = ModelCommandResult(
        ...     command=("vault", "status"),
        ...     exit_code=2,
        ...     stdout="",
        ...     stderr="Error checking seal status",
        ... )
        >>> result.succeeded
        False
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    command: tuple[str, ...] = Field(
        description="Argument vector executed inside the container",
    )
    exit_code: int | None = Field(
        default=None,
        description="Exit status (None when the exec API did not report one)",
    )
    stdout: str = Field(default="", description="Captured standard output")
    stderr: str = Field(default="", description="Captured standard error")

    @property
    def succeeded(self) -> bool:
        """Return True when the command exited with status zero."""
        return self.exit_code == 0


__all__: list[str] = ["ModelCommandResult"]

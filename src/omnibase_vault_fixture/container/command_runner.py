# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-Container Command Runner.

Executes an argument vector inside the running Vault container through the
Docker exec API and returns stdout and stderr separately. Every command is
logged with its secrets masked; output is logged when non-empty unless the
caller marks it as sensitive.

Failure Semantics:
    - No retries at this layer
    - ``check=True`` turns a non-zero exit into VaultCommandError
    - Docker API and I/O errors propagate unchanged to the caller
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING
from uuid import UUID

from omnibase_vault_fixture.errors import (
    ModelFixtureErrorContext,
    VaultCommandError,
    VaultFixtureStateError,
)
from omnibase_vault_fixture.models import ModelCommandResult
from omnibase_vault_fixture.utils.util_command_sanitization import (
    redact_command,
    sanitize_output,
)

if TYPE_CHECKING:
    from testcontainers.core.container import DockerContainer

logger = logging.getLogger(__name__)


def _decode(stream: bytes | None) -> str:
    if not stream:
        return ""
    return stream.decode("utf-8", errors="replace")


class VaultCommandRunner:
    """Runs commands inside a started testcontainers container.

    Attributes:
        correlation_id: Correlation ID attached to every log record
    """

    def __init__(
        self,
        container: DockerContainer,
        correlation_id: UUID | None = None,
    ) -> None:
        self._container = container
        self.correlation_id = correlation_id

    def run(
        self,
        *command: str,
        check: bool = False,
        redact: Iterable[str | None] = (),
        sensitive_output: bool = False,
        operation: str = "exec",
    ) -> ModelCommandResult:
        """Execute ``command`` inside the container and wait for it to exit.

        Args:
            *command: Argument vector, e.g. ``"vault", "secrets", "list"``.
            check: Raise VaultCommandError when the exit status is non-zero.
            redact: Secret values to mask in logs and error context.
            sensitive_output: Never log stdout (used for ``operator init``).
            operation: Operation name recorded in logs and errors.

        Returns:
            Captured result of the command.

        Raises:
            VaultFixtureStateError: If the container is not running.
            VaultCommandError: If ``check`` is set and the command failed.
        """
        secrets = tuple(redact)
        rendered = redact_command(command, secrets)

        wrapped = self._container.get_wrapped_container()
        if wrapped is None:
            raise VaultFixtureStateError(
                "Cannot run a command before the Vault container is started",
                context=self._context(operation),
                command=rendered,
            )

        logger.info(
            "Command: %s",
            rendered,
            extra={"operation": operation, "correlation_id": str(self.correlation_id)},
        )
        exec_result = wrapped.exec_run(list(command), demux=True)
        stdout, stderr = exec_result.output or (None, None)
        result = ModelCommandResult(
            command=tuple(command),
            exit_code=exec_result.exit_code,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )

        if result.stdout:
            if sensitive_output:
                logger.info(
                    "Command stdout: [REDACTED %d characters]", len(result.stdout)
                )
            else:
                logger.info(
                    "Command stdout: %s", sanitize_output(result.stdout, secrets)
                )
        if result.stderr:
            logger.info("Command stderr: %s", sanitize_output(result.stderr, secrets))

        if check and not result.succeeded:
            raise VaultCommandError(
                f"Command exited with status {result.exit_code}",
                context=self._context(operation),
                exit_code=result.exit_code,
                command=rendered,
                stderr=sanitize_output(result.stderr, secrets, max_length=500),
            )
        return result

    def _context(self, operation: str) -> ModelFixtureErrorContext:
        return ModelFixtureErrorContext(
            operation=operation,
            target_name="vault-container",
            correlation_id=self.correlation_id,
        )


__all__: list[str] = ["VaultCommandRunner"]

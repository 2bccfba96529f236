# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command line and console output sanitization utilities.

Commands run inside the Vault container routinely carry secrets on the
argument vector (``vault login <root token>``, ``vault operator unseal <key>``,
``password=...`` parameters). These helpers mask them before a command line
or its output reaches a log record or an error message.

Sanitization rules:
    1. Every occurrence of a known secret value is replaced with ``[REDACTED]``
    2. ``key=value`` arguments whose key names a credential keep the key only
    3. Long output is truncated

Example:
    >>> redact_command(["vault", "login", "s.abc123"], secrets=["s.abc123"])
    'vault login [REDACTED]'
    >>> redact_command(["vault", "write", "auth/userpass/users/u", "password=x"])
    'vault write auth/userpass/users/u password=[REDACTED]'
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

REDACTED: str = "[REDACTED]"

# Parameter names whose values are masked in ``key=value`` arguments.
SENSITIVE_PARAMETER_NAMES: frozenset[str] = frozenset(
    {
        "password",
        "token",
        "secret_id",
        "private_key",
        "key",
    }
)


def _redact_values(text: str, secrets: Iterable[str | None]) -> str:
    for secret in secrets:
        if secret:
            text = text.replace(secret, REDACTED)
    return text


def redact_argument(argument: str, secrets: Iterable[str | None] = ()) -> str:
    """Redact a single command argument.

    Args:
        argument: One element of an argument vector.
        secrets: Known secret values to mask wherever they appear.

    Returns:
        The argument with secret values and credential parameters masked.
    """
    name, separator, _ = argument.partition("=")
    if separator and name.lower() in SENSITIVE_PARAMETER_NAMES:
        return f"{name}={REDACTED}"
    return _redact_values(argument, secrets)


def redact_command(
    command: Sequence[str],
    secrets: Iterable[str | None] = (),
) -> str:
    """Render an argument vector as a single loggable line.

    Args:
        command: Argument vector executed inside the container.
        secrets: Known secret values to mask wherever they appear.

    Returns:
        Space-joined command line with credentials masked.
    """
    known = tuple(secrets)
    return " ".join(redact_argument(argument, known) for argument in command)


def sanitize_output(
    output: str,
    secrets: Iterable[str | None] = (),
    max_length: int = 2000,
) -> str:
    """Sanitize captured stdout or stderr for logging.

    Args:
        output: Captured console text.
        secrets: Known secret values to mask wherever they appear.
        max_length: Maximum length of the returned text.

    Returns:
        Output with secrets masked, truncated to ``max_length`` characters.
    """
    if not output:
        return ""
    output = _redact_values(output, secrets)
    if len(output) > max_length:
        return output[:max_length] + "... [truncated]"
    return output


__all__: list[str] = [
    "REDACTED",
    "SENSITIVE_PARAMETER_NAMES",
    "redact_argument",
    "redact_command",
    "sanitize_output",
]

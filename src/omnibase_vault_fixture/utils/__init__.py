# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault fixture utilities."""

from omnibase_vault_fixture.utils.util_command_sanitization import (
    REDACTED,
    redact_command,
    sanitize_output,
)

__all__: list[str] = [
    "REDACTED",
    "redact_command",
    "sanitize_output",
]

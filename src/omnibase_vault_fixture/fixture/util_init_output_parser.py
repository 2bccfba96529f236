# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parser for ``vault operator init`` console output.

With ``-key-shares=1 -key-threshold=1`` Vault 1.1.x prints::

    Unseal Key 1: 7nKLMgAOdoKl2wHfpnEBzvyfk/n6Ai6n8P3RBMoZYO0=

    Initial Root Token: s.2WbYlTvQJ0j7ypXzGg6Tfcmk

    Vault initialized with 1 key shares and a key threshold of 1. Please securely
    distribute the key shares printed above. ...

This wording is an informal wire format tied to one server version. Any drift
surfaces here as VaultInitOutputParseError instead of corrupted credentials.
Error messages describe what was wrong with the format and never echo the
captured output, since it contains the credentials.
"""

from __future__ import annotations

from pydantic import SecretStr

from omnibase_vault_fixture.errors import (
    ModelFixtureErrorContext,
    VaultInitOutputParseError,
)
from omnibase_vault_fixture.models import ModelBootstrapCredentials

UNSEAL_KEY_MARKER: str = "Unseal Key 1: "
ROOT_TOKEN_MARKER: str = "Initial Root Token: "
TRAILER_MARKER: str = "Vault initialized"
# Present only when more than one key share was requested
SECOND_KEY_MARKER: str = "Unseal Key 2: "

_CONTEXT = ModelFixtureErrorContext(operation="parse_init_output")


def _find_single(text: str, marker: str) -> int:
    count = text.count(marker)
    if count != 1:
        raise VaultInitOutputParseError(
            f"Expected exactly one {marker.strip()!r} marker in init output, "
            f"found {count}",
            context=_CONTEXT,
            marker=marker.strip(),
            occurrences=count,
        )
    return text.index(marker)


def _validate_value(value: str, name: str) -> str:
    if not value:
        raise VaultInitOutputParseError(
            f"Init output contains an empty {name}",
            context=_CONTEXT,
            field=name,
        )
    if any(character.isspace() for character in value):
        raise VaultInitOutputParseError(
            f"Init output {name} contains unexpected text",
            context=_CONTEXT,
            field=name,
        )
    return value


def parse_init_output(stdout: str) -> ModelBootstrapCredentials:
    """Extract the unseal key and root token from ``operator init`` output.

    Line separators are stripped, the text is cut at the ``Vault initialized``
    trailer, and the two values are taken from between their markers.

    Args:
        stdout: Captured standard output of ``vault operator init``.

    Returns:
        Credentials with both values trimmed.

    Raises:
        VaultInitOutputParseError: If a marker is missing or repeated, the
            markers are out of order, more than one key share was printed, or
            a value is empty.
    """
    flattened = "".join(stdout.splitlines())

    if SECOND_KEY_MARKER in flattened:
        raise VaultInitOutputParseError(
            "Init output contains more than one unseal key share",
            context=_CONTEXT,
        )

    trailer_index = flattened.find(TRAILER_MARKER)
    if trailer_index != -1:
        flattened = flattened[:trailer_index]

    unseal_index = _find_single(flattened, UNSEAL_KEY_MARKER)
    root_index = _find_single(flattened, ROOT_TOKEN_MARKER)
    if unseal_index > root_index:
        raise VaultInitOutputParseError(
            "Init output lists the root token before the unseal key",
            context=_CONTEXT,
        )

    unseal_key = flattened[unseal_index + len(UNSEAL_KEY_MARKER) : root_index].strip()
    root_token = flattened[root_index + len(ROOT_TOKEN_MARKER) :].strip()

    return ModelBootstrapCredentials(
        root_token=SecretStr(_validate_value(root_token, "root token")),
        unseal_key=SecretStr(_validate_value(unseal_key, "unseal key")),
    )


__all__: list[str] = [
    "ROOT_TOKEN_MARKER",
    "SECOND_KEY_MARKER",
    "TRAILER_MARKER",
    "UNSEAL_KEY_MARKER",
    "parse_init_output",
]

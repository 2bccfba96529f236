# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Fixture Enumerations Module.

Exports:
    EnumVaultBackendKind: Auth method vs. secrets engine mounts
    EnumVaultFixtureState: One-way fixture lifecycle states
"""

from omnibase_vault_fixture.enums.enum_vault_backend_kind import EnumVaultBackendKind
from omnibase_vault_fixture.enums.enum_vault_fixture_state import (
    EnumVaultFixtureState,
)

__all__: list[str] = [
    "EnumVaultBackendKind",
    "EnumVaultFixtureState",
]

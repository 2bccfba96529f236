# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Fixture Lifecycle State Enumeration.

Tracks where a fixture instance is in its one-way lifecycle. There is no
back-transition: a sealed server is never re-initialized and a stopped
fixture is never restarted.

State Transitions:
    NOT_STARTED -> UNINITIALIZED   container started and healthy
    UNINITIALIZED -> SEALED        ``operator init`` output parsed
    SEALED -> UNSEALED             ``operator unseal`` succeeded
    any -> STOPPED                 container stopped and removed
"""

from enum import Enum


class EnumVaultFixtureState(str, Enum):
    """Lifecycle states of a ``VaultFixture`` instance.

    Attributes:
        NOT_STARTED: Container declared but not running
        UNINITIALIZED: Container healthy, Vault not yet initialized
        SEALED: Vault initialized, credentials captured, still sealed
        UNSEALED: Vault unsealed and ready for provisioning
        STOPPED: Container stopped and removed
    """

    NOT_STARTED = "not_started"
    UNINITIALIZED = "uninitialized"
    SEALED = "sealed"
    UNSEALED = "unsealed"
    STOPPED = "stopped"

    @property
    def is_running(self) -> bool:
        """Return True while the container is up."""
        return self in {
            EnumVaultFixtureState.UNINITIALIZED,
            EnumVaultFixtureState.SEALED,
            EnumVaultFixtureState.UNSEALED,
        }


__all__ = ["EnumVaultFixtureState"]

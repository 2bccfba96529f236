# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Backend Kind Enumeration.

Vault mounts two families of pluggable backends at configurable paths, and
each family has its own CLI verb for enabling a mount.
"""

from enum import Enum


class EnumVaultBackendKind(str, Enum):
    """Family of a mountable Vault backend.

    Attributes:
        AUTH_METHOD: Authentication backend, enabled with ``vault auth enable``
        SECRETS_ENGINE: Secrets engine, enabled with ``vault secrets enable``
    """

    AUTH_METHOD = "auth"
    SECRETS_ENGINE = "secrets"


__all__ = ["EnumVaultBackendKind"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Backend test fixtures provisioned into a fresh Vault server.

Each definition is applied by VaultBackendProvisioner after a root login.
The identities written here (``fake_app``, ``fake_user``, ``testrole``,
``web``) are exported from constants_vault_fixture for test suites.
"""

from __future__ import annotations

from omnibase_vault_fixture.constants_vault_fixture import (
    APP_ID,
    APP_ROLE_NAME,
    CERT_ROLE_NAME,
    CONTAINER_CLIENT_CERT_PEMFILE,
    PASSWORD,
    USER_ID,
)
from omnibase_vault_fixture.enums import EnumVaultBackendKind
from omnibase_vault_fixture.models import (
    ModelBackendDefinition,
    ModelBackendMount,
    ModelBackendWrite,
)

_AUTH = EnumVaultBackendKind.AUTH_METHOD
_SECRETS = EnumVaultBackendKind.SECRETS_ENGINE

APP_ID_BACKEND = ModelBackendDefinition(
    name="app-id",
    mounts=(ModelBackendMount(kind=_AUTH, backend_type="app-id"),),
    writes=(
        ModelBackendWrite(
            path=f"auth/app-id/map/app-id/{APP_ID}",
            parameters={"display_name": APP_ID},
        ),
        ModelBackendWrite(
            path=f"auth/app-id/map/user-id/{USER_ID}",
            parameters={"value": APP_ID},
        ),
    ),
)

USERPASS_BACKEND = ModelBackendDefinition(
    name="userpass",
    mounts=(ModelBackendMount(kind=_AUTH, backend_type="userpass"),),
    writes=(
        ModelBackendWrite(
            path=f"auth/userpass/users/{USER_ID}",
            parameters={"password": PASSWORD},
        ),
    ),
)

APPROLE_BACKEND = ModelBackendDefinition(
    name="approle",
    mounts=(ModelBackendMount(kind=_AUTH, backend_type="approle"),),
    writes=(
        ModelBackendWrite(
            path=f"auth/approle/role/{APP_ROLE_NAME}",
            parameters={
                "secret_id_ttl": "10m",
                "token_ttl": "20m",
                "token_max_ttl": "30m",
                "secret_id_num_uses": "40",
            },
        ),
    ),
)

PKI_MOUNT_PATHS: tuple[str, ...] = (
    "pki",
    "other-pki",
    "pki-custom-path-1",
    "pki-custom-path-2",
    "pki-custom-path-3",
)

PKI_BACKEND = ModelBackendDefinition(
    name="pki",
    mounts=tuple(
        ModelBackendMount(kind=_SECRETS, backend_type="pki", path=path)
        for path in PKI_MOUNT_PATHS
    ),
    writes=(
        ModelBackendWrite(
            path="pki/root/generate/internal",
            parameters={"common_name": "myvault.com", "ttl": "99h"},
        ),
    ),
)

CERT_BACKEND = ModelBackendDefinition(
    name="cert",
    mounts=(ModelBackendMount(kind=_AUTH, backend_type="cert"),),
    writes=(
        ModelBackendWrite(
            path=f"auth/cert/certs/{CERT_ROLE_NAME}",
            parameters={
                "display_name": CERT_ROLE_NAME,
                "policies": "web,prod",
                "certificate": f"@{CONTAINER_CLIENT_CERT_PEMFILE}",
                "ttl": "3600",
            },
        ),
    ),
)

# Upgraded in place by set_engine_versions before these mounts are added
KV_VERSIONED_PATH: str = "secret/"

KV_ENGINE_VERSIONS = ModelBackendDefinition(
    name="kv-engine-versions",
    mounts=(
        ModelBackendMount(kind=_SECRETS, backend_type="kv", path="secret", version=2),
        ModelBackendMount(kind=_SECRETS, backend_type="kv", path="kv-v1", version=1),
        ModelBackendMount(
            kind=_SECRETS, backend_type="kv", path="kv-v1-Upgrade-Test", version=1
        ),
    ),
)

__all__: list[str] = [
    "APPROLE_BACKEND",
    "APP_ID_BACKEND",
    "CERT_BACKEND",
    "KV_ENGINE_VERSIONS",
    "KV_VERSIONED_PATH",
    "PKI_BACKEND",
    "PKI_MOUNT_PATHS",
    "USERPASS_BACKEND",
]

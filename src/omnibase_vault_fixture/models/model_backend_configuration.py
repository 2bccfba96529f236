# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Backend Configuration Models.

A backend definition is a list of mounts followed by a list of writes. Each
piece renders itself to the ``vault`` CLI argument vector that the backend
provisioner runs inside the container, always pinned to the container CA via
``-ca-cert``.

Example:
    >>> userpass = ModelBackendDefinition(
    ...     name="userpass",
    ...     mounts=(
    ...         ModelBackendMount(
    ...             kind=EnumVaultBackendKind.AUTH_METHOD,
    ...             backend_type="userpass",
    ...         ),
    ...     ),
    ...     writes=(
    ...         ModelBackendWrite(
    ...             path="auth/userpass/users/fake_user",
    ...             parameters={"password": "fake_password"},
    ...         ),
    ...     ),
    ... )
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnibase_vault_fixture.enums import EnumVaultBackendKind


class ModelBackendMount(BaseModel):
    """One ``vault auth enable`` / ``vault secrets enable`` invocation.

    Attributes:
        kind: Auth method or secrets engine
        backend_type: Backend plugin name (``approle``, ``pki``, ``kv``, ...)
        path: Mount path (None mounts at the plugin's default path)
        version: Engine version option, used by the ``kv`` engine
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: EnumVaultBackendKind
    backend_type: str = Field(min_length=1)
    path: str | None = Field(default=None, min_length=1)
    version: int | None = Field(default=None, ge=1)

    def to_command(self, ca_cert: str) -> tuple[str, ...]:
        """Render the mount as a ``vault`` argument vector."""
        command = ["vault", self.kind.value, "enable", f"-ca-cert={ca_cert}"]
        if self.path is not None:
            command.append(f"-path={self.path}")
        if self.version is not None:
            command.append(f"-version={self.version}")
        command.append(self.backend_type)
        return tuple(command)


class ModelBackendWrite(BaseModel):
    """One ``vault write`` of flat string parameters to a path.

    Attributes:
        path: Vault API path written to
        parameters: Flat key/value parameters, rendered as ``key=value``
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(min_length=1)
    parameters: dict[str, str] = Field(default_factory=dict)

    @field_validator("path")
    @classmethod
    def _strip_leading_slash(cls, value: str) -> str:
        return value.lstrip("/")

    def to_command(self, ca_cert: str) -> tuple[str, ...]:
        """Render the write as a ``vault`` argument vector."""
        arguments = tuple(f"{key}={value}" for key, value in self.parameters.items())
        return ("vault", "write", f"-ca-cert={ca_cert}", self.path, *arguments)


class ModelBackendDefinition(BaseModel):
    """Named, ordered set of mounts and writes for one backend fixture.

    Attributes:
        name: Human-readable name used in logs
        mounts: Mounts enabled first, in order
        writes: Writes issued after every mount, in order
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    mounts: tuple[ModelBackendMount, ...] = ()
    writes: tuple[ModelBackendWrite, ...] = ()

    def to_commands(self, ca_cert: str) -> list[tuple[str, ...]]:
        """Render every mount then every write as argument vectors."""
        commands = [mount.to_command(ca_cert) for mount in self.mounts]
        commands.extend(write.to_command(ca_cert) for write in self.writes)
        return commands


__all__: list[str] = [
    "ModelBackendDefinition",
    "ModelBackendMount",
    "ModelBackendWrite",
]

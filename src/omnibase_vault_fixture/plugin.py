# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pytest plugin exposing the Vault fixture.

Registered through the ``pytest11`` entry point, so installing the package is
enough to make these fixtures available to any test suite.

Fixture Scoping Strategy
------------------------
Session-scoped:
    - vault_docker_available: Docker daemon availability check
    - vault_container_config: Configuration read from VAULT_FIXTURE_* variables

Class-scoped:
    - vault_fixture: Started Vault container, stopped after the last test of
      the class whatever the outcome
    - bootstrapped_vault: Same instance after init_and_unseal

Function-scoped:
    - root_vault_client: Root-authenticated ``hvac.Client``

Usage:
    >>> @pytest.mark.vault
    ... class TestUserPass:
    ...     def test_login(self, bootstrapped_vault: VaultFixture) -> None:
    ...         bootstrapped_vault.setup_backend_user_pass()
    ...         client = bootstrapped_vault.get_default_vault()
    ...         client.auth.userpass.login(USER_ID, PASSWORD)
"""

from __future__ import annotations

import subprocess
from collections.abc import Generator

import hvac
import pytest

from omnibase_vault_fixture.fixture.vault_fixture import VaultFixture
from omnibase_vault_fixture.models import ModelVaultContainerConfig


def _check_docker_available() -> bool:
    """Check if Docker daemon is available and running.

    Returns:
        bool: True if Docker is available, False otherwise.
    """
    try:
        result = subprocess.run(
            ["docker", "info"],
            capture_output=True,
            text=True,
            timeout=10,
            check=False,
            shell=False,
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return False


def pytest_configure(config: pytest.Config) -> None:
    """Register the ``vault`` marker."""
    config.addinivalue_line(
        "markers",
        "vault: test needs a disposable Vault container (requires Docker)",
    )


@pytest.fixture(scope="session")
def vault_docker_available() -> bool:
    """Session-scoped fixture indicating Docker availability."""
    return _check_docker_available()


@pytest.fixture(scope="session")
def vault_container_config() -> ModelVaultContainerConfig:
    """Container configuration read once per session from the environment."""
    return ModelVaultContainerConfig.from_env()


@pytest.fixture(scope="class")
def vault_fixture(
    vault_docker_available: bool,
    vault_container_config: ModelVaultContainerConfig,
) -> Generator[VaultFixture, None, None]:
    """Class-scoped, started Vault container.

    Yields:
        VaultFixture in the UNINITIALIZED state.

    Raises:
        pytest.skip: If Docker is not available.
    """
    if not vault_docker_available:
        pytest.skip("Docker daemon not available for the Vault fixture")

    with VaultFixture(vault_container_config) as fixture:
        yield fixture


@pytest.fixture(scope="class")
def bootstrapped_vault(vault_fixture: VaultFixture) -> VaultFixture:
    """Class-scoped Vault container that has been initialized and unsealed."""
    vault_fixture.init_and_unseal()
    return vault_fixture


@pytest.fixture
def root_vault_client(bootstrapped_vault: VaultFixture) -> hvac.Client:
    """Root-authenticated client bound to the class's Vault container."""
    return bootstrapped_vault.get_root_vault()

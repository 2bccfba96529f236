# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for the Vault fixture unit tests.

Every test under tests/unit/** is marked with ``pytest.mark.unit`` and runs
without Docker: the container, the Docker exec API and ``hvac.Client`` are
replaced with mocks.

Marker Application:
    pytestmark in a conftest.py does NOT propagate to the test modules next
    to it, so the marker is added from pytest_collection_modifyitems.

Fixtures:
    fake_wrapped_container: Stand-in for the docker-py container object
    fake_container: Stand-in for a started VaultContainer
    command_runner: VaultCommandRunner bound to fake_container

Related:
    - tests/helpers/util_vault_exec.py: ExecResult builders and init samples
    - pyproject.toml: Marker definitions
"""

from __future__ import annotations

from unittest.mock import MagicMock
from uuid import UUID

import pytest

from omnibase_vault_fixture.container import VaultCommandRunner
from tests.helpers.util_vault_exec import make_exec_result

TEST_CORRELATION_ID = UUID("00000000-0000-4000-8000-000000000001")


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to every test collected from tests/unit."""
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.fspath):
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)


@pytest.fixture
def fake_wrapped_container() -> MagicMock:
    """docker-py container whose exec_run succeeds with empty output."""
    wrapped = MagicMock(name="docker_container")
    wrapped.exec_run.return_value = make_exec_result()
    return wrapped


@pytest.fixture
def fake_container(fake_wrapped_container: MagicMock) -> MagicMock:
    """Started VaultContainer mapped to localhost:49153 / 49154."""
    container = MagicMock(name="vault_container")
    container.get_wrapped_container.return_value = fake_wrapped_container
    container.get_address.return_value = "https://localhost:49153"
    container.get_health_url.return_value = (
        "http://localhost:49154/v1/sys/seal-status"
    )
    container.get_tls_port.return_value = 49153
    container.get_health_port.return_value = 49154
    container.get_logs.return_value = (b"==> Vault server started!", b"")
    return container


@pytest.fixture
def command_runner(fake_container: MagicMock) -> VaultCommandRunner:
    """Command runner bound to the fake container."""
    return VaultCommandRunner(fake_container, TEST_CORRELATION_ID)

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for the Vault fixture integration tests.

Every test under tests/integration/** is marked with
``pytest.mark.integration``. These tests start real Vault containers through
the fixtures of ``omnibase_vault_fixture.plugin`` and are skipped when the
Docker daemon is not reachable.

This enables selective test execution:
    # Unit tests only (no Docker needed)
    pytest -m "not integration"

    # Integration tests only
    pytest -m integration

Environment Variables:
    VAULT_FIXTURE_IMAGE: Image reference override
    VAULT_FIXTURE_SSL_DIR: Fixed host directory for generated TLS material
    VAULT_FIXTURE_STARTUP_TIMEOUT_SECONDS: Readiness timeout override
"""

from __future__ import annotations

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the integration marker to every test collected from tests/integration."""
    integration_marker = pytest.mark.integration

    for item in items:
        if "tests/integration" in str(item.fspath):
            if not any(marker.name == "integration" for marker in item.iter_markers()):
                item.add_marker(integration_marker)

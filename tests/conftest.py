# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_vault_fixture tests.

The Vault fixtures themselves (``vault_fixture``, ``bootstrapped_vault``,
``root_vault_client``) come from ``omnibase_vault_fixture.plugin``, which is
registered through the ``pytest11`` entry point once the package is
installed.
"""

from __future__ import annotations

import pytest

from omnibase_vault_fixture.models.model_vault_container_config import (
    ENV_IMAGE,
    ENV_SSL_DIR,
    ENV_STARTUP_TIMEOUT,
)


@pytest.fixture
def clean_vault_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every VAULT_FIXTURE_* and VAULT_TOKEN variable for one test."""
    for name in (ENV_IMAGE, ENV_SSL_DIR, ENV_STARTUP_TIMEOUT, "VAULT_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

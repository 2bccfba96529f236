# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the VaultFixture lifecycle.

VaultContainer and the readiness gate are patched in the fixture module, so
the lifecycle (start, bootstrap, provisioning guards, teardown) is tested
without Docker.

Test categories:
    - Start: readiness gating and teardown on startup failure
    - Bootstrap: state transitions and single-use semantics
    - Guards: operations in the wrong state raise VaultFixtureStateError
    - Teardown: idempotent stop, container output drained to the log
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from docker.errors import APIError, DockerException

from omnibase_vault_fixture import VaultFixture
from omnibase_vault_fixture.enums import EnumVaultFixtureState
from omnibase_vault_fixture.errors import (
    VaultCommandError,
    VaultContainerNotReadyError,
    VaultContainerStartupError,
    VaultFixtureStateError,
)
from omnibase_vault_fixture.models import ModelVaultContainerConfig
from tests.helpers.log_helpers import assert_secret_not_logged
from tests.helpers.util_vault_exec import (
    INIT_OUTPUT,
    SAMPLE_ROOT_TOKEN,
    SAMPLE_UNSEAL_KEY,
    UNSEAL_OUTPUT,
    make_exec_result,
)

FIXTURE_MODULE = "omnibase_vault_fixture.fixture.vault_fixture"


@pytest.fixture
def container_config(tmp_path: Path) -> ModelVaultContainerConfig:
    return ModelVaultContainerConfig(
        ssl_directory=tmp_path / "ssl",
        startup_timeout_seconds=5.0,
        poll_interval_seconds=0.01,
    )


@pytest.fixture
def container_class(fake_container: MagicMock) -> Generator[MagicMock, None, None]:
    with patch(f"{FIXTURE_MODULE}.VaultContainer", return_value=fake_container) as cls:
        yield cls


@pytest.fixture
def readiness_gate() -> Generator[MagicMock, None, None]:
    with patch(f"{FIXTURE_MODULE}.wait_for_http_status", return_value=1) as gate:
        yield gate


@pytest.fixture
def started_fixture(
    container_config: ModelVaultContainerConfig,
    container_class: MagicMock,
    readiness_gate: MagicMock,
) -> Generator[VaultFixture, None, None]:
    fixture = VaultFixture(container_config)
    fixture.start()
    yield fixture
    fixture.stop()


@pytest.fixture
def unsealed_fixture(
    started_fixture: VaultFixture,
    fake_wrapped_container: MagicMock,
) -> VaultFixture:
    fake_wrapped_container.exec_run.side_effect = [
        make_exec_result(stdout=INIT_OUTPUT),
        make_exec_result(stdout=UNSEAL_OUTPUT),
    ]
    started_fixture.init_and_unseal()
    fake_wrapped_container.exec_run.reset_mock(side_effect=True)
    fake_wrapped_container.exec_run.return_value = make_exec_result()
    return started_fixture


class TestStart:
    """Tests for start() and the readiness gate."""

    def test_start_waits_for_health_endpoint(
        self,
        started_fixture: VaultFixture,
        readiness_gate: MagicMock,
        fake_container: MagicMock,
    ) -> None:
        """Readiness is polled on the plaintext URL with the configured limits."""
        fake_container.start.assert_called_once()
        readiness_gate.assert_called_once()
        assert readiness_gate.call_args.args[0] == (
            "http://localhost:49154/v1/sys/seal-status"
        )
        assert readiness_gate.call_args.kwargs["expected_status"] == 200
        assert readiness_gate.call_args.kwargs["timeout_seconds"] == 5.0
        assert started_fixture.state is EnumVaultFixtureState.UNINITIALIZED

    def test_address_uses_mapped_port(self, started_fixture: VaultFixture) -> None:
        assert started_fixture.address == "https://localhost:49153"
        assert started_fixture.health_url.startswith("http://localhost:49154/")

    def test_container_declared_with_ssl_directory(
        self,
        started_fixture: VaultFixture,
        container_class: MagicMock,
        container_config: ModelVaultContainerConfig,
    ) -> None:
        """The configured TLS directory is created and mounted."""
        container_class.assert_called_once_with(
            container_config, container_config.ssl_directory
        )
        assert started_fixture.ssl_directory.is_dir()
        assert started_fixture.cert_pemfile.name == "root-cert.pem"
        assert started_fixture.client_cert_pemfile.name == "client-cert.pem"
        assert started_fixture.client_key_pemfile.name == "client-key.pem"

    def test_temporary_ssl_directory_when_unconfigured(
        self,
        container_class: MagicMock,
        readiness_gate: MagicMock,
    ) -> None:
        fixture = VaultFixture(ModelVaultContainerConfig())
        with fixture:
            assert fixture.ssl_directory.is_dir()
            assert fixture.ssl_directory.name.startswith("vault-ssl-")

    def test_readiness_timeout_stops_container(
        self,
        container_config: ModelVaultContainerConfig,
        container_class: MagicMock,
        readiness_gate: MagicMock,
        fake_container: MagicMock,
    ) -> None:
        """A container that never becomes healthy is torn down."""
        readiness_gate.side_effect = VaultContainerNotReadyError("never ready")
        fixture = VaultFixture(container_config)

        with pytest.raises(VaultContainerNotReadyError):
            fixture.start()

        fake_container.stop.assert_called_once()
        assert fixture.state is EnumVaultFixtureState.STOPPED

    def test_docker_failure_is_wrapped(
        self,
        container_config: ModelVaultContainerConfig,
        container_class: MagicMock,
        readiness_gate: MagicMock,
        fake_container: MagicMock,
    ) -> None:
        """Docker errors at start become VaultContainerStartupError."""
        fake_container.start.side_effect = DockerException("pull access denied")
        fake_container.get_wrapped_container.return_value = None
        fixture = VaultFixture(container_config)

        with pytest.raises(VaultContainerStartupError) as exc_info:
            fixture.start()

        assert isinstance(exc_info.value.__cause__, DockerException)
        assert exc_info.value.context["operation"] == "start_container"
        readiness_gate.assert_not_called()
        fake_container.stop.assert_called_once()
        fake_container.get_logs.assert_not_called()

    @pytest.mark.parametrize("lookup", ["get_address", "get_health_port"])
    def test_port_lookup_failure_after_readiness_stops_container(
        self,
        container_config: ModelVaultContainerConfig,
        container_class: MagicMock,
        readiness_gate: MagicMock,
        fake_container: MagicMock,
        lookup: str,
    ) -> None:
        """A container that vanishes after turning healthy is still removed."""
        getattr(fake_container, lookup).side_effect = DockerException(
            "container not found"
        )

        with pytest.raises(DockerException, match="container not found"):
            with VaultFixture(container_config):
                pytest.fail("body must not run")

        readiness_gate.assert_called_once()
        fake_container.stop.assert_called_once()

    def test_port_lookup_failure_leaves_fixture_stopped(
        self,
        container_config: ModelVaultContainerConfig,
        container_class: MagicMock,
        readiness_gate: MagicMock,
        fake_container: MagicMock,
    ) -> None:
        fake_container.get_address.side_effect = DockerException("container not found")
        fixture = VaultFixture(container_config)

        with pytest.raises(DockerException):
            fixture.start()

        fake_container.stop.assert_called_once()
        assert fixture.state is EnumVaultFixtureState.STOPPED

    def test_start_twice_raises(self, started_fixture: VaultFixture) -> None:
        with pytest.raises(VaultFixtureStateError):
            started_fixture.start()


class TestBootstrap:
    """Tests for init_and_unseal and the credentials it captures."""

    def test_init_and_unseal(
        self,
        unsealed_fixture: VaultFixture,
    ) -> None:
        assert unsealed_fixture.state is EnumVaultFixtureState.UNSEALED
        assert unsealed_fixture.root_token == SAMPLE_ROOT_TOKEN
        assert unsealed_fixture.unseal_key == SAMPLE_UNSEAL_KEY

    def test_second_init_raises(
        self,
        unsealed_fixture: VaultFixture,
        fake_wrapped_container: MagicMock,
    ) -> None:
        """Bootstrap is single-use and issues no command the second time."""
        with pytest.raises(VaultFixtureStateError):
            unsealed_fixture.init_and_unseal()

        fake_wrapped_container.exec_run.assert_not_called()

    def test_failed_unseal_leaves_fixture_sealed(
        self,
        started_fixture: VaultFixture,
        fake_wrapped_container: MagicMock,
    ) -> None:
        """Credentials captured by init survive a failed unseal."""
        fake_wrapped_container.exec_run.side_effect = [
            make_exec_result(stdout=INIT_OUTPUT),
            make_exec_result(exit_code=2, stderr="Error unsealing"),
        ]

        with pytest.raises(VaultCommandError):
            started_fixture.init_and_unseal()

        assert started_fixture.state is EnumVaultFixtureState.SEALED
        assert started_fixture.root_token == SAMPLE_ROOT_TOKEN

    def test_credentials_before_init_raise(
        self, started_fixture: VaultFixture
    ) -> None:
        with pytest.raises(VaultFixtureStateError):
            _ = started_fixture.root_token
        with pytest.raises(VaultFixtureStateError):
            _ = started_fixture.unseal_key

    def test_bootstrap_never_logs_credentials(
        self,
        started_fixture: VaultFixture,
        fake_wrapped_container: MagicMock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        fake_wrapped_container.exec_run.side_effect = [
            make_exec_result(stdout=INIT_OUTPUT),
            make_exec_result(stdout=UNSEAL_OUTPUT),
        ]

        with caplog.at_level(logging.DEBUG, logger="omnibase_vault_fixture"):
            started_fixture.init_and_unseal()

        assert_secret_not_logged(caplog.records, SAMPLE_ROOT_TOKEN)
        assert_secret_not_logged(caplog.records, SAMPLE_UNSEAL_KEY)


class TestGuards:
    """Tests for operations issued in the wrong lifecycle state."""

    def test_provision_before_init_raises(
        self,
        started_fixture: VaultFixture,
        fake_wrapped_container: MagicMock,
    ) -> None:
        """No mount is attempted against an uninitialized server."""
        with pytest.raises(VaultFixtureStateError) as exc_info:
            started_fixture.setup_backend_user_pass()

        assert exc_info.value.context["state"] == "uninitialized"
        fake_wrapped_container.exec_run.assert_not_called()

    def test_root_vault_before_init_raises(
        self, started_fixture: VaultFixture
    ) -> None:
        with pytest.raises(VaultFixtureStateError):
            started_fixture.get_root_vault()

    def test_operations_before_start_raise(
        self, container_config: ModelVaultContainerConfig
    ) -> None:
        fixture = VaultFixture(container_config)

        with pytest.raises(VaultFixtureStateError):
            _ = fixture.address
        with pytest.raises(VaultFixtureStateError):
            fixture.run_command("vault", "status")
        with pytest.raises(VaultFixtureStateError):
            fixture.get_default_vault()

    def test_operations_after_stop_raise(self, unsealed_fixture: VaultFixture) -> None:
        unsealed_fixture.stop()

        with pytest.raises(VaultFixtureStateError):
            unsealed_fixture.setup_backend_cert()
        with pytest.raises(VaultFixtureStateError):
            unsealed_fixture.get_root_vault()

    def test_provision_after_unseal(
        self,
        unsealed_fixture: VaultFixture,
        fake_wrapped_container: MagicMock,
    ) -> None:
        """Once unsealed, provisioning logs in with the root token first."""
        results = unsealed_fixture.setup_backend_user_pass()

        first = fake_wrapped_container.exec_run.call_args_list[0].args[0]
        assert first[:2] == ["vault", "login"]
        assert first[-1] == SAMPLE_ROOT_TOKEN
        assert len(results) == 2

    def test_run_command_masks_credentials(
        self,
        unsealed_fixture: VaultFixture,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="omnibase_vault_fixture"):
            result = unsealed_fixture.run_command(
                "vault", "token", "lookup", SAMPLE_ROOT_TOKEN
            )

        assert result.succeeded
        assert_secret_not_logged(caplog.records, SAMPLE_ROOT_TOKEN)


class TestTeardown:
    """Tests for stop() and the context manager."""

    def test_context_manager_stops_on_exception(
        self,
        container_config: ModelVaultContainerConfig,
        container_class: MagicMock,
        readiness_gate: MagicMock,
        fake_container: MagicMock,
    ) -> None:
        """The container is removed even when the body raises."""
        with pytest.raises(RuntimeError, match="test body failed"):
            with VaultFixture(container_config):
                raise RuntimeError("test body failed")

        fake_container.stop.assert_called_once()

    def test_stop_is_idempotent(
        self,
        started_fixture: VaultFixture,
        fake_container: MagicMock,
    ) -> None:
        started_fixture.stop()
        started_fixture.stop()

        fake_container.stop.assert_called_once()
        assert started_fixture.state is EnumVaultFixtureState.STOPPED

    def test_stop_drains_container_output(
        self,
        started_fixture: VaultFixture,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger=FIXTURE_MODULE):
            started_fixture.stop()

        assert any(
            "Vault server started!" in record.getMessage() for record in caplog.records
        )

    def test_unreadable_logs_still_stop_container(
        self,
        started_fixture: VaultFixture,
        fake_container: MagicMock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        fake_container.get_logs.side_effect = APIError("container gone")

        with caplog.at_level(logging.WARNING, logger=FIXTURE_MODULE):
            started_fixture.stop()

        fake_container.stop.assert_called_once()
        assert "Could not read Vault container output" in caplog.text

    def test_ssl_directory_survives_stop(
        self,
        started_fixture: VaultFixture,
    ) -> None:
        """TLS material stays readable after teardown."""
        started_fixture.stop()

        assert started_fixture.ssl_directory.is_dir()

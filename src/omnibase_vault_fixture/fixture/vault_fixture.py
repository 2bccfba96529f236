# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Disposable Vault server fixture for integration tests.

VaultFixture owns exactly one Vault container plus the root token and unseal
key of that server. It is meant to be shared by the tests of one test class:
the class-scoped pytest fixture starts it, one setup step bootstraps it, and
the test methods read from it afterwards.

Lifecycle:
    >>> with VaultFixture() as vault:          # start + readiness gate
    ...     vault.init_and_unseal()            # operator init / unseal
    ...     vault.setup_backend_user_pass()    # optional backend test data
    ...     client = vault.get_root_vault()    # hvac.Client for assertions
    ... # container stopped and removed here, even if the body raised

Two-Phase Trust Bootstrap:
    Phase 1 (readiness) polls the plaintext listener only. The TLS listener
    presents a certificate generated inside the container at startup, and the
    host reads its CA from the mounted TLS directory once the server is up.
    Phase 2 (bootstrap, provisioning and every client handle) uses TLS only.

Thread Safety:
    None. Methods are blocking and strictly sequential; the root credentials
    are written once by init_and_unseal and only read afterwards.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from types import TracebackType
from uuid import uuid4

import hvac
from docker.errors import DockerException

from omnibase_vault_fixture.constants_vault_fixture import (
    CERT_PEMFILE_NAME,
    CLIENT_CERT_PEMFILE_NAME,
    CLIENT_KEY_PEMFILE_NAME,
)
from omnibase_vault_fixture.container import (
    VaultCommandRunner,
    VaultContainer,
    wait_for_http_status,
)
from omnibase_vault_fixture.enums import EnumVaultFixtureState
from omnibase_vault_fixture.errors import (
    ModelFixtureErrorContext,
    VaultContainerStartupError,
    VaultFixtureStateError,
)
from omnibase_vault_fixture.fixture.backend_provisioner import VaultBackendProvisioner
from omnibase_vault_fixture.fixture.bootstrap_sequencer import VaultBootstrapSequencer
from omnibase_vault_fixture.fixture.client_factory import VaultClientFactory
from omnibase_vault_fixture.models import (
    ModelBackendDefinition,
    ModelBootstrapCredentials,
    ModelCommandResult,
    ModelVaultClientConfig,
    ModelVaultContainerConfig,
)

logger = logging.getLogger(__name__)


class VaultFixture:
    """Owns one Vault container and its bootstrap credentials.

    Attributes:
        config: Container configuration
        correlation_id: Correlation ID attached to every log record and error
    """

    def __init__(self, config: ModelVaultContainerConfig | None = None) -> None:
        self.config = config or ModelVaultContainerConfig.from_env()
        self.correlation_id = uuid4()
        self._state = EnumVaultFixtureState.NOT_STARTED
        self._ssl_directory: Path | None = self.config.ssl_directory
        self._container: VaultContainer | None = None
        self._runner: VaultCommandRunner | None = None
        self._sequencer: VaultBootstrapSequencer | None = None
        self._provisioner: VaultBackendProvisioner | None = None
        self._clients: VaultClientFactory | None = None
        self._credentials: ModelBootstrapCredentials | None = None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def state(self) -> EnumVaultFixtureState:
        """Return the current lifecycle state."""
        return self._state

    def __enter__(self) -> VaultFixture:
        return self.start()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.stop()

    def start(self) -> VaultFixture:
        """Start the container and block until the readiness endpoint is healthy.

        Returns:
            This fixture, for chaining.

        Raises:
            VaultFixtureStateError: If the fixture was already started.
            VaultContainerStartupError: If Docker cannot start the container.
            VaultContainerNotReadyError: If readiness times out.
        """
        if self._state is not EnumVaultFixtureState.NOT_STARTED:
            raise VaultFixtureStateError(
                "A VaultFixture can only be started once",
                context=self._context("start_container"),
                state=self._state.value,
            )

        ssl_directory = self._prepare_ssl_directory()
        self._container = VaultContainer(self.config, ssl_directory)
        logger.info(
            "Starting Vault container",
            extra={
                "image": self.config.image,
                "ssl_directory": str(ssl_directory),
                "correlation_id": str(self.correlation_id),
            },
        )

        try:
            try:
                self._container.start()
            except DockerException as e:
                raise VaultContainerStartupError(
                    f"Failed to start Vault container: {type(e).__name__}",
                    context=self._context("start_container"),
                ) from e

            wait_for_http_status(
                self._container.get_health_url(),
                expected_status=self.config.healthy_status_code,
                timeout_seconds=self.config.startup_timeout_seconds,
                poll_interval_seconds=self.config.poll_interval_seconds,
                context=self._context("wait_for_ready"),
            )

            address = self._container.get_address()
            health_port = self._container.get_health_port()
        except Exception:
            self.stop()
            raise

        self._runner = VaultCommandRunner(self._container, self.correlation_id)
        self._sequencer = VaultBootstrapSequencer(self._runner)
        self._provisioner = VaultBackendProvisioner(
            self._runner, self._require_unsealed_credentials
        )
        self._clients = VaultClientFactory(
            address,
            self.cert_pemfile,
            lambda: self.root_token,
        )
        self._state = EnumVaultFixtureState.UNINITIALIZED
        logger.info(
            "Vault container ready",
            extra={
                "address": address,
                "health_port": health_port,
                "correlation_id": str(self.correlation_id),
            },
        )
        return self

    def stop(self) -> None:
        """Stop and remove the container. Safe to call more than once."""
        container = self._container
        self._container = None
        self._state = EnumVaultFixtureState.STOPPED
        if container is None:
            return
        try:
            self._log_container_output(container)
        finally:
            container.stop()
            logger.info(
                "Vault container stopped",
                extra={"correlation_id": str(self.correlation_id)},
            )

    # -------------------------------------------------------------------------
    # Addresses and TLS material
    # -------------------------------------------------------------------------

    @property
    def address(self) -> str:
        """Return the HTTPS URL on the mapped host port of the TLS listener."""
        return self._require_container("address").get_address()

    @property
    def health_url(self) -> str:
        """Return the plaintext readiness URL on its mapped host port."""
        return self._require_container("health_url").get_health_url()

    @property
    def ssl_directory(self) -> Path:
        """Return the host directory holding the generated TLS material."""
        if self._ssl_directory is None:
            raise VaultFixtureStateError(
                "TLS directory is created when the fixture starts",
                context=self._context("ssl_directory"),
                state=self._state.value,
            )
        return self._ssl_directory

    @property
    def cert_pemfile(self) -> Path:
        """Return the host path of the CA certificate trusted by every handle."""
        return self.ssl_directory / CERT_PEMFILE_NAME

    @property
    def client_cert_pemfile(self) -> Path:
        """Return the host path of the client certificate for cert auth."""
        return self.ssl_directory / CLIENT_CERT_PEMFILE_NAME

    @property
    def client_key_pemfile(self) -> Path:
        """Return the host path of the client private key for cert auth."""
        return self.ssl_directory / CLIENT_KEY_PEMFILE_NAME

    # -------------------------------------------------------------------------
    # Bootstrap
    # -------------------------------------------------------------------------

    def init_and_unseal(self) -> None:
        """Initialize the server, capture its credentials and unseal it.

        Must be called exactly once, after start().

        Raises:
            VaultFixtureStateError: If the fixture is not freshly started.
            VaultCommandError: If init or unseal exits non-zero.
            VaultInitOutputParseError: If the init output is not recognised.
        """
        if self._state is not EnumVaultFixtureState.UNINITIALIZED:
            raise VaultFixtureStateError(
                "init_and_unseal requires a started, uninitialized Vault",
                context=self._context("init"),
                state=self._state.value,
            )
        sequencer = self._sequencer
        assert sequencer is not None

        self._credentials = sequencer.initialize()
        self._state = EnumVaultFixtureState.SEALED
        sequencer.unseal(self._credentials)
        self._state = EnumVaultFixtureState.UNSEALED

    @property
    def root_token(self) -> str:
        """Return the root token issued by init_and_unseal."""
        return self._require_credentials("root_token").root_token.get_secret_value()

    @property
    def unseal_key(self) -> str:
        """Return the unseal key issued by init_and_unseal.

        Only seal/unseal tests should need this; everything else should use
        the handles from get_vault() and friends.
        """
        return self._require_credentials("unseal_key").unseal_key.get_secret_value()

    # -------------------------------------------------------------------------
    # Commands and provisioning
    # -------------------------------------------------------------------------

    def run_command(self, *command: str, check: bool = False) -> ModelCommandResult:
        """Run an argument vector inside the container.

        Known credentials are masked in the log output.
        """
        runner = self._require_runner("run_command")
        redact = ()
        if self._credentials is not None:
            redact = (
                self._credentials.root_token.get_secret_value(),
                self._credentials.unseal_key.get_secret_value(),
            )
        return runner.run(*command, check=check, redact=redact)

    def provision(self, definition: ModelBackendDefinition) -> list[ModelCommandResult]:
        """Log in as root and apply an arbitrary backend definition."""
        return self._require_provisioner().provision(definition)

    def setup_backend_app_id(self) -> list[ModelCommandResult]:
        """Mount app-id and map ``fake_app`` / ``fake_user``."""
        return self._require_provisioner().setup_backend_app_id()

    def setup_backend_user_pass(self) -> list[ModelCommandResult]:
        """Mount userpass with ``fake_user`` / ``fake_password``."""
        return self._require_provisioner().setup_backend_user_pass()

    def setup_backend_app_role(self) -> list[ModelCommandResult]:
        """Mount approle with role ``testrole``."""
        return self._require_provisioner().setup_backend_app_role()

    def setup_backend_pki(self) -> list[ModelCommandResult]:
        """Mount the PKI engines and generate a root CA at ``pki/``."""
        return self._require_provisioner().setup_backend_pki()

    def setup_backend_cert(self) -> list[ModelCommandResult]:
        """Mount cert auth and register the client certificate as ``web``."""
        return self._require_provisioner().setup_backend_cert()

    def set_engine_versions(self) -> list[ModelCommandResult]:
        """Move ``secret/`` to KV v2 and mount ``kv-v1`` and ``kv-v1-Upgrade-Test``."""
        return self._require_provisioner().set_engine_versions()

    # -------------------------------------------------------------------------
    # Client handles
    # -------------------------------------------------------------------------

    def get_vault_config(self) -> ModelVaultClientConfig:
        """Return the default client configuration for this server."""
        return self._require_clients().get_vault_config()

    def get_vault(
        self,
        config: ModelVaultClientConfig,
        max_retries: int | None = None,
        retry_interval_ms: int | None = None,
    ) -> hvac.Client:
        """Build a handle from an explicit configuration and retry overrides."""
        return self._require_clients().get_vault(config, max_retries, retry_interval_ms)

    def get_default_vault(self) -> hvac.Client:
        """Build an unauthenticated handle with sensible defaults."""
        return self._require_clients().get_default_vault()

    def get_vault_for_token(self, token: str) -> hvac.Client:
        """Build a handle authenticated with ``token``."""
        return self._require_clients().get_vault_for_token(token)

    def get_root_vault(self) -> hvac.Client:
        """Build a handle authenticated with the root token."""
        return self._require_clients().get_root_vault()

    def get_root_vault_with_custom_config(
        self, config: ModelVaultClientConfig
    ) -> hvac.Client:
        """Build a root handle on top of a caller-supplied configuration."""
        return self._require_clients().get_root_vault_with_custom_config(config)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _context(self, operation: str) -> ModelFixtureErrorContext:
        return ModelFixtureErrorContext(
            operation=operation,
            target_name=self.config.image,
            correlation_id=self.correlation_id,
        )

    def _prepare_ssl_directory(self) -> Path:
        if self._ssl_directory is None:
            self._ssl_directory = Path(tempfile.mkdtemp(prefix="vault-ssl-"))
        else:
            self._ssl_directory.mkdir(parents=True, exist_ok=True)
        return self._ssl_directory

    def _log_container_output(self, container: VaultContainer) -> None:
        if container.get_wrapped_container() is None:
            return
        try:
            stdout, stderr = container.get_logs()
        except DockerException as e:
            logger.warning(
                "Could not read Vault container output",
                extra={
                    "error_type": type(e).__name__,
                    "correlation_id": str(self.correlation_id),
                },
            )
            return
        for stream_name, stream in (("stdout", stdout), ("stderr", stderr)):
            if stream:
                logger.debug(
                    "Vault container %s:\n%s",
                    stream_name,
                    stream.decode("utf-8", errors="replace"),
                )

    def _require_container(self, operation: str) -> VaultContainer:
        if self._container is None or not self._state.is_running:
            raise VaultFixtureStateError(
                "Vault container is not running",
                context=self._context(operation),
                state=self._state.value,
            )
        return self._container

    def _require_runner(self, operation: str) -> VaultCommandRunner:
        self._require_container(operation)
        assert self._runner is not None
        return self._runner

    def _require_provisioner(self) -> VaultBackendProvisioner:
        self._require_container("provision")
        assert self._provisioner is not None
        return self._provisioner

    def _require_clients(self) -> VaultClientFactory:
        self._require_container("get_vault")
        assert self._clients is not None
        return self._clients

    def _require_credentials(self, operation: str) -> ModelBootstrapCredentials:
        if self._credentials is None:
            raise VaultFixtureStateError(
                "Vault credentials are only available after init_and_unseal",
                context=self._context(operation),
                state=self._state.value,
            )
        return self._credentials

    def _require_unsealed_credentials(self) -> ModelBootstrapCredentials:
        if self._state is not EnumVaultFixtureState.UNSEALED:
            raise VaultFixtureStateError(
                "Vault must be initialized and unsealed before provisioning",
                context=self._context("provision"),
                state=self._state.value,
            )
        return self._require_credentials("provision")


__all__: list[str] = ["VaultFixture"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Factory.

Builds ``hvac.Client`` handles bound to the container's mapped TLS address
and trusting the CA generated inside the container. No request is sent at
construction time; a bad token only shows up on first use.

Retry Policy:
    ``get_vault(config, max_retries, retry_interval_ms)``:
        - both None        -> retries disabled
        - one of them None -> the class default fills in the other
    Every other constructor uses the class defaults (5 retries, 1000 ms).

    Retries are applied by the HTTP session: a urllib3 Retry that waits a
    fixed interval between attempts and retries connection errors, read
    errors and 5xx responses (Vault answers 503 while sealed).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import hvac
import requests
from pydantic import SecretStr
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from omnibase_vault_fixture.constants_vault_fixture import (
    MAX_RETRIES,
    OPEN_TIMEOUT_SECONDS,
    READ_TIMEOUT_SECONDS,
    RETRY_INTERVAL_MS,
)
from omnibase_vault_fixture.models import (
    ModelVaultClientConfig,
    ModelVaultRetryPolicy,
)

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({500, 502, 503, 504})


class FixedIntervalRetry(Retry):  # type: ignore[misc]
    """urllib3 Retry that sleeps a constant interval between attempts."""

    def __init__(
        self, *args: object, interval_seconds: float = 0.0, **kwargs: object
    ) -> None:
        super().__init__(*args, **kwargs)
        self.interval_seconds = interval_seconds

    def new(self, **kw: object) -> FixedIntervalRetry:
        retry = super().new(**kw)
        retry.interval_seconds = self.interval_seconds
        return retry

    def get_backoff_time(self) -> float:
        return self.interval_seconds if self.history else 0.0


def build_session(
    policy: ModelVaultRetryPolicy,
    verify: str | bool = True,
    cert: tuple[str, str] | None = None,
) -> requests.Session:
    """Create a requests session that applies ``policy`` to every request.

    hvac takes TLS settings from a caller-supplied session over its own
    ``verify`` and ``cert`` arguments, so the trust anchor and client
    certificate are set on the session itself.
    """
    if policy.enabled:
        retries: Retry | int = FixedIntervalRetry(
            total=policy.max_retries,
            status_forcelist=RETRYABLE_STATUS_CODES,
            allowed_methods=None,
            raise_on_status=False,
            interval_seconds=policy.retry_interval_seconds,
        )
    else:
        retries = 0
    adapter = HTTPAdapter(max_retries=retries)
    session = requests.Session()
    session.verify = verify
    session.cert = cert
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class VaultClientFactory:
    """Hands out configured Vault client handles.

    Args:
        address: HTTPS URL of the Vault server as seen from the host.
        ca_cert_path: Host path of the CA certificate PEM file.
        root_token_provider: Returns the root token, raising
            VaultFixtureStateError before bootstrap.
    """

    MAX_RETRIES: int = MAX_RETRIES
    RETRY_INTERVAL_MS: int = RETRY_INTERVAL_MS

    def __init__(
        self,
        address: str,
        ca_cert_path: Path,
        root_token_provider: Callable[[], str],
    ) -> None:
        self._address = address
        self._ca_cert_path = ca_cert_path
        self._root_token_provider = root_token_provider

    @property
    def address(self) -> str:
        """Return the HTTPS URL every handle is bound to."""
        return self._address

    @classmethod
    def resolve_retry_policy(
        cls,
        max_retries: int | None,
        retry_interval_ms: int | None,
    ) -> ModelVaultRetryPolicy:
        """Resolve optional retry overrides into a policy.

        Both None disables retries; a single None falls back to the class
        default for the missing value.
        """
        if max_retries is None and retry_interval_ms is None:
            return ModelVaultRetryPolicy.disabled()
        return ModelVaultRetryPolicy(
            max_retries=cls.MAX_RETRIES if max_retries is None else max_retries,
            retry_interval_ms=(
                cls.RETRY_INTERVAL_MS
                if retry_interval_ms is None
                else retry_interval_ms
            ),
        )

    def get_vault_config(self, token: str | None = None) -> ModelVaultClientConfig:
        """Return the default configuration for this server."""
        return ModelVaultClientConfig(
            address=self._address,
            token=SecretStr(token) if token is not None else None,
            open_timeout_seconds=OPEN_TIMEOUT_SECONDS,
            read_timeout_seconds=READ_TIMEOUT_SECONDS,
            ca_cert_path=self._ca_cert_path,
        )

    def get_vault(
        self,
        config: ModelVaultClientConfig,
        max_retries: int | None = None,
        retry_interval_ms: int | None = None,
    ) -> hvac.Client:
        """Build a handle from an explicit configuration."""
        policy = self.resolve_retry_policy(max_retries, retry_interval_ms)
        return self._build_client(config, policy)

    def get_default_vault(self) -> hvac.Client:
        """Build an unauthenticated handle with default timeouts and retries."""
        return self.get_vault(
            self.get_vault_config(), self.MAX_RETRIES, self.RETRY_INTERVAL_MS
        )

    def get_vault_for_token(self, token: str) -> hvac.Client:
        """Build a handle authenticated with ``token``."""
        return self.get_vault(
            self.get_vault_config(token), self.MAX_RETRIES, self.RETRY_INTERVAL_MS
        )

    def get_root_vault(self) -> hvac.Client:
        """Build a handle authenticated with the root token."""
        return self.get_vault_for_token(self._root_token_provider())

    def get_root_vault_with_custom_config(
        self, config: ModelVaultClientConfig
    ) -> hvac.Client:
        """Build a root handle from ``config``.

        The fixture address, root token, timeouts and CA replace whatever
        ``config`` carries; its client certificate pair is kept.
        """
        overlaid = config.model_copy(
            update={
                "address": self._address,
                "token": SecretStr(self._root_token_provider()),
                "open_timeout_seconds": OPEN_TIMEOUT_SECONDS,
                "read_timeout_seconds": READ_TIMEOUT_SECONDS,
                "ca_cert_path": self._ca_cert_path,
            }
        )
        return self.get_vault(overlaid, self.MAX_RETRIES, self.RETRY_INTERVAL_MS)

    def _build_client(
        self,
        config: ModelVaultClientConfig,
        policy: ModelVaultRetryPolicy,
    ) -> hvac.Client:
        logger.debug(
            "Building Vault client",
            extra={
                "address": config.address,
                "authenticated": config.token is not None,
                "max_retries": policy.max_retries,
                "retry_interval_ms": policy.retry_interval_ms,
            },
        )
        # An empty token keeps hvac from falling back to VAULT_TOKEN
        token = config.token.get_secret_value() if config.token is not None else ""
        return hvac.Client(
            url=config.address,
            token=token,
            verify=config.verify,
            cert=config.client_cert,
            timeout=config.timeout,
            session=build_session(policy, config.verify, config.client_cert),
        )


__all__: list[str] = [
    "FixedIntervalRetry",
    "RETRYABLE_STATUS_CODES",
    "VaultClientFactory",
    "build_session",
]

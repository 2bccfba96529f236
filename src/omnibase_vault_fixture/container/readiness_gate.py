# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Plaintext Readiness Gate.

Polls an HTTP endpoint until it answers with the expected status code. The
Vault fixture points this at the plain listener on port 8280 because the TLS
listener on 8200 presents a certificate that is generated inside the
container at startup; nothing on the host can trust it until the container
is ready. Readiness therefore never touches TLS.

The gate blocks the calling thread and leaves no background task behind.
"""

from __future__ import annotations

import logging
import time

import httpx

from omnibase_vault_fixture.errors import (
    ModelFixtureErrorContext,
    VaultContainerNotReadyError,
)

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 2.0


def wait_for_http_status(
    url: str,
    *,
    expected_status: int = 200,
    timeout_seconds: float,
    poll_interval_seconds: float = 0.5,
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    context: ModelFixtureErrorContext | None = None,
) -> int:
    """Block until ``GET url`` returns ``expected_status``.

    Connection errors are expected while the server boots and are retried
    until the deadline.

    Args:
        url: Plaintext URL to poll.
        expected_status: Status code that marks the service as ready.
        timeout_seconds: Deadline for the whole wait.
        poll_interval_seconds: Delay between probes.
        request_timeout_seconds: Timeout of each individual probe.
        context: Error context used when the deadline passes.

    Returns:
        Number of probes issued, including the successful one.

    Raises:
        VaultContainerNotReadyError: If the deadline passes first.
    """
    deadline = time.monotonic() + timeout_seconds
    attempts = 0
    last_status: int | None = None
    last_error: str | None = None

    with httpx.Client(timeout=request_timeout_seconds) as client:
        while True:
            attempts += 1
            try:
                response = client.get(url)
            except httpx.TransportError as e:
                last_error = type(e).__name__
                logger.debug(
                    "Readiness probe failed",
                    extra={"url": url, "attempt": attempts, "error_type": last_error},
                )
            else:
                last_status = response.status_code
                if last_status == expected_status:
                    logger.info(
                        "Readiness endpoint answered %d after %d probe(s)",
                        last_status,
                        attempts,
                        extra={"url": url},
                    )
                    return attempts
                logger.debug(
                    "Readiness probe returned unexpected status",
                    extra={"url": url, "attempt": attempts, "status": last_status},
                )

            if time.monotonic() >= deadline:
                raise VaultContainerNotReadyError(
                    f"Endpoint did not return {expected_status} within "
                    f"{timeout_seconds}s",
                    context=context,
                    url=url,
                    attempts=attempts,
                    last_status=last_status,
                    last_error=last_error,
                )
            time.sleep(poll_interval_seconds)


__all__: list[str] = ["DEFAULT_REQUEST_TIMEOUT_SECONDS", "wait_for_http_status"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Docker exec stand-ins and captured Vault console output for unit tests.

The init samples are verbatim ``vault operator init -key-shares=1
-key-threshold=1`` output of a vault:1.1.3 server, with freshly generated
values that were never used anywhere.

Example:
    >>> wrapped.exec_run.return_value = make_exec_result(stdout=INIT_OUTPUT)
    >>> runner.run("vault", "operator", "init").stdout.startswith("Unseal")
    True
"""

from __future__ import annotations

from docker.models.containers import ExecResult

SAMPLE_UNSEAL_KEY = "7nKLMgAOdoKl2wHfpnEBzvyfk/n6Ai6n8P3RBMoZYO0="
SAMPLE_ROOT_TOKEN = "s.2WbYlTvQJ0j7ypXzGg6Tfcmk"

INIT_OUTPUT = f"""Unseal Key 1: {SAMPLE_UNSEAL_KEY}

Initial Root Token: {SAMPLE_ROOT_TOKEN}

Vault initialized with 1 key shares and a key threshold of 1. Please securely
distribute the key shares printed above. When the Vault is re-sealed,
restarted, or stopped, you must supply at least 1 of these keys to unseal it
before it can start servicing requests.

Vault does not store the generated master key. Without at least 1 key to
reconstruct the master key, Vault will remain permanently sealed!

It is possible to generate new unseal keys, provided you have a quorum of
existing unseal keys shares. See "vault operator rekey" for more information.
"""

# Same output as INIT_OUTPUT with Windows line endings
INIT_OUTPUT_CRLF = INIT_OUTPUT.replace("\n", "\r\n")

INIT_OUTPUT_TWO_SHARES = f"""Unseal Key 1: {SAMPLE_UNSEAL_KEY}
Unseal Key 2: q4Y1w4d2rkM0lx6mUVrYH3yGZP3a1K0yY0b5V5yVw0k=

Initial Root Token: {SAMPLE_ROOT_TOKEN}

Vault initialized with 2 key shares and a key threshold of 1. Please securely
distribute the key shares printed above.
"""

UNSEAL_OUTPUT = """Key             Value
---             -----
Seal Type       shamir
Initialized     true
Sealed          false
Total Shares    1
Threshold       1
Version         1.1.3
Cluster Name    vault-cluster-2b7a4a1c
HA Enabled      false
"""

ALREADY_MOUNTED_STDERR = (
    "Error enabling userpass auth: Error making API request.\n\n"
    "URL: POST https://127.0.0.1:8200/v1/sys/auth/userpass\n"
    "Code: 400. Errors:\n\n"
    "* path is already in use at userpass/\n"
)


def make_exec_result(
    exit_code: int | None = 0,
    stdout: str = "",
    stderr: str = "",
) -> ExecResult:
    """Build the ExecResult returned by ``exec_run(..., demux=True)``."""
    return ExecResult(
        exit_code,
        (stdout.encode() if stdout else None, stderr.encode() if stderr else None),
    )


__all__: list[str] = [
    "ALREADY_MOUNTED_STDERR",
    "INIT_OUTPUT",
    "INIT_OUTPUT_CRLF",
    "INIT_OUTPUT_TWO_SHARES",
    "SAMPLE_ROOT_TOKEN",
    "SAMPLE_UNSEAL_KEY",
    "UNSEAL_OUTPUT",
    "make_exec_result",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for the Vault fixture test suites.

Available Utilities:
    Docker exec:
        - make_exec_result: Build an ExecResult as returned by exec_run
        - INIT_OUTPUT / INIT_OUTPUT_CRLF / INIT_OUTPUT_TWO_SHARES: captured
          ``vault operator init`` output
        - UNSEAL_OUTPUT, ALREADY_MOUNTED_STDERR: captured CLI output

    Log Helpers:
        - get_log_messages: Rendered messages of one logger
        - assert_secret_not_logged: Fail when a credential reached a log record
"""

from tests.helpers.log_helpers import assert_secret_not_logged, get_log_messages
from tests.helpers.util_vault_exec import (
    ALREADY_MOUNTED_STDERR,
    INIT_OUTPUT,
    INIT_OUTPUT_CRLF,
    INIT_OUTPUT_TWO_SHARES,
    SAMPLE_ROOT_TOKEN,
    SAMPLE_UNSEAL_KEY,
    UNSEAL_OUTPUT,
    make_exec_result,
)

__all__ = [
    "ALREADY_MOUNTED_STDERR",
    "INIT_OUTPUT",
    "INIT_OUTPUT_CRLF",
    "INIT_OUTPUT_TWO_SHARES",
    "SAMPLE_ROOT_TOKEN",
    "SAMPLE_UNSEAL_KEY",
    "UNSEAL_OUTPUT",
    "assert_secret_not_logged",
    "get_log_messages",
    "make_exec_result",
]

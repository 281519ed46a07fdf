# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Common utilities for shellenv command line tools."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from ..common.serialize import json_dump

if TYPE_CHECKING:
    from ..shell.base import Shell

log = getLogger(__name__)


def stdout_json(d):
    getLogger("shellenv.stdout").info(json_dump(d))


def session_shell() -> Shell:
    """The dialect the current command generates for, configured from ``context``."""
    from ..base.context import context
    from ..shell import detect_shell, get_shell

    shell = get_shell(detect_shell(), hook_timeout=context.hook_timeout)
    log.debug("generating script for %r", shell)
    return shell


def print_script(script: str) -> int:
    # the calling shell evaluates stdout as-is
    print(script, end="")
    return 0

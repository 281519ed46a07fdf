# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Shell dialects shellenv can generate scripts for, looked up by name."""

from __future__ import annotations

import os
from logging import getLogger
from os.path import basename, splitext

from frozendict import frozendict

from ..exceptions import ShellNotDetectedError, UnsupportedShellError
from .base import Shell, VariableKind, classify
from .fish import FishShell
from .posix import BashShell, ZshShell
from .xonsh import XonshShell

log = getLogger(__name__)

shell_map: frozendict[str, type[Shell]] = frozendict(
    {
        "bash": BashShell,
        "zsh": ZshShell,
        "fish": FishShell,
        "xonsh": XonshShell,
    }
)


def get_shell(name: str, **options) -> Shell:
    """Instantiate the dialect registered as ``name``.

    Raises:
        UnsupportedShellError: no dialect is registered under ``name``.
    """
    try:
        shell_cls = shell_map[name]
    except KeyError:
        raise UnsupportedShellError(name, shell_map)
    return shell_cls(**options)


def shell_name_from_path(path: str) -> str:
    """
    Examples:
        >>> shell_name_from_path("/usr/local/bin/zsh")
        'zsh'
        >>> shell_name_from_path("-bash")
        'bash'

    """
    # login shells show up as "-bash"
    return splitext(basename(path))[0].lstrip("-")


def detect_shell(shell: str | None = None) -> str:
    """Name of the dialect to use: ``shell``, else the configured one, else ``$SHELL``."""
    from ..base.context import context

    if shell:
        return shell
    if context.shell:
        log.debug("using configured shell %s", context.shell)
        return context.shell
    env_shell = os.getenv("SHELL")
    if env_shell:
        name = shell_name_from_path(env_shell)
        log.debug("using shell %s from $SHELL=%s", name, env_shell)
        return name
    raise ShellNotDetectedError()


__all__ = (
    "BashShell",
    "FishShell",
    "Shell",
    "VariableKind",
    "XonshShell",
    "ZshShell",
    "classify",
    "detect_shell",
    "get_shell",
    "shell_map",
    "shell_name_from_path",
)

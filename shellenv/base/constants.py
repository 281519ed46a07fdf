# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""
This file should hold most string literals and magic numbers used throughout the code base.
The exception is if a literal is specifically meant to be private to and isolated within a module.
Think of this as a "more static" source of configuration information.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common.compat import on_win

if TYPE_CHECKING:
    from typing import Final

APP_NAME: Final = "shellenv"

SEARCH_PATH: tuple[str, ...]

if on_win:  # pragma: no cover
    SEARCH_PATH = ("C:/ProgramData/shellenv/shellenvrc",)
else:
    SEARCH_PATH = ("/etc/shellenv/shellenvrc",)

SEARCH_PATH += (
    "$XDG_CONFIG_HOME/shellenv/shellenvrc",
    "~/.config/shellenv/shellenvrc",
    "~/.shellenvrc",
    "$SHELLENVRC",
)

# Variables whose value is an ordered list of directories joined by os.pathsep.
# Compared against the upper-cased variable name.
PATH_LIST_VARS: Final = frozenset(("PATH", "MANPATH", "INFOPATH"))

# Subcommand the generated hooks call back into on every prompt.
HOOK_ENV_COMMAND: Final = "hook-env"

# Shell function bash and zsh run before each prompt.
HOOK_NAME: Final = "_shellenv_hook"

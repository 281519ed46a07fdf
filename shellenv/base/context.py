# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Application-wide configuration for shellenv.

The configuration is read from the rc files on ``SEARCH_PATH``, from ``SHELLENV_*`` environment
variables and from command line flags, in increasing order of precedence. Use the global
``context`` object; call ``reset_context()`` after the environment or arguments change.
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from logging import getLogger
from os.path import abspath
from shutil import which
from typing import TYPE_CHECKING

from frozendict import frozendict

from ..auxlib.ish import dals
from ..common.compat import NoneType
from ..common.configuration import Configuration, Parameter, ValidationError
from ..gateways.logging import verbosity_to_level
from .constants import APP_NAME, SEARCH_PATH

if TYPE_CHECKING:
    from argparse import Namespace
    from collections.abc import Iterable, Iterator

log = getLogger(__name__)


class Context(Configuration):
    shell = Parameter(None, element_type=(str, NoneType))
    hook_timeout = Parameter(0.0, element_type=float)
    _executable = Parameter("", aliases=("executable", "exe"), expandvars=True)
    _verbosity = Parameter(0, element_type=int, aliases=("verbose", "verbosity"))
    json = Parameter(False)

    def __init__(
        self,
        search_path: Iterable[str] | None = None,
        argparse_args: Namespace | None = None,
    ):
        super().__init__(
            SEARCH_PATH if search_path is None else search_path,
            APP_NAME,
            argparse_args,
        )

    def post_build_validation(self) -> list[ValidationError]:
        errors = []
        if self.hook_timeout < 0:
            errors.append(
                ValidationError(
                    "hook_timeout",
                    self.hook_timeout,
                    "<<merged>>",
                    "'hook_timeout' must be zero (no limit) or a positive number of seconds",
                )
            )
        return errors

    @property
    def executable(self) -> str:
        """Absolute path of the program the generated hooks call back into."""
        if self._executable:
            return abspath(self._executable)
        argv0 = sys.argv[0] if sys.argv and sys.argv[0] else APP_NAME
        return which(argv0) or abspath(argv0)

    @property
    def verbosity(self) -> int:
        return self._verbosity

    @property
    def log_level(self) -> int:
        """Level of the ``shellenv`` logger; -vv is INFO, -vvv DEBUG, -vvvv and up TRACE."""
        return verbosity_to_level(self.verbosity)

    @property
    def category_map(self) -> dict[str, tuple[str, ...]]:
        return {
            "Shell Integration": (
                "shell",
                "executable",
                "hook_timeout",
            ),
            "Output and Logging": (
                "json",
                "verbosity",
            ),
        }

    def get_descriptions(self) -> frozendict[str, str]:
        return self.description_map

    @property
    def description_map(self) -> frozendict[str, str]:
        return frozendict(
            executable=dals(
                """
                Path of the program the pre-prompt hook runs as '<executable> hook-env -s
                <shell>'. When empty, the path of the running shellenv command is used.
                """
            ),
            hook_timeout=dals(
                """
                Seconds the xonsh pre-prompt hook waits for 'hook-env' before giving up for
                that prompt. Zero disables the limit. POSIX and fish hooks always wait.
                """
            ),
            json=dals(
                """
                Ensure all error output is in json format for machine consumption.
                """
            ),
            shell=dals(
                """
                Shell dialect used when a command is run without '--shell'. When unset, the
                basename of $SHELL is used.
                """
            ),
            verbosity=dals(
                """
                Sets output log level. 0 is warn. 1 is detailed output. 2 is info. 3 is debug.
                4 is trace.
                """
            ),
        )


def reset_context(
    search_path: Iterable[str] = SEARCH_PATH,
    argparse_args: Namespace | None = None,
) -> Context:
    global context
    context.__init__(search_path, argparse_args)
    log.debug("context reset with search path %s", search_path)
    return context


@contextmanager
def fresh_context(
    env: dict[str, str] | None = None,
    search_path: Iterable[str] = SEARCH_PATH,
    argparse_args: Namespace | None = None,
) -> Iterator[Context]:
    old_env = os.environ.copy()
    os.environ.update(env or {})
    try:
        yield reset_context(search_path, argparse_args)
    finally:
        os.environ.clear()
        os.environ.update(old_env)
        reset_context()


context = Context((), None)

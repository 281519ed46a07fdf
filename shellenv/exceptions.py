# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Exceptions raised by shellenv commands, and how they are printed."""

from __future__ import annotations

import sys
from logging import getLogger
from traceback import format_exception, format_exception_only

from . import ShellEnvError
from .common.io import dashlist
from .common.serialize import json_dump

log = getLogger(__name__)


class ArgumentError(ShellEnvError):
    return_code = 2

    def __init__(self, message, **kwargs):
        super().__init__(message, **kwargs)


class ShellEnvValueError(ShellEnvError, ValueError):
    def __init__(self, message, *args, **kwargs):
        super().__init__(message, *args, **kwargs)


class UnsupportedShellError(ShellEnvValueError):
    def __init__(self, shell, supported=(), **kwargs):
        message = "Shell '%(shell)s' is not supported. Supported shells are:%(supported)s"
        super().__init__(
            message, shell=shell, supported=dashlist(sorted(supported)), **kwargs
        )


class ShellNotDetectedError(ShellEnvError):
    def __init__(self, **kwargs):
        message = (
            "Could not determine the current shell. Pass '--shell', set the 'shell'"
            " configuration parameter, or export SHELL."
        )
        super().__init__(message, **kwargs)


def print_shellenv_exception(exc_val, exc_tb=None):
    from .base.context import context
    from .gateways.logging import initialize_logging

    initialize_logging()

    rc = getattr(exc_val, "return_code", None)
    if context.verbosity >= 3:
        print(_format_exc(exc_val, exc_tb), file=sys.stderr)
    elif context.json:
        logger = getLogger("shellenv.stdout" if rc else "shellenv.stderr")
        logger.info("%s\n", json_dump(exc_val.dump_map()))
    else:
        stderrlog = getLogger("shellenv.stderr")
        stderrlog.error("\n%r\n", exc_val)


def _format_exc(exc_val=None, exc_tb=None):
    if exc_val is None:
        exc_type, exc_val, exc_tb = sys.exc_info()
    else:
        exc_type = type(exc_val)
    if exc_tb:
        formatted_exception = format_exception(exc_type, exc_val, exc_tb)
    else:
        formatted_exception = format_exception_only(exc_type, exc_val)
    return "".join(formatted_exception)

# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Turn whatever a command raises into output on the logging streams and an exit status."""

import sys
from logging import getLogger

from .common.compat import ensure_text_type

log = getLogger(__name__)

REPORT_BANNER = "# >>>>>>>>>>>>>>>>>>>>>> ERROR REPORT <<<<<<<<<<<<<<<<<<<<<<"


class ExceptionHandler:
    def __call__(self, func, *args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BaseException as exc:
            return self.handle_exception(exc, exc.__traceback__)

    def handle_exception(self, exc_val, exc_tb):
        from . import ShellEnvError
        from .exceptions import print_shellenv_exception

        if isinstance(exc_val, ShellEnvError):
            print_shellenv_exception(exc_val, exc_tb)
            return exc_val.return_code
        if isinstance(exc_val, KeyboardInterrupt):
            print_shellenv_exception(ShellEnvError("KeyboardInterrupt"))
            return 1
        if isinstance(exc_val, SystemExit):
            return 0 if exc_val.code is None else exc_val.code
        log.debug("unexpected %s", type(exc_val).__name__)
        self.print_error_report(self.get_error_report(exc_val, exc_tb))
        return 1

    def get_error_report(self, exc_val, exc_tb):
        from . import __version__
        from .exceptions import _format_exc

        return {
            "error": repr(exc_val),
            "exception_name": exc_val.__class__.__name__,
            "exception_type": str(exc_val.__class__),
            "command": " ".join(ensure_text_type(arg) for arg in sys.argv),
            "traceback": _format_exc(exc_val, exc_tb),
            "shellenv_version": __version__,
            "python_version": sys.version.split()[0],
        }

    def print_error_report(self, error_report):
        from .base.context import context
        from .cli.main import init_loggers
        from .common.serialize import json_dump

        init_loggers()
        if context.json:
            getLogger("shellenv.stdout").info(json_dump(error_report))
            return
        lines = ["", REPORT_BANNER, ""]
        lines.extend("    " + line for line in error_report["traceback"].splitlines())
        lines += [
            "",
            "`$ %s`" % error_report["command"],
            "",
            "    shellenv version : %s" % error_report["shellenv_version"],
            "      python version : %s" % error_report["python_version"],
            "",
            "An unexpected error has occurred. shellenv has prepared the above report.",
            "",
        ]
        getLogger("shellenv.stderr").info("\n".join(lines))


def shellenv_exception_handler(func, *args, **kwargs):
    return ExceptionHandler()(func, *args, **kwargs)

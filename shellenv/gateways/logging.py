# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Logging setup for the ``shellenv`` logger tree.

``shellenv`` carries diagnostics to stderr at the level picked by ``-v``. Two more loggers,
``shellenv.stdout`` and ``shellenv.stderr``, carry the command's own messages and json output
as plain text.
"""

import logging
import sys
from functools import cache
from logging import DEBUG, INFO, WARN, Formatter, StreamHandler, getLogger

from ..common.constants import TRACE
from ..common.io import attach_stderr_handler

log = getLogger(__name__)

logging.addLevelName(TRACE, "TRACE")

# -v counts; once only makes command output more detailed
_VERBOSITY_LEVELS = (WARN, WARN, INFO, DEBUG, TRACE)


class StdStreamHandler(StreamHandler):
    """A StreamHandler writing to whatever ``sys.stdout`` or ``sys.stderr`` is at emit time."""

    terminator = "\n"

    def __init__(self, sys_stream):
        self.sys_stream = sys_stream
        super().__init__()

    @property
    def stream(self):
        return getattr(sys, self.sys_stream)

    @stream.setter
    def stream(self, value):
        # looked up on sys for every record; StreamHandler.__init__ assigns here too
        pass

    def emit(self, record):
        # a record may bring its own terminator: extra={"terminator": ""}
        try:
            self.stream.write(
                self.format(record) + getattr(record, "terminator", self.terminator)
            )
            self.flush()
        except Exception:
            self.handleError(record)


def verbosity_to_level(verbosity: int) -> int:
    if verbosity <= 0:
        return WARN
    return _VERBOSITY_LEVELS[min(verbosity, len(_VERBOSITY_LEVELS) - 1)]


@cache
def initialize_logging():
    set_shellenv_log_level()
    initialize_std_loggers()


def initialize_std_loggers():
    formatter = Formatter("%(message)s")
    for name in ("stdout", "stderr"):
        handler = StdStreamHandler(name)
        handler.setLevel(INFO)
        handler.setFormatter(formatter)
        logger = getLogger(f"shellenv.{name}")
        logger.handlers = [handler]
        logger.setLevel(INFO)
        logger.propagate = False


def set_shellenv_log_level(level=WARN):
    attach_stderr_handler(level=level, logger_name="shellenv")


def set_log_level(log_level: int):
    set_shellenv_log_level(log_level)
    log.debug("log_level set to %d", log_level)

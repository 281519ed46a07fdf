# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""The interface every shell dialect implements, and the variable classifier it relies on."""

from __future__ import annotations

import os
from abc import ABCMeta, abstractmethod
from enum import Enum
from logging import getLogger
from os.path import dirname

from ..base.constants import PATH_LIST_VARS
from ..common.path import is_dir_in_path, split_path_list
from ..exceptions import ShellEnvValueError

log = getLogger(__name__)


class VariableKind(Enum):
    scalar = "scalar"
    path_list = "path_list"

    def __str__(self):
        return self.value


def classify(key: str) -> VariableKind:
    """Tell a ``PATH``-like variable from a plain one, ignoring case.

    Examples:
        >>> classify("manpath")
        <VariableKind.path_list: 'path_list'>
        >>> classify("HOME")
        <VariableKind.scalar: 'scalar'>

    """
    if key.upper() in PATH_LIST_VARS:
        return VariableKind.path_list
    return VariableKind.scalar


class Shell(metaclass=ABCMeta):
    """Generates the source text one shell dialect evaluates to follow shellenv.

    Every operation returns a complete script ending in a newline. Generating a script never
    touches the calling process' environment; whatever can go wrong (an unset variable, a hook
    that was never installed) is tolerated by the generated text itself.
    """

    #: dialect name, also passed back to the executable as ``hook-env -s <name>``
    name: str
    #: whether assignments must be copied into ``os.environ`` by a second statement
    mirrors_os_environ: bool = False

    def __init__(self, hook_timeout: float = 0.0, pathsep: str = os.pathsep):
        if hook_timeout < 0:
            raise ShellEnvValueError(
                "hook_timeout must not be negative, got %(hook_timeout)s",
                hook_timeout=hook_timeout,
            )
        self.hook_timeout = hook_timeout
        self.pathsep = pathsep

    def __repr__(self):
        return f"{self.__class__.__name__}(hook_timeout={self.hook_timeout!r})"

    @abstractmethod
    def activate(self, exe: str) -> str:
        """Put the directory of ``exe`` on ``PATH`` if missing and install the prompt hook."""
        raise NotImplementedError()

    @abstractmethod
    def deactivate(self) -> str:
        """Remove the prompt hook; a no-op when it is not installed."""
        raise NotImplementedError()

    @abstractmethod
    def set_env(self, key: str, value: str) -> str:
        raise NotImplementedError()

    @abstractmethod
    def unset_env(self, key: str) -> str:
        raise NotImplementedError()

    def path_entries(self, value: str) -> tuple[str, ...]:
        return split_path_list(value, self.pathsep)

    @staticmethod
    def missing_exe_dir(exe: str) -> str | None:
        """The directory of ``exe`` when it still has to be added to ``$PATH``."""
        exe_dir = dirname(exe)
        if is_dir_in_path(exe_dir):
            log.debug("%s already on PATH", exe_dir)
            return None
        return exe_dir

    @staticmethod
    def _script(*statements: str) -> str:
        return "".join(
            statement if statement.endswith("\n") else statement + "\n"
            for statement in statements
            if statement
        )

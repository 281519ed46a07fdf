# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""fish, which keeps ``PATH``-like variables as native lists."""

from __future__ import annotations

from logging import getLogger

from ..auxlib.ish import dals
from ..base.constants import HOOK_ENV_COMMAND
from .base import Shell, VariableKind, classify
from .escape import escape_identifier, quote_fish

log = getLogger(__name__)


class FishShell(Shell):
    name = "fish"

    hook_function = "__shellenv_env_eval"

    append_path_tmpl = "set -gx PATH $PATH %s\n"
    set_var_tmpl = "set -gx %s\n"
    unset_var_tmpl = "set -e %s || true\n"

    hook_tmpl = dals(
        """
        function %(hook)s --on-event fish_prompt --description 'Update shellenv environment variables';
            %(exe)s %(command)s -s %(shell)s | source;
        end;
        """
    )
    unhook_tmpl = "functions --query %(hook)s; and functions --erase %(hook)s\n"

    def activate(self, exe: str) -> str:
        exe_dir = self.missing_exe_dir(exe)
        if self.hook_timeout:
            log.debug("%s hook runs without a time limit", self.name)
        return self._script(
            self.append_path_tmpl % quote_fish(exe_dir) if exe_dir else "",
            self.hook_tmpl
            % {
                "hook": self.hook_function,
                "exe": quote_fish(exe),
                "command": HOOK_ENV_COMMAND,
                "shell": self.name,
            },
        )

    def deactivate(self) -> str:
        return self._script(self.unhook_tmpl % {"hook": self.hook_function})

    def set_env(self, key: str, value: str) -> str:
        if classify(key) is VariableKind.path_list:
            words = [quote_fish(entry) for entry in self.path_entries(value)]
        else:
            words = [quote_fish(value)]
        return self._script(self.set_var_tmpl % " ".join((escape_identifier(key), *words)))

    def unset_env(self, key: str) -> str:
        return self._script(self.unset_var_tmpl % escape_identifier(key))

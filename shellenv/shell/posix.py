# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""bash and zsh.

Both keep ``PATH`` as one colon-joined string and read values written as ANSI-C ``$'...'``
literals. They differ only in how a function is run before each prompt.
"""

from __future__ import annotations

from logging import getLogger

from ..auxlib.ish import dals
from ..base.constants import HOOK_ENV_COMMAND, HOOK_NAME
from .base import Shell
from .escape import escape_identifier, quote_ansi_c

log = getLogger(__name__)


class PosixShell(Shell):
    append_path_tmpl = 'export PATH="${PATH:+$PATH:}"%s\n'
    set_var_tmpl = "export %s=%s\n"
    unset_var_tmpl = "unset %s\n"

    hook_tmpl: str
    unhook_tmpl: str

    def activate(self, exe: str) -> str:
        exe_dir = self.missing_exe_dir(exe)
        if self.hook_timeout:
            log.debug("%s hook runs without a time limit", self.name)
        return self._script(
            self.append_path_tmpl % quote_ansi_c(exe_dir) if exe_dir else "",
            self.hook_tmpl
            % {
                "hook": HOOK_NAME,
                "exe": quote_ansi_c(exe),
                "command": HOOK_ENV_COMMAND,
                "shell": self.name,
            },
        )

    def deactivate(self) -> str:
        return self._script(self.unhook_tmpl % {"hook": HOOK_NAME})

    def set_env(self, key: str, value: str) -> str:
        # path lists stay one separator-joined string, written exactly as given
        return self._script(
            self.set_var_tmpl % (escape_identifier(key), quote_ansi_c(value))
        )

    def unset_env(self, key: str) -> str:
        return self._script(self.unset_var_tmpl % escape_identifier(key))


class BashShell(PosixShell):
    name = "bash"

    hook_tmpl = dals(
        """
        %(hook)s() {
          local previous_exit_status=$?;
          eval "$(%(exe)s %(command)s -s %(shell)s)";
          return $previous_exit_status;
        };
        if [[ ";${PROMPT_COMMAND:-};" != *";%(hook)s;"* ]]; then
          PROMPT_COMMAND="%(hook)s${PROMPT_COMMAND:+;$PROMPT_COMMAND}"
        fi
        """
    )
    unhook_tmpl = dals(
        """
        if [[ -n "${PROMPT_COMMAND:-}" ]]; then
          PROMPT_COMMAND=";${PROMPT_COMMAND};"
          while [[ "$PROMPT_COMMAND" == *";%(hook)s;"* ]]; do
            PROMPT_COMMAND="${PROMPT_COMMAND//;%(hook)s;/;}"
          done
          PROMPT_COMMAND="${PROMPT_COMMAND#;}"
          PROMPT_COMMAND="${PROMPT_COMMAND%%;}"
        fi
        unset -f %(hook)s
        """
    )


class ZshShell(PosixShell):
    name = "zsh"

    hook_tmpl = dals(
        """
        %(hook)s() {
          eval "$(%(exe)s %(command)s -s %(shell)s)";
        }
        typeset -ag precmd_functions;
        if [[ -z "${precmd_functions[(r)%(hook)s]+1}" ]]; then
          precmd_functions=( %(hook)s ${precmd_functions[@]} )
        fi
        """
    )
    unhook_tmpl = dals(
        """
        typeset -ag precmd_functions;
        precmd_functions=( ${precmd_functions:#%(hook)s} )
        unfunction %(hook)s 2>/dev/null || true
        """
    )

# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""xonsh.

xonsh keeps its own typed environment (``${...}``) next to ``os.environ``, and changes to the
former do not reach ``os.environ`` on their own. Every assignment is therefore followed by a
statement copying the detyped value of the same key into ``os.environ``.
"""

from __future__ import annotations

from logging import getLogger

from ..auxlib.ish import dals
from ..base.constants import HOOK_ENV_COMMAND
from .base import Shell, VariableKind, classify
from .escape import quote_python

log = getLogger(__name__)


def xonsh_env_target(key: str) -> str:
    """``$KEY`` for names xonsh can parse after ``$``, an item of ``${...}`` otherwise."""
    if key.isidentifier():
        return "$" + key
    return "${...}[%s]" % quote_python(key)


class XonshShell(Shell):
    name = "xonsh"
    mirrors_os_environ = True

    hook_function = "_shellenv_listen_prompt"
    hook_event = "on_pre_prompt"

    mirror_import = "from os import environ\n"
    mirror_tmpl = "environ[%(key)s] = ${...}.detype()[%(key)s]\n"
    append_path_tmpl = "$PATH.append(%s)\n"
    set_var_tmpl = "%s = %s\n"
    unset_var_tmpl = dals(
        """
        ${...}.pop(%(key)s, None)
        environ.pop(%(key)s, None)
        """
    )

    hook_tmpl = dals(
        """
        import subprocess
        import sys

        def %(hook)s():
            ctx = XSH.ctx
        %(run)s
            if proc.stderr:
                print(proc.stderr.decode(), file=sys.stderr, end='')
            if proc.stdout:
                execx(proc.stdout.decode(), 'exec', ctx, filename='shellenv')

        XSH.builtins.events.%(event)s(%(hook)s)
        """
    )
    run_tmpl = "    proc = subprocess.run(%(argv)s, capture_output=True)\n"
    run_with_timeout_tmpl = dals(
        """
            try:
                proc = subprocess.run(%(argv)s, capture_output=True, timeout=%(timeout)r)
            except subprocess.TimeoutExpired:
                print(%(message)s, file=sys.stderr)
                return
        """
    )
    unhook_tmpl = dals(
        """
        from xonsh.built_ins import XSH

        _shellenv_hooks = {%(event)s: [%(hook)s]}
        for _hook_type, _hook_fns in _shellenv_hooks.items():
            _handlers = getattr(XSH.builtins.events, _hook_type)
            for _handler in list(_handlers):
                if getattr(_handler, '__name__', None) in _hook_fns:
                    _handlers.remove(_handler)
        del _shellenv_hooks
        """
    )

    def _mirror(self, key: str) -> str:
        return self.mirror_tmpl % {"key": quote_python(key)}

    def _hook_call(self, exe: str) -> str:
        argv = "[%s]" % ", ".join(
            quote_python(arg) for arg in (exe, HOOK_ENV_COMMAND, "-s", self.name)
        )
        if not self.hook_timeout:
            return self.run_tmpl % {"argv": argv}
        message = quote_python(
            f"shellenv: '{HOOK_ENV_COMMAND}' did not finish within {self.hook_timeout}s,"
            " environment not updated"
        )
        # template lines are dedented; the call sits inside the hook function body
        return "".join(
            "    " + line
            for line in (
                self.run_with_timeout_tmpl
                % {
                    "argv": argv,
                    "timeout": float(self.hook_timeout),
                    "message": message,
                }
            ).splitlines(keepends=True)
        )

    def _unhook(self) -> str:
        return self.unhook_tmpl % {
            "event": quote_python(self.hook_event),
            "hook": quote_python(self.hook_function),
        }

    def activate(self, exe: str) -> str:
        exe_dir = self.missing_exe_dir(exe)
        path_statements = ()
        if exe_dir:
            path_statements = (
                self.mirror_import,
                self.append_path_tmpl % quote_python(exe_dir),
                self._mirror("PATH"),
            )
        # drop a handler left by an earlier activation so the hook runs once per prompt
        return self._script(
            *path_statements,
            self._unhook(),
            self.hook_tmpl
            % {
                "hook": self.hook_function,
                "event": self.hook_event,
                "run": self._hook_call(exe).rstrip("\n"),
            },
        )

    def deactivate(self) -> str:
        return self._script(self._unhook())

    def set_env(self, key: str, value: str) -> str:
        if classify(key) is VariableKind.path_list:
            literal = "[%s]" % ", ".join(
                quote_python(entry) for entry in self.path_entries(value)
            )
        else:
            literal = quote_python(value)
        return self._script(
            self.mirror_import,
            self.set_var_tmpl % (xonsh_env_target(key), literal),
            self._mirror(key),
        )

    def unset_env(self, key: str) -> str:
        return self._script(
            self.mirror_import,
            self.unset_var_tmpl % {"key": quote_python(key)},
        )

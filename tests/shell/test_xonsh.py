# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

import ast
import sys
from subprocess import CompletedProcess, TimeoutExpired
from types import ModuleType, SimpleNamespace
from typing import TYPE_CHECKING

import pytest

from shellenv.auxlib.ish import dals
from shellenv.shell.xonsh import XonshShell, xonsh_env_target

from .. import TOOL_EXE

if TYPE_CHECKING:
    from pytest import CaptureFixture, MonkeyPatch
    from pytest_mock import MockerFixture

XONSH_UNHOOK = dals(
    """
    from xonsh.built_ins import XSH

    _shellenv_hooks = {'on_pre_prompt': ['_shellenv_listen_prompt']}
    for _hook_type, _hook_fns in _shellenv_hooks.items():
        _handlers = getattr(XSH.builtins.events, _hook_type)
        for _handler in list(_handlers):
            if getattr(_handler, '__name__', None) in _hook_fns:
                _handlers.remove(_handler)
    del _shellenv_hooks
    """
)

XONSH_HOOK = XONSH_UNHOOK + dals(
    """
    import subprocess
    import sys

    def _shellenv_listen_prompt():
        ctx = XSH.ctx
        proc = subprocess.run(['/opt/tool/bin/tool', 'hook-env', '-s', 'xonsh'], capture_output=True)
        if proc.stderr:
            print(proc.stderr.decode(), file=sys.stderr, end='')
        if proc.stdout:
            execx(proc.stdout.decode(), 'exec', ctx, filename='shellenv')

    XSH.builtins.events.on_pre_prompt(_shellenv_listen_prompt)
    """
)


class FakeEvent(list):
    def __call__(self, handler):
        self.append(handler)
        return handler


@pytest.fixture
def fake_xsh(monkeypatch: MonkeyPatch) -> SimpleNamespace:
    """A stand-in for the parts of ``xonsh.built_ins.XSH`` the generated code touches."""
    xsh = SimpleNamespace(
        ctx={},
        builtins=SimpleNamespace(events=SimpleNamespace(on_pre_prompt=FakeEvent())),
    )
    module = ModuleType("xonsh.built_ins")
    module.XSH = xsh
    monkeypatch.setitem(sys.modules, "xonsh", ModuleType("xonsh"))
    monkeypatch.setitem(sys.modules, "xonsh.built_ins", module)
    return xsh


def _run_python(script: str, namespace: dict | None = None) -> dict:
    namespace = {} if namespace is None else namespace
    exec(compile(script, "<shellenv>", "exec"), namespace)
    return namespace


def test_activate_appends_missing_dir(path_without_tool):
    assert XonshShell().activate(TOOL_EXE) == (
        dals(
            """
            from os import environ
            $PATH.append('/opt/tool/bin')
            environ['PATH'] = ${...}.detype()['PATH']
            """
        )
        + XONSH_HOOK
    )


def test_activate_dir_already_on_path(path_with_tool):
    assert XonshShell().activate(TOOL_EXE) == XONSH_HOOK


def test_activate_with_timeout_is_valid_python(path_with_tool):
    script = XonshShell(hook_timeout=2.5).activate(TOOL_EXE)
    assert "capture_output=True, timeout=2.5)" in script
    assert "    except subprocess.TimeoutExpired:\n" in script
    ast.parse(script)


def test_hook_evaluates_stdout_and_forwards_stderr(
    path_with_tool, fake_xsh, mocker: MockerFixture, capsys: CaptureFixture
):
    run = mocker.patch(
        "subprocess.run",
        return_value=CompletedProcess(
            [TOOL_EXE], 0, stdout=b"$FOO = 'bar'\n", stderr=b"shellenv: warning\n"
        ),
    )
    execx = mocker.MagicMock()
    _run_python(XonshShell().activate(TOOL_EXE), {"execx": execx})

    (hook,) = fake_xsh.builtins.events.on_pre_prompt
    assert hook.__name__ == "_shellenv_listen_prompt"
    hook()

    run.assert_called_once_with(
        [TOOL_EXE, "hook-env", "-s", "xonsh"], capture_output=True
    )
    execx.assert_called_once_with(
        "$FOO = 'bar'\n", "exec", fake_xsh.ctx, filename="shellenv"
    )
    assert capsys.readouterr().err == "shellenv: warning\n"


def test_hook_skips_empty_output(
    path_with_tool, fake_xsh, mocker: MockerFixture, capsys: CaptureFixture
):
    mocker.patch(
        "subprocess.run",
        return_value=CompletedProcess([TOOL_EXE], 0, stdout=b"", stderr=b""),
    )
    execx = mocker.MagicMock()
    _run_python(XonshShell().activate(TOOL_EXE), {"execx": execx})
    fake_xsh.builtins.events.on_pre_prompt[0]()

    execx.assert_not_called()
    assert capsys.readouterr().err == ""


def test_hook_timeout_is_advisory(
    path_with_tool, fake_xsh, mocker: MockerFixture, capsys: CaptureFixture
):
    run = mocker.patch(
        "subprocess.run", side_effect=TimeoutExpired([TOOL_EXE], 2.5)
    )
    execx = mocker.MagicMock()
    _run_python(XonshShell(hook_timeout=2.5).activate(TOOL_EXE), {"execx": execx})
    fake_xsh.builtins.events.on_pre_prompt[0]()

    run.assert_called_once_with(
        [TOOL_EXE, "hook-env", "-s", "xonsh"], capture_output=True, timeout=2.5
    )
    execx.assert_not_called()
    assert "did not finish within 2.5s" in capsys.readouterr().err


def test_deactivate_removes_only_the_hook(fake_xsh):
    def _shellenv_listen_prompt():
        pass

    def other_handler():
        pass

    handlers = fake_xsh.builtins.events.on_pre_prompt
    handlers.extend((other_handler, _shellenv_listen_prompt))

    script = XonshShell().deactivate()
    _run_python(script)
    assert handlers == [other_handler]

    # a second run finds nothing to remove
    _run_python(script)
    assert handlers == [other_handler]


def test_deactivate_removes_every_registration(fake_xsh):
    def _shellenv_listen_prompt():
        pass

    def other_handler():
        pass

    handlers = fake_xsh.builtins.events.on_pre_prompt
    handlers.extend(
        (_shellenv_listen_prompt, other_handler, _shellenv_listen_prompt)
    )

    _run_python(XonshShell().deactivate())
    assert handlers == [other_handler]


def test_deactivate_script(fake_xsh):
    assert XonshShell().deactivate() == XONSH_UNHOOK


def test_activate_twice_registers_one_hook(
    path_with_tool, fake_xsh, mocker: MockerFixture
):
    run = mocker.patch(
        "subprocess.run",
        return_value=CompletedProcess([TOOL_EXE], 0, stdout=b"", stderr=b""),
    )
    script = XonshShell().activate(TOOL_EXE)
    handlers = fake_xsh.builtins.events.on_pre_prompt

    _run_python(script, {"execx": mocker.MagicMock()})
    _run_python(script, {"execx": mocker.MagicMock()})
    (hook,) = handlers
    hook()
    run.assert_called_once()

    _run_python(XonshShell().deactivate())
    assert handlers == []


def test_set_env_scalar_mirrors_same_key():
    assert XonshShell().set_env("FOO", "bar") == dals(
        """
        from os import environ
        $FOO = 'bar'
        environ['FOO'] = ${...}.detype()['FOO']
        """
    )


@pytest.mark.parametrize("value", ("a'b\\c\nd", "", "\r\n", "\\'"))
def test_set_env_value_round_trip(value):
    assignment = XonshShell().set_env("FOO", value).splitlines()[1]
    target, literal = assignment.split(" = ", 1)
    assert target == "$FOO"
    assert ast.literal_eval(literal) == value


def test_set_env_path_list_is_native_list():
    script = XonshShell(pathsep=":").set_env("PATH", "/a:/b::/c")
    assert script == dals(
        """
        from os import environ
        $PATH = ['/a', '/b', '', '/c']
        environ['PATH'] = ${...}.detype()['PATH']
        """
    )


@pytest.mark.parametrize(
    "value,entries",
    (
        ("/a::/b:", ["/a", "", "/b", ""]),
        (":/a", ["", "/a"]),
        ("", [""]),
        ("/it's", ["/it's"]),
    ),
)
def test_set_env_path_list_keeps_empty_entries(value, entries):
    script = XonshShell(pathsep=":").set_env("MANPATH", value)
    literal = script.splitlines()[1].split(" = ", 1)[1]
    assert ast.literal_eval(literal) == entries
    assert ":".join(entries) == value


def test_set_env_non_identifier_key():
    assert XonshShell().set_env("MY-VAR", "x") == dals(
        """
        from os import environ
        ${...}['MY-VAR'] = 'x'
        environ['MY-VAR'] = ${...}.detype()['MY-VAR']
        """
    )


def test_unset_env():
    assert XonshShell().unset_env("FOO") == dals(
        """
        from os import environ
        ${...}.pop('FOO', None)
        environ.pop('FOO', None)
        """
    )


@pytest.mark.parametrize(
    "key,target",
    (("FOO", "$FOO"), ("_x1", "$_x1"), ("1X", "${...}['1X']"), ("it's", "${...}['it\\'s']")),
)
def test_xonsh_env_target(key, target):
    assert xonsh_env_target(key) == target

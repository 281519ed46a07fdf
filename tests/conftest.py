# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from shellenv.base.context import context, reset_context

from . import TOOL_DIR

if TYPE_CHECKING:
    from pathlib import Path

    from pytest import MonkeyPatch


@pytest.fixture(autouse=True)
def isolated_context(monkeypatch: MonkeyPatch, tmp_path: Path):
    """Keep rc files and SHELLENV_* variables of the machine out of every test."""
    for key in tuple(os.environ):
        if key.startswith("SHELLENV"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    reset_context(())
    yield context
    reset_context(())


@pytest.fixture
def path_without_tool(monkeypatch: MonkeyPatch) -> str:
    path = os.pathsep.join(("/usr/local/bin", "/usr/bin", "/bin"))
    monkeypatch.setenv("PATH", path)
    return path


@pytest.fixture
def path_with_tool(monkeypatch: MonkeyPatch) -> str:
    path = os.pathsep.join(("/usr/local/bin", TOOL_DIR, "/usr/bin"))
    monkeypatch.setenv("PATH", path)
    return path

# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""CLI implementation for `shellenv shells`."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction


def configure_parser(sub_parsers: _SubParsersAction, **kwargs) -> ArgumentParser:
    from .helpers import add_parser_help

    summary = "List the shells shellenv can generate scripts for."
    p = sub_parsers.add_parser(
        "shells",
        help=summary,
        description=summary,
        add_help=False,
        **kwargs,
    )
    add_parser_help(p)
    p.set_defaults(func="shellenv.cli.main_shells.execute")
    return p


def execute(args: Namespace, parser: ArgumentParser) -> int:
    from ..base.context import context
    from ..shell import shell_map
    from .common import stdout_json

    names = sorted(shell_map)
    if context.json:
        stdout_json({"shells": names})
    else:
        getLogger("shellenv.stdout").info("\n".join(names))
    return 0

# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""CLI implementation for `shellenv deactivate`."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction


def configure_parser(sub_parsers: _SubParsersAction, **kwargs) -> ArgumentParser:
    from .helpers import add_parser_help, add_parser_shell

    summary = "Print the script that removes the shellenv pre-prompt hook."
    p = sub_parsers.add_parser(
        "deactivate",
        help=summary,
        description=summary,
        add_help=False,
        **kwargs,
    )
    add_parser_help(p)
    add_parser_shell(p)
    p.set_defaults(func="shellenv.cli.main_deactivate.execute")
    return p


def execute(args: Namespace, parser: ArgumentParser) -> int:
    from .common import print_script, session_shell

    return print_script(session_shell().deactivate())

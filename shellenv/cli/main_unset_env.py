# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""CLI implementation for `shellenv unset-env`."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction


def configure_parser(sub_parsers: _SubParsersAction, **kwargs) -> ArgumentParser:
    from .helpers import add_parser_help, add_parser_shell

    summary = "Print the script that removes an environment variable, if it is set."
    p = sub_parsers.add_parser(
        "unset-env",
        help=summary,
        description=summary,
        add_help=False,
        **kwargs,
    )
    add_parser_help(p)
    add_parser_shell(p)
    p.add_argument("key", metavar="KEY", help="Name of the variable.")
    p.set_defaults(func="shellenv.cli.main_unset_env.execute")
    return p


def execute(args: Namespace, parser: ArgumentParser) -> int:
    from ..exceptions import ArgumentError
    from .common import print_script, session_shell

    if not args.key:
        raise ArgumentError("KEY must not be empty")
    return print_script(session_shell().unset_env(args.key))

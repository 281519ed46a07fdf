# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""CLI implementation for `shellenv set-env`."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction


def configure_parser(sub_parsers: _SubParsersAction, **kwargs) -> ArgumentParser:
    from ..auxlib.ish import dals
    from .helpers import add_parser_help, add_parser_shell

    summary = "Print the script that sets an environment variable."
    description = dals(
        f"""
        {summary}

        PATH, MANPATH and INFOPATH are split on the path separator and written as a list
        where the shell has one.
        """
    )
    p = sub_parsers.add_parser(
        "set-env",
        help=summary,
        description=description,
        add_help=False,
        **kwargs,
    )
    add_parser_help(p)
    add_parser_shell(p)
    p.add_argument("key", metavar="KEY", help="Name of the variable.")
    p.add_argument("value", metavar="VALUE", help="Value, taken verbatim.")
    p.set_defaults(func="shellenv.cli.main_set_env.execute")
    return p


def execute(args: Namespace, parser: ArgumentParser) -> int:
    from ..exceptions import ArgumentError
    from .common import print_script, session_shell

    if not args.key:
        raise ArgumentError("KEY must not be empty")
    return print_script(session_shell().set_env(args.key, args.value))

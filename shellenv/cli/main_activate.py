# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""CLI implementation for `shellenv activate`.

Prints the script that puts shellenv on PATH and installs the pre-prompt hook.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common.constants import NULL

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction


def configure_parser(sub_parsers: _SubParsersAction, **kwargs) -> ArgumentParser:
    from ..auxlib.ish import dals
    from .helpers import add_parser_help, add_parser_shell

    summary = "Print the script that activates shellenv in the current shell."
    description = dals(
        f"""
        {summary}

        Evaluate the output in the running shell, for example:

            eval "$(shellenv activate -s bash)"
        """
    )

    p = sub_parsers.add_parser(
        "activate",
        help=summary,
        description=description,
        add_help=False,
        **kwargs,
    )
    add_parser_help(p)
    add_parser_shell(p)
    p.add_argument(
        "--exe",
        dest="executable",
        metavar="PATH",
        default=NULL,
        help="Executable the hook calls back into. Defaults to this shellenv command.",
    )
    p.set_defaults(func="shellenv.cli.main_activate.execute")
    return p


def execute(args: Namespace, parser: ArgumentParser) -> int:
    from ..base.context import context
    from .common import print_script, session_shell

    return print_script(session_shell().activate(context.executable))

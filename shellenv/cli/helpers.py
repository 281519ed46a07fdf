# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""
Collection of helper functions to standardize reused CLI arguments.
"""

from __future__ import annotations

from argparse import _HelpAction
from typing import TYPE_CHECKING

from ..common.constants import NULL

if TYPE_CHECKING:
    from argparse import ArgumentParser, _ArgumentGroup


def add_parser_help(p: ArgumentParser) -> None:
    """
    So we can use consistent capitalization and periods in the help. You must
    use the add_help=False argument to ArgumentParser or add_parser to use
    this. Add this first to be consistent with the default argparse output.

    """
    p.add_argument(
        "-h",
        "--help",
        action=_HelpAction,
        help="Show this help message and exit.",
    )


def add_parser_verbose(parser: ArgumentParser | _ArgumentGroup) -> None:
    from .actions import NullCountAction

    parser.add_argument(
        "-v",
        "--verbose",
        action=NullCountAction,
        help=(
            "Can be used multiple times. Once for detailed output, twice for INFO logging, "
            "thrice for DEBUG logging, four times for TRACE logging."
        ),
        dest="verbosity",
        default=NULL,
    )


def add_parser_json(parser: ArgumentParser | _ArgumentGroup) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=NULL,
        help="Report all output as json. Suitable for using shellenv programmatically.",
    )


def add_parser_shell(p: ArgumentParser) -> None:
    from ..shell import shell_map

    p.add_argument(
        "-s",
        "--shell",
        choices=sorted(shell_map),
        default=NULL,
        help="Shell dialect to generate the script for. "
        "Defaults to the 'shell' configuration parameter, then to $SHELL.",
    )

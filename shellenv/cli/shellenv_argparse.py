# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""shellenv command line interface parsers."""

from __future__ import annotations

import argparse
from argparse import RawDescriptionHelpFormatter
from argparse import ArgumentParser as ArgumentParserBase
from importlib import import_module
from logging import getLogger

from .. import __version__
from ..common.constants import NULL
from .helpers import add_parser_help, add_parser_json, add_parser_verbose
from .main_activate import configure_parser as configure_parser_activate
from .main_config import configure_parser as configure_parser_config
from .main_deactivate import configure_parser as configure_parser_deactivate
from .main_set_env import configure_parser as configure_parser_set_env
from .main_shells import configure_parser as configure_parser_shells
from .main_unset_env import configure_parser as configure_parser_unset_env

log = getLogger(__name__)


def generate_pre_parser(**kwargs) -> ArgumentParser:
    pre_parser = ArgumentParser(
        prog="shellenv",
        description="shellenv keeps an interactive shell's environment in sync"
        " by generating scripts for the shell to evaluate.",
        **kwargs,
    )

    add_parser_verbose(pre_parser)
    add_parser_json(pre_parser)

    return pre_parser


def generate_parser(**kwargs) -> ArgumentParser:
    parser = generate_pre_parser(**kwargs)

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"shellenv {__version__}",
        help="Show the shellenv version number and exit.",
    )

    sub_parsers = parser.add_subparsers(
        metavar="COMMAND",
        title="commands",
        description="The following subcommands are available.",
        dest="cmd",
        action=_SortedSubParsersAction,
        required=True,
    )

    configure_parser_activate(sub_parsers)
    configure_parser_config(sub_parsers)
    configure_parser_deactivate(sub_parsers)
    configure_parser_set_env(sub_parsers)
    configure_parser_shells(sub_parsers)
    configure_parser_unset_env(sub_parsers)

    return parser


def do_call(args: argparse.Namespace, parser: ArgumentParser):
    """Run the ``execute`` function of the module the parsed subcommand points at."""
    module_name, func_name = args.func.rsplit(".", 1)
    # func_name should always be 'execute'
    module = import_module(module_name)
    log.debug("running %s", args.cmd)
    return getattr(module, func_name)(args, parser)


class ArgumentParser(ArgumentParserBase):
    def __init__(self, *args, add_help=True, **kwargs):
        kwargs.setdefault("formatter_class", RawDescriptionHelpFormatter)
        super().__init__(*args, add_help=False, **kwargs)

        if add_help:
            add_parser_help(self)

    def parse_args(self, *args, override_args=None, **kwargs):
        parsed_args = super().parse_args(*args, **kwargs)
        for name, value in (override_args or {}).items():
            if value is not NULL and getattr(parsed_args, name, NULL) is NULL:
                setattr(parsed_args, name, value)
        return parsed_args


class _SortedSubParsersAction(argparse._SubParsersAction):
    def _get_subactions(self):
        """Sort actions for subcommands to appear alphabetically in help blurb."""
        return sorted(self._choices_actions, key=lambda action: action.dest)

# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Entry point for all shellenv subcommands."""

import sys


def init_loggers():
    import logging

    from ..base.context import context
    from ..gateways.logging import initialize_logging, set_log_level

    initialize_logging()

    # silence informational output to avoid interfering with JSON output
    logging.getLogger("shellenv.stderr").setLevel(
        logging.CRITICAL + 10 if context.json else logging.INFO
    )

    # set log_level
    set_log_level(context.log_level)


def main_subshell(*args, **kwargs):
    """Parse ``args``, configure ``context`` from them, and run the subcommand."""
    from ..base.context import context
    from .shellenv_argparse import do_call, generate_parser, generate_pre_parser

    args = args or ["--help"]

    pre_parser = generate_pre_parser(add_help=False)
    pre_args, _ = pre_parser.parse_known_args(args)

    # the arguments that we want to pass to the main parser later on
    override_args = {
        "json": pre_args.json,
        "verbosity": pre_args.verbosity,
    }

    context.__init__(argparse_args=pre_args)

    parser = generate_parser(add_help=True)
    args = parser.parse_args(args, override_args=override_args)

    context.__init__(argparse_args=args)
    init_loggers()

    exit_code = do_call(args, parser)
    if isinstance(exit_code, int):
        return exit_code
    return 0


def main(*args, **kwargs):
    # shellenv.common.compat contains only stdlib imports
    from ..common.compat import ensure_text_type
    from ..exception_handler import shellenv_exception_handler

    # cleanup argv
    args = args or sys.argv[1:]  # drop executable/script
    args = tuple(ensure_text_type(s) for s in args)

    return shellenv_exception_handler(main_subshell, *args, **kwargs)

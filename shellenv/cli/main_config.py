# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""CLI implementation for `shellenv config`.

Shows the effective configuration, where each value comes from, and what each parameter means.
"""

from __future__ import annotations

import json
from itertools import chain
from logging import getLogger
from textwrap import wrap
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction

    from ..base.context import Context


def configure_parser(sub_parsers: _SubParsersAction, **kwargs) -> ArgumentParser:
    from ..auxlib.ish import dals
    from ..base.constants import SEARCH_PATH
    from .helpers import add_parser_help

    summary = "Show shellenv configuration."
    description = dals(
        f"""
        {summary}

        Configuration files are read from, in increasing order of precedence:

        """
    ) + "\n".join(f"    {path}" for path in SEARCH_PATH)
    epilog = "Environment variables named SHELLENV_<PARAMETER> override the files."

    p = sub_parsers.add_parser(
        "config",
        help=summary,
        description=description,
        epilog=epilog,
        add_help=False,
        **kwargs,
    )
    add_parser_help(p)
    action = p.add_mutually_exclusive_group()
    action.add_argument(
        "--show",
        nargs="*",
        default=None,
        metavar="KEY",
        help="Display configuration values. With no KEY, all of them. This is the default.",
    )
    action.add_argument(
        "--show-sources",
        action="store_true",
        help="Display every configuration source and the values it sets.",
    )
    action.add_argument(
        "--describe",
        nargs="*",
        default=None,
        metavar="KEY",
        help="Describe configuration parameters. With no KEY, all of them.",
    )
    action.add_argument(
        "--validate",
        action="store_true",
        help="Validate all configuration sources and exit non-zero on the first problem.",
    )
    p.set_defaults(func="shellenv.cli.main_config.execute")
    return p


def format_dict(d):
    return [f"{k}: {v if v is not None else 'None'}" for k, v in d.items()]


def parameter_description_builder(name, context: Context):
    from ..common.serialize import yaml_round_trip_dump

    builder = []
    details = context.describe_parameter(name)
    aliases = details["aliases"]
    element_types = details["element_types"]
    default_value_str = json.dumps(details["default_value"])

    builder.append("{} ({})".format(name, ", ".join(sorted(set(element_types)))))
    if aliases:
        builder.append("  aliases: {}".format(", ".join(aliases)))
    builder.extend("  " + line for line in wrap(details["description"], 70))
    builder.append("")
    builder = ["# " + line for line in builder]

    yaml_content = yaml_round_trip_dump({name: json.loads(default_value_str)})
    builder.extend(yaml_content.strip().split("\n"))

    builder = ["# " + line for line in builder]
    builder.append("")
    return builder


def describe_all_parameters(context: Context, names=None) -> str:
    builder = []
    for category, parameter_names in context.category_map.items():
        selected = [name for name in parameter_names if names is None or name in names]
        if not selected:
            continue
        builder.append("# ######################################################")
        builder.append(f"# ## {category:^48} ##")
        builder.append("# ######################################################")
        builder.append("")
        builder.extend(
            chain.from_iterable(
                parameter_description_builder(name, context) for name in selected
            )
        )
        builder.append("")
    return "\n".join(builder)


def validate_provided_parameters(names, context: Context):
    from ..common.io import dashlist
    from ..exceptions import ArgumentError

    invalid = sorted(set(names) - set(context.list_parameters()))
    if invalid:
        raise ArgumentError(
            "Invalid configuration parameters: %(invalid)s",
            invalid=dashlist(invalid),
        )


def execute(args: Namespace, parser: ArgumentParser) -> int:
    from ..base.context import context
    from .common import stdout_json

    stdout_write = getLogger("shellenv.stdout").info

    if args.validate:
        context.validate_all()
        return 0

    if args.show_sources:
        if context.json:
            stdout_json({str(source): values for source, values in context.collect_all().items()})
        else:
            lines = []
            for source, values in context.collect_all().items():
                lines.append(f"==> {source} <==")
                lines.extend(format_dict(values))
                lines.append("")
            stdout_write("\n".join(lines))
        return 0

    if args.describe is not None:
        names = tuple(args.describe) or None
        if names:
            validate_provided_parameters(names, context)
        if context.json:
            stdout_json(
                [
                    context.describe_parameter(name)
                    for name in (names or context.list_parameters())
                ]
            )
        else:
            stdout_write(describe_all_parameters(context, names))
        return 0

    names = tuple(args.show or ()) or context.list_parameters()
    validate_provided_parameters(names, context)
    d = {key: getattr(context, key) for key in sorted(names)}
    if context.json:
        stdout_json(d)
    else:
        stdout_write("\n".join(format_dict(d)))
    return 0

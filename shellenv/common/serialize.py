# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""YAML and JSON serialization helpers."""

from __future__ import annotations

import json
from functools import cache
from io import StringIO
from logging import getLogger

import ruamel.yaml as yaml

log = getLogger(__name__)


@cache
def _yaml_round_trip():
    parser = yaml.YAML(typ="rt")
    parser.indent(mapping=2, offset=2, sequence=4)
    return parser


def yaml_round_trip_load(string):
    return _yaml_round_trip().load(string)


def yaml_round_trip_dump(object, stream=None):
    """Dump object to string or stream."""
    ostream = stream or StringIO()
    _yaml_round_trip().dump(object, ostream)
    if not stream:
        return ostream.getvalue()


def json_dump(object):
    return json.dumps(object, indent=2, sort_keys=True, separators=(",", ": "))

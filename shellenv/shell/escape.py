# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Quoting of values and variable names for each shell dialect.

An :class:`Escaper` only rewrites the characters its table names. When a value has none of
them, the very same string object is handed back, so the common case costs one scan.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from frozendict import frozendict

if TYPE_CHECKING:
    from collections.abc import Mapping


class Escaper:
    """Substitute escape sequences for the special characters of one quoting construct.

    Examples:
        >>> escaper = Escaper({"'": "\\\\'"})
        >>> escaper("it's")
        "it\\\\'s"
        >>> value = "plain"
        >>> escaper(value) is value
        True

    """

    def __init__(self, table: Mapping[str, str]):
        self.table = frozendict(table)

    def __repr__(self):
        return f"{self.__class__.__name__}({dict(self.table)!r})"

    def __call__(self, value: str) -> str:
        table = self.table
        for index, char in enumerate(value):
            if char in table:
                break
        else:
            return value

        escaped = [value[:index]]
        escaped.extend(table.get(char, char) for char in value[index:])
        return "".join(escaped)


# backslash escapes understood both by Python string literals and by bash/zsh $'...'
BACKSLASH_ESCAPES = frozendict(
    {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "\\n",
        "\r": "\\r",
    }
)

# fish single quotes only know \' and \; a newline is written as \n outside the quotes
FISH_ESCAPES = frozendict(
    {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "'\\n'",
    }
)

escape_backslashes = Escaper(BACKSLASH_ESCAPES)
escape_fish = Escaper(FISH_ESCAPES)


def quote_python(value: str) -> str:
    return "'" + escape_backslashes(value) + "'"


def quote_ansi_c(value: str) -> str:
    return "$'" + escape_backslashes(value) + "'"


def quote_fish(value: str) -> str:
    return "'" + escape_fish(value) + "'"


_SAFE_WORD = re.compile(r"[A-Za-z0-9_=/,.+-]+")


def escape_identifier(key: str) -> str:
    """Render a variable name as a single POSIX shell word.

    Names that are already a plain word come back unchanged. Anything else is single-quoted.
    Characters that would not make a valid variable name are escaped rather than dropped, so
    the shell reports the bad name instead of silently touching a different variable.

    Examples:
        >>> escape_identifier("PATH")
        'PATH'
        >>> escape_identifier("it's")
        "'it'\\\\''s'"

    """
    if _SAFE_WORD.fullmatch(key):
        return key
    return "'" + key.replace("'", "'\\''").replace("!", "'\\!'") + "'"

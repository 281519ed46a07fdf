# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Coerce configuration values, usually text, into the type a parameter declares."""

from ..common.compat import NoneType

__all__ = ("TypeCoercionError", "boolify", "typify")

BOOLISH_TRUE = frozenset(("true", "yes", "on", "y", "1"))
BOOLISH_FALSE = frozenset(("false", "no", "off", "n", "0", ""))
NULL_STRINGS = frozenset(("none", "null", "~", ""))


class TypeCoercionError(ValueError):
    def __init__(self, value, msg):
        self.value = value
        super().__init__(msg)


def boolify(value):
    """Convert a number or one of the usual yes/no spellings into a bool.

    Examples:
        >>> [boolify(x) for x in ('yes', 'Off', ' TRUE ', 1, 0.0, '')]
        [True, False, True, True, False, False]

    """
    if isinstance(value, (bool, int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in BOOLISH_TRUE:
        return True
    if text in BOOLISH_FALSE:
        return False
    raise TypeCoercionError(value, f"The value {value!r} cannot be boolified.")


def typify(value, type_hint):
    """Coerce ``value`` to ``type_hint``, a type or a tuple of types.

    A ``str`` hint keeps text exactly as given, surrounding whitespace included. With
    ``NoneType`` among the hints, ``None`` and the null spellings ("null", "none", "~" and the
    empty string) give ``None``.

    Examples:
        >>> typify(' 2.5 ', float)
        2.5
        >>> typify('4', int)
        4
        >>> typify(' fish ', str)
        ' fish '
        >>> typify('Null', (str, NoneType)) is None
        True

    """
    hints = type_hint if isinstance(type_hint, tuple) else (type_hint,)
    if NoneType in hints:
        if value is None or (
            isinstance(value, str) and value.strip().lower() in NULL_STRINGS
        ):
            return None
        hints = tuple(hint for hint in hints if hint is not NoneType)
    if value is None:
        raise TypeCoercionError(value, "A value is required.")
    if len(hints) != 1:
        raise TypeCoercionError(
            value, f"Cannot coerce {value!r} to one of {type_hint!r}."
        )

    (hint,) = hints
    if hint is bool:
        return boolify(value)
    if hint is str:
        return value if isinstance(value, str) else str(value)
    if isinstance(value, str):
        value = value.strip()
    try:
        return hint(value)
    except (TypeError, ValueError) as err:
        raise TypeCoercionError(value, str(err))

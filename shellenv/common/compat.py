# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Platform flags and small type helpers shared across the package.

Imported almost everywhere, so module level imports stay within the standard library.
"""

import sys

on_win = sys.platform == "win32"

NoneType = type(None)
#: values a single configuration parameter may hold
primitive_types = (str, int, float, complex, bool, NoneType)


def ensure_text_type(value) -> str:
    """Decode bytes from the command line, guessing the encoding when it is not UTF-8."""
    if isinstance(value, str):
        return value
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError:
        from charset_normalizer import from_bytes

        return str(from_bytes(value).best())

# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Common constants."""

# Logging level for the most verbose output, below logging.DEBUG
TRACE = 5


class _Null:
    """
    Examples:
        >>> len(_Null())
        0
        >>> bool(_Null())
        False
    """

    def __bool__(self):
        return False

    def __len__(self):
        return 0

    def __repr__(self):
        return "NULL"


# Use this NULL object when needing to distinguish a value from None
# For example, when reading argparse results, an option left at its default is NULL
#   while an option explicitly given as None is a real value.
NULL = _Null()

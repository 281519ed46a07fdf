# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Custom argparse actions."""

from argparse import _CountAction

from ..common.constants import NULL


class NullCountAction(_CountAction):
    """Count repeated flags, starting from the NULL default instead of a number.

    Without any ``-v`` the namespace keeps NULL and the configured verbosity applies.
    """

    def __call__(self, parser, namespace, values, option_string=None):
        count = getattr(namespace, self.dest, NULL)
        setattr(namespace, self.dest, 1 if count in (NULL, None) else count + 1)

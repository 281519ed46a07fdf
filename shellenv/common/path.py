# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Common path utilities."""

from __future__ import annotations

import os
from os.path import abspath, expanduser, expandvars, normcase
from typing import TYPE_CHECKING

from .compat import on_win

if TYPE_CHECKING:
    from typing import Union

    PathType = Union[str, os.PathLike[str]]


def expand(path):
    return abspath(expanduser(expandvars(path)))


def paths_equal(path1, path2):
    """
    Examples:
        >>> paths_equal('/a/b/c', '/a/b/c/d/..')
        True

    """
    if on_win:
        return normcase(abspath(path1)) == normcase(abspath(path2))
    else:
        return abspath(path1) == abspath(path2)


def split_path_list(value: str, pathsep: str = os.pathsep) -> tuple[str, ...]:
    """Split a PATH-like value into its ordered segments.

    Empty segments are kept (a POSIX shell reads them as the current directory), so joining
    the result with ``pathsep`` gives back ``value`` exactly.

    Examples:
        >>> split_path_list("/a::/b:", ":")
        ('/a', '', '/b', '')
        >>> split_path_list("", ":")
        ('',)

    """
    return tuple(value.split(pathsep))


def is_dir_in_path(directory: PathType, path: str | None = None) -> bool:
    """Whether ``directory`` is one of the entries of ``path`` (default ``$PATH``)."""
    if path is None:
        path = os.getenv("PATH", "")
    # only explicit entries count; an empty segment is not taken to name ``directory``
    return any(entry and paths_equal(directory, entry) for entry in split_path_list(path))

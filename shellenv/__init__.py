# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""Shell integration that keeps an interactive session's environment in sync."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

__all__ = (
    "__version__",
    "ShellEnvError",
    "ShellEnvMultiError",
)

__name__ = "shellenv"
__version__ = "0.1.0"
__author__ = "Anaconda, Inc."
__email__ = "conda@continuum.io"
__license__ = "BSD-3-Clause"
__summary__ = __doc__


class ShellEnvError(Exception):
    """Base class of the errors shellenv reports to the user instead of a traceback.

    ``message`` is a %-format string filled from the keyword arguments, which are also kept
    for the json rendering of the error.
    """

    #: exit status of the ``shellenv`` command when this error ends it
    return_code: int = 1

    def __init__(self, message: str | None, caused_by: Any = None, **kwargs):
        self.message = message or ""
        self.caused_by = caused_by
        self._kwargs = kwargs
        super().__init__(message)

    def __str__(self) -> str:
        return self.message % self._kwargs if self._kwargs else self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}: {self}"

    def dump_map(self) -> dict[str, Any]:
        return {
            **self._kwargs,
            "exception_name": self.__class__.__name__,
            "exception_type": str(type(self)),
            "message": str(self),
            "error": repr(self),
            "caused_by": repr(self.caused_by),
        }


class ShellEnvMultiError(ShellEnvError):
    """Several errors found in one pass, reported together."""

    def __init__(self, errors: Iterable[Exception]):
        self.errors = tuple(errors)
        super().__init__(None)

    def __str__(self) -> str:
        return "".join(f"{error}\n" for error in self.errors)

    def __repr__(self) -> str:
        # plain OSErrors read better without the class name prefix
        return "\n".join(
            repr(error) if isinstance(error, ShellEnvError) else str(error)
            for error in self.errors
        )

    def dump_map(self) -> dict[str, Any]:
        return {
            "exception_name": self.__class__.__name__,
            "exception_type": str(type(self)),
            "error": "Multiple Errors Encountered.",
            "errors": tuple(
                error.dump_map() if isinstance(error, ShellEnvError) else repr(error)
                for error in self.errors
            ),
        }

# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
"""
Layered configuration of single-valued parameters.

Values are read from three kinds of sources, in increasing order of precedence:
  - YAML rc files on a search path, each a flat map of parameter names to values
  - environment variables named ``<APP_NAME>_<PARAMETER>``
  - parsed command line arguments

A ``Configuration`` subclass declares its parameters as ``Parameter`` class attributes. Reading
one finds the key (or one of its aliases) in every source, keeps the value of the last source
that sets it, coerces that value to the declared type and validates it. Results are cached until
a source is replaced.
"""

from __future__ import annotations

from collections.abc import Mapping
from itertools import chain
from logging import getLogger
from os import environ
from os.path import expandvars, isfile
from typing import TYPE_CHECKING

from boltons.setutils import IndexedSet
from ruamel.yaml.error import MarkedYAMLError
from ruamel.yaml.reader import ReaderError

from .. import ShellEnvError, ShellEnvMultiError
from ..auxlib.type_coercion import TypeCoercionError, typify
from .compat import primitive_types
from .constants import NULL
from .path import expand
from .serialize import yaml_round_trip_load

if TYPE_CHECKING:
    from argparse import Namespace
    from collections.abc import Callable, Iterable, Sequence
    from typing import Any

    RawData = dict[str, dict[str, Any]]

log = getLogger(__name__)

DEFAULT_SOURCE = "default"
ENV_SOURCE = "envvars"
ARGS_SOURCE = "cmd_line"


def pretty_list(items, padding="  "):
    return "\n".join(f"{padding}- {item}" for item in items)


class ConfigurationError(ShellEnvError):
    pass


class ConfigurationLoadError(ConfigurationError):
    def __init__(self, path, reason, **kwargs):
        message = "Unable to load configuration file.\n  path: %(path)s\n  reason: "
        super().__init__(message + reason, path=path, **kwargs)


class ValidationError(ConfigurationError):
    def __init__(self, parameter_name, parameter_value, source, msg=None, **kwargs):
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value
        self.source = source
        if msg is None:
            msg = (
                f"Parameter {parameter_name} = {parameter_value!r} declared in {source} "
                "is invalid."
            )
        super().__init__(msg, **kwargs)


class MultipleKeysError(ValidationError):
    def __init__(self, source, keys, preferred_key):
        self.keys = keys
        msg = (
            f"Multiple aliased keys in {source}:\n{pretty_list(keys)}\n"
            f"Must declare only one. Prefer '{preferred_key}'"
        )
        super().__init__(preferred_key, None, source, msg=msg)


class InvalidTypeError(ValidationError):
    def __init__(self, parameter_name, parameter_value, source, valid_types):
        self.valid_types = valid_types
        msg = (
            f"Parameter {parameter_name} = {parameter_value!r} declared in {source} "
            f"has type {type(parameter_value).__name__}.\n"
            f"Valid types:\n{pretty_list(valid_types)}"
        )
        super().__init__(parameter_name, parameter_value, source, msg=msg)


class InvalidValueError(ValidationError):
    def __init__(self, parameter_name, parameter_value, source, reason):
        msg = (
            f"Parameter {parameter_name} = {parameter_value!r} declared in {source} "
            f"is invalid.\n{reason}"
        )
        super().__init__(parameter_name, parameter_value, source, msg=msg)


class MultiValidationError(ShellEnvMultiError, ConfigurationError):
    pass


def raise_errors(errors: Sequence[Exception]) -> None:
    if len(errors) == 1:
        raise errors[0]
    elif errors:
        raise MultiValidationError(errors)


def load_file(path: str) -> dict[str, Any]:
    """Read one rc file into a map of parameter names to single values."""
    with open(path) as fh:
        try:
            data = yaml_round_trip_load(fh)
        except MarkedYAMLError as err:
            mark = err.problem_mark or err.context_mark
            raise ConfigurationLoadError(
                path,
                "invalid yaml at line %(line)s, column %(column)s",
                line=mark.line + 1 if mark else "?",
                column=mark.column + 1 if mark else "?",
            )
        except ReaderError as err:
            raise ConfigurationLoadError(
                path, "invalid yaml at position %(position)s", position=err.position
            )
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationLoadError(path, "top level of the file must be a map")
    for key, value in data.items():
        if not isinstance(value, primitive_types):
            raise ConfigurationLoadError(
                path, "parameter '%(key)s' only accepts a single value", key=key
            )
    return dict(data)


def load_file_configs(search_path: Iterable[str]) -> RawData:
    """Load every existing file on ``search_path``, keyed by expanded path, in order."""
    raw_data = {path: load_file(path) for path in search_path if isfile(path)}
    log.debug("loaded configuration files: %s", tuple(raw_data))
    return raw_data


class Parameter:
    """A single-valued configuration parameter, read as an attribute of a Configuration.

    Args:
        default: value used when no source sets the parameter
        element_type (type or tuple[type]): accepted type(s); ``type(default)`` when None
        aliases (tuple[str]): other keys the parameter may be set under
        validation (callable): given the typed value, return False or a message when it
            is not acceptable
        expandvars (bool): expand ``$VARIABLES`` in text values before coercion
    """

    def __init__(
        self,
        default: Any,
        element_type: type | tuple[type, ...] | None = None,
        aliases: Iterable[str] = (),
        validation: Callable[[Any], bool | str] | None = None,
        expandvars: bool = False,
    ):
        self.default = default
        self.element_type = type(default) if element_type is None else element_type
        self.aliases = tuple(aliases)
        self._validation = validation
        self._expandvars = expandvars
        self.name = None
        self.names = frozenset()

    def _set_name(self, name: str) -> str:
        # called by the Configuration metaclass
        self.name = name
        self.names = frozenset((name, *self.aliases))
        return name

    @property
    def public_name(self) -> str:
        return self.name.lstrip("_")

    @property
    def element_types(self) -> tuple[type, ...]:
        if isinstance(self.element_type, tuple):
            return self.element_type
        return (self.element_type,)

    def __get__(self, instance, owner):
        if instance is None:
            return self
        if self.name in instance._cache_:
            return instance._cache_[self.name]

        source, value = DEFAULT_SOURCE, self.default
        errors = []
        for candidate, raw_parameters in instance.raw_data.items():
            key, error = self.find_key(candidate, raw_parameters)
            if error:
                errors.append(error)
            if key is not None:
                source, value = candidate, raw_parameters[key]

        try:
            result = self.coerce(value, source)
        except ValidationError as err:
            errors.append(err)
        else:
            errors.extend(self.collect_errors(result, source))
        raise_errors(errors)
        instance._cache_[self.name] = result
        return result

    def find_key(
        self, source: str, raw_parameters: Mapping[str, Any]
    ) -> tuple[str | None, MultipleKeysError | None]:
        """The key setting this parameter in one source, and an error if several do."""
        keys = sorted(self.names.intersection(raw_parameters))
        if len(keys) <= 1:
            return (keys[0] if keys else None), None
        preferred = self.public_name
        error = MultipleKeysError(source, keys, preferred)
        return (preferred if preferred in keys else None), error

    def coerce(self, value: Any, source: str) -> Any:
        if self._expandvars and isinstance(value, str):
            value = expandvars(value)
        try:
            return typify(value, self.element_type)
        except TypeCoercionError as err:
            raise InvalidValueError(self.public_name, err.value, source, str(err))

    def collect_errors(self, value: Any, source: str) -> list[ValidationError]:
        if not isinstance(value, self.element_type):
            return [
                InvalidTypeError(
                    self.public_name,
                    value,
                    source,
                    [valid.__name__ for valid in self.element_types],
                )
            ]
        result = True if self._validation is None else self._validation(value)
        if result is False:
            return [ValidationError(self.public_name, value, source)]
        if isinstance(result, str):
            return [InvalidValueError(self.public_name, value, source, result)]
        return []


class ConfigurationType(type):
    """metaclass for Configuration"""

    def __init__(cls, name, bases, attr):
        super().__init__(name, bases, attr)

        # call _set_name for each parameter
        cls.parameter_names = tuple(
            p._set_name(name)
            for name, p in cls.__dict__.items()
            if isinstance(p, Parameter)
        )


class Configuration(metaclass=ConfigurationType):
    def __init__(
        self,
        search_path: Iterable[str] = (),
        app_name: str | None = None,
        argparse_args: Namespace | Mapping[str, Any] | None = None,
    ):
        # every construction rereads all sources from disk and the environment
        self.raw_data: RawData = {}
        self._cache_ = {}
        self._set_search_path(search_path)
        self._set_env_vars(app_name)
        self._set_argparse_args(argparse_args)

    def _set_source(self, source: str, raw_parameters: dict[str, Any]) -> None:
        # re-inserting moves the source to the end, above everything loaded before it
        self.raw_data.pop(source, None)
        self.raw_data[source] = raw_parameters
        self._cache_ = {}

    def _set_search_path(self, search_path: Iterable[str]):
        self._search_path = IndexedSet(expand(path) for path in search_path)
        for source, raw_parameters in load_file_configs(self._search_path).items():
            self._set_source(source, raw_parameters)
        return self

    def _set_env_vars(self, app_name: str | None = None):
        self._app_name = app_name
        if app_name:
            prefix = f"{app_name.upper()}_"
            self._set_source(
                ENV_SOURCE,
                {
                    key[len(prefix) :].lower(): value
                    for key, value in environ.items()
                    if key.startswith(prefix)
                },
            )
        return self

    def _set_argparse_args(self, argparse_args):
        if argparse_args is None:
            items = ()
        elif isinstance(argparse_args, Mapping):
            items = argparse_args.items()
        else:
            items = vars(argparse_args).items()
        # options left at their NULL or None default do not shadow other sources
        self._argparse_args = {
            key: value
            for key, value in items
            if value is not NULL and value is not None
        }
        self._set_source(ARGS_SOURCE, self._argparse_args)
        return self

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return tuple(getattr(type(self), name) for name in self.parameter_names)

    def check_source(self, source: str) -> tuple[dict[str, Any], list[ValidationError]]:
        """Typed values and validation errors of a single source, on its own."""
        typed_values = {}
        errors = []
        raw_parameters = self.raw_data[source]
        for parameter in self.parameters:
            key, error = parameter.find_key(source, raw_parameters)
            if error:
                errors.append(error)
            if key is None:
                continue
            try:
                value = parameter.coerce(raw_parameters[key], source)
            except ValidationError as err:
                errors.append(err)
                continue
            value_errors = parameter.collect_errors(value, source)
            if value_errors:
                errors.extend(value_errors)
            else:
                typed_values[key] = value
        return typed_values, errors

    def validate_all(self) -> None:
        raise_errors(
            tuple(
                chain.from_iterable(
                    self.check_source(source)[1] for source in self.raw_data
                )
            )
        )
        self.validate_configuration()

    def validate_configuration(self) -> None:
        errors = []
        for name in self.parameter_names:
            try:
                getattr(self, name)
            except MultiValidationError as err:
                errors.extend(err.errors)
            except ConfigurationError as err:
                errors.append(err)
        errors.extend(self.post_build_validation())
        raise_errors(errors)

    def post_build_validation(self) -> Sequence[ValidationError]:
        return ()

    def collect_all(self) -> dict[str, dict[str, Any]]:
        """Typed values by source, for the sources that set anything."""
        typed_values = {}
        errors = []
        for source in self.raw_data:
            typed_values[source], source_errors = self.check_source(source)
            errors.extend(source_errors)
        raise_errors(errors)
        return {source: values for source, values in typed_values.items() if values}

    def list_parameters(self) -> tuple[str, ...]:
        return tuple(sorted(parameter.public_name for parameter in self.parameters))

    def describe_parameter(self, parameter_name: str) -> dict[str, Any]:
        (parameter,) = (p for p in self.parameters if p.public_name == parameter_name)
        return {
            "name": parameter.public_name,
            "aliases": tuple(
                alias for alias in parameter.aliases if alias != parameter.public_name
            ),
            "element_types": tuple(valid.__name__ for valid in parameter.element_types),
            "default_value": parameter.coerce(parameter.default, DEFAULT_SOURCE),
            "description": " ".join(
                self.get_descriptions().get(parameter.public_name, "").split()
            ),
        }

    def get_descriptions(self) -> Mapping[str, str]:
        raise NotImplementedError()


__all__ = (
    "Configuration",
    "ConfigurationError",
    "ConfigurationLoadError",
    "InvalidTypeError",
    "InvalidValueError",
    "MultiValidationError",
    "MultipleKeysError",
    "Parameter",
    "ValidationError",
    "load_file_configs",
    "raise_errors",
)

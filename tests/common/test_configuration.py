# Copyright (C) 2012 Anaconda, Inc
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

import pytest

from shellenv.auxlib.ish import dals
from shellenv.common.compat import NoneType
from shellenv.common.configuration import (
    Configuration,
    ConfigurationLoadError,
    InvalidValueError,
    MultipleKeysError,
    MultiValidationError,
    Parameter,
    ValidationError,
    load_file_configs,
)
from shellenv.common.constants import NULL

if TYPE_CHECKING:
    from pathlib import Path

    from pytest import MonkeyPatch

APP_NAME = "sampleapp"


class SampleConfiguration(Configuration):
    greeting = Parameter("hello")
    retries = Parameter(3, element_type=int, aliases=("attempts",))
    ratio = Parameter(
        0.5,
        element_type=float,
        validation=lambda value: value >= 0 or "ratio must not be negative",
    )
    quiet = Parameter(False)
    choice = Parameter(None, element_type=(str, NoneType))
    _home = Parameter("", aliases=("home",), expandvars=True)

    def get_descriptions(self):
        return {"retries": "How many\n  times to try.\n"}


def write_rc(path: Path, text: str) -> str:
    path.write_text(dals(text))
    return str(path)


def test_defaults():
    config = SampleConfiguration()
    assert config.greeting == "hello"
    assert config.retries == 3
    assert config.ratio == 0.5
    assert config.quiet is False
    assert config.choice is None
    assert config._home == ""


def test_load_from_file(tmp_path: Path):
    rc = write_rc(
        tmp_path / "shellenvrc",
        """
        greeting: hi there
        attempts: 5
        quiet: true
        choice: fish
        """,
    )
    config = SampleConfiguration(search_path=(rc,))
    assert config.greeting == "hi there"
    assert config.retries == 5
    assert config.quiet is True
    assert config.choice == "fish"


def test_missing_files_are_skipped(tmp_path: Path):
    assert load_file_configs((str(tmp_path / "nope.yml"),)) == {}
    config = SampleConfiguration(search_path=(str(tmp_path / "shellenvrc"),))
    assert config.greeting == "hello"


def test_later_file_wins(tmp_path: Path):
    first = write_rc(tmp_path / "first.yml", "greeting: first\n")
    second = write_rc(tmp_path / "second.yml", "greeting: second\n")
    assert SampleConfiguration(search_path=(first, second)).greeting == "second"
    assert SampleConfiguration(search_path=(second, first)).greeting == "first"


def test_environment_overrides_files(tmp_path: Path, monkeypatch: MonkeyPatch):
    rc = write_rc(
        tmp_path / "shellenvrc",
        """
        greeting: from file
        retries: 5
        """,
    )
    monkeypatch.setenv("SAMPLEAPP_GREETING", "from env")
    monkeypatch.setenv("SAMPLEAPP_RATIO", "0.25")
    monkeypatch.setenv("SAMPLEAPP_QUIET", "yes")

    config = SampleConfiguration(search_path=(rc,), app_name=APP_NAME)
    assert config.greeting == "from env"
    assert config.retries == 5
    assert config.ratio == 0.25
    assert config.quiet is True


def test_environment_without_app_name_is_ignored(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLEAPP_GREETING", "from env")
    assert SampleConfiguration().greeting == "hello"


def test_arguments_override_environment(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLEAPP_GREETING", "from env")
    monkeypatch.setenv("SAMPLEAPP_RETRIES", "7")

    config = SampleConfiguration(
        app_name=APP_NAME,
        argparse_args={"greeting": "from args", "retries": None, "choice": None},
    )
    assert config.greeting == "from args"
    # unset arguments do not shadow other sources
    assert config.retries == 7
    assert config.choice is None


def test_nullable_parameter(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLEAPP_CHOICE", "null")
    assert SampleConfiguration(app_name=APP_NAME).choice is None


def test_expandvars(tmp_path: Path, monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLE_HOME", "/home/sample")
    rc = write_rc(tmp_path / "shellenvrc", "home: $SAMPLE_HOME/tools\n")
    assert SampleConfiguration(search_path=(rc,))._home == "/home/sample/tools"


def test_invalid_type(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLEAPP_RETRIES", "many")
    config = SampleConfiguration(app_name=APP_NAME)
    with pytest.raises(InvalidValueError) as exc:
        config.retries
    assert exc.value.parameter_name == "retries"


def test_custom_validation(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLEAPP_RATIO", "-1")
    config = SampleConfiguration(app_name=APP_NAME)
    with pytest.raises(InvalidValueError) as exc:
        config.ratio
    assert "ratio must not be negative" in str(exc.value)
    with pytest.raises(InvalidValueError):
        config.validate_all()


def test_single_value_only(tmp_path: Path):
    rc = write_rc(
        tmp_path / "shellenvrc",
        """
        greeting:
          - one
          - two
        """,
    )
    with pytest.raises(ConfigurationLoadError) as exc:
        SampleConfiguration(search_path=(rc,))
    assert "only accepts a single value" in str(exc.value)


def test_top_level_must_be_a_map(tmp_path: Path):
    rc = write_rc(tmp_path / "shellenvrc", "- one\n- two\n")
    with pytest.raises(ConfigurationLoadError) as exc:
        SampleConfiguration(search_path=(rc,))
    assert "top level of the file must be a map" in str(exc.value)


def test_invalid_yaml(tmp_path: Path):
    rc = write_rc(tmp_path / "shellenvrc", "greeting: 'unterminated\n")
    with pytest.raises(ConfigurationLoadError) as exc:
        SampleConfiguration(search_path=(rc,))
    assert "invalid yaml" in str(exc.value)


def test_empty_file(tmp_path: Path):
    rc = write_rc(tmp_path / "shellenvrc", "")
    assert SampleConfiguration(search_path=(rc,)).greeting == "hello"


def test_multiple_aliased_keys(tmp_path: Path):
    rc = write_rc(
        tmp_path / "shellenvrc",
        """
        retries: 1
        attempts: 2
        """,
    )
    config = SampleConfiguration(search_path=(rc,))
    with pytest.raises(MultipleKeysError) as exc:
        config.retries
    assert "Prefer 'retries'" in str(exc.value)


def test_collect_all(tmp_path: Path, monkeypatch: MonkeyPatch):
    rc = write_rc(tmp_path / "shellenvrc", "greeting: hi\n")
    monkeypatch.setenv("SAMPLEAPP_RETRIES", "4")
    config = SampleConfiguration(search_path=(rc,), app_name=APP_NAME)
    assert config.collect_all() == {
        rc: {"greeting": "hi"},
        "envvars": {"retries": 4},
    }


def test_describe_parameter():
    config = SampleConfiguration()
    assert config.list_parameters() == (
        "choice",
        "greeting",
        "home",
        "quiet",
        "ratio",
        "retries",
    )
    assert config.describe_parameter("retries") == {
        "name": "retries",
        "aliases": ("attempts",),
        "element_types": ("int",),
        "default_value": 3,
        "description": "How many times to try.",
    }
    assert config.describe_parameter("home") == {
        "name": "home",
        "aliases": (),
        "element_types": ("str",),
        "default_value": "",
        "description": "",
    }
    assert config.describe_parameter("choice")["element_types"] == ("str", "NoneType")


def test_argparse_namespace_skips_unset_options(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLEAPP_RETRIES", "7")
    monkeypatch.setenv("SAMPLEAPP_QUIET", "true")
    config = SampleConfiguration(
        app_name=APP_NAME,
        argparse_args=Namespace(retries=NULL, quiet=None, greeting="from args", cmd="x"),
    )
    assert config.retries == 7
    assert config.quiet is True
    assert config.greeting == "from args"


def test_replaced_source_moves_above_the_others(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLEAPP_GREETING", "from env")
    config = SampleConfiguration(argparse_args={"greeting": "from args"})
    assert config.greeting == "from args"

    config._set_env_vars(APP_NAME)
    assert config.greeting == "from env"

    config._set_argparse_args({"greeting": "again"})
    assert config.greeting == "again"
    assert list(config.raw_data) == ["envvars", "cmd_line"]


def test_text_values_keep_whitespace(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLEAPP_GREETING", "  padded ")
    monkeypatch.setenv("SAMPLEAPP_RETRIES", " 5 ")
    config = SampleConfiguration(app_name=APP_NAME)
    assert config.greeting == "  padded "
    assert config.retries == 5


def test_duplicate_search_path_entries_load_once(
    tmp_path: Path, monkeypatch: MonkeyPatch
):
    rc = write_rc(tmp_path / "shellenvrc", "greeting: once\n")
    monkeypatch.setenv("SAMPLE_RC_DIR", str(tmp_path))
    config = SampleConfiguration(search_path=(rc, "$SAMPLE_RC_DIR/shellenvrc"))
    assert list(config.raw_data) == [rc, "cmd_line"]
    assert config.greeting == "once"


def test_alias_alone_sets_parameter(tmp_path: Path):
    rc = write_rc(
        tmp_path / "shellenvrc",
        """
        attempts: 2
        """,
    )
    assert SampleConfiguration(search_path=(rc,)).retries == 2


def test_invalid_yaml_reports_position(tmp_path: Path):
    rc = write_rc(tmp_path / "shellenvrc", "greeting: hi\nquiet: 'open\n")
    with pytest.raises(ConfigurationLoadError) as exc:
        SampleConfiguration(search_path=(rc,))
    assert f"path: {rc}" in str(exc.value)
    assert "invalid yaml at line" in str(exc.value)


def test_validate_configuration_collects_every_error(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("SAMPLEAPP_RETRIES", "many")
    monkeypatch.setenv("SAMPLEAPP_RATIO", "-1")
    config = SampleConfiguration(app_name=APP_NAME)
    with pytest.raises(MultiValidationError) as exc:
        config.validate_configuration()
    assert sorted(error.parameter_name for error in exc.value.errors) == [
        "ratio",
        "retries",
    ]
    assert all(isinstance(error, ValidationError) for error in exc.value.errors)


def test_check_source(tmp_path: Path):
    rc = write_rc(
        tmp_path / "shellenvrc",
        """
        greeting: hi
        retries: lots
        unknown: ignored
        """,
    )
    config = SampleConfiguration(search_path=(rc,))
    typed_values, errors = config.check_source(rc)
    assert typed_values == {"greeting": "hi"}
    (error,) = errors
    assert isinstance(error, InvalidValueError)
    assert error.source == rc

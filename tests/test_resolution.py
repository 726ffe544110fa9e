"""Debug/location resolution and env-variable naming."""
from __future__ import annotations

import logging

import pytest

from config_station.domain.services.resolution import (
    NO_PATH_MESSAGE,
    debug_variable,
    field_pattern,
    file_variable,
    resolve_attributes,
    validate_env_key,
)


def test_derived_variable_names():
    assert debug_variable("MYAPP") == "DEBUG_MYAPP"
    assert file_variable("MYAPP") == "FILE_MYAPP"
    assert field_pattern("MYAPP").match("MYAPP_WWW_PORT").group(1) == "WWW_PORT"
    assert field_pattern("MYAPP").match("MYAPP_") is None
    assert field_pattern("MYAPP").match("myapp_PORT") is None


def test_env_key_must_be_non_empty():
    with pytest.raises(ValueError):
        validate_env_key("")
    with pytest.raises(ValueError):
        validate_env_key(None)


def test_debug_env_wins_over_explicit_value():
    attrs = resolve_attributes("APP", {"DEBUG_APP": "1"}, debug=False, location="x.json")
    assert attrs.debug == "1"
    assert attrs.tracing_enabled


def test_empty_debug_env_still_overrides_explicit_value():
    attrs = resolve_attributes("APP", {"DEBUG_APP": ""}, debug=True, location="x.json")
    assert attrs.debug == ""
    assert not attrs.tracing_enabled


def test_explicit_values_used_without_env():
    attrs = resolve_attributes("APP", {}, debug=True, location="x.json")
    assert attrs.debug is True
    assert attrs.location == "x.json"


def test_file_env_overrides_location_only_when_non_empty():
    assert resolve_attributes("APP", {"FILE_APP": "env.json"}, location="x.json").location == "env.json"
    assert resolve_attributes("APP", {"FILE_APP": ""}, location="x.json").location == "x.json"
    assert resolve_attributes("APP", {}).location == ""


def test_missing_path_warns_only_when_debugging(caplog):
    caplog.set_level(logging.WARNING, logger="config_station.trace")
    resolve_attributes("APP", {})
    assert NO_PATH_MESSAGE not in caplog.text

    resolve_attributes("APP", {}, debug=True)
    assert NO_PATH_MESSAGE in caplog.text

"""File and environment readers."""
from __future__ import annotations

import logging

import pytest

from config_station.infrastructure.readers.env_reader import EnvConfigReader
from config_station.infrastructure.readers.file_reader import FileConfigReader


def test_file_reader_loads_json_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"Name": "herp", "port": 8080}', encoding="utf-8")

    result = FileConfigReader(str(path)).read()
    assert not result.failed
    assert result.values == {"Name": "herp", "port": 8080}


def test_file_reader_without_location_is_empty():
    result = FileConfigReader(None).read()
    assert result.values == {}
    assert result.error is None


@pytest.mark.parametrize(
    "content",
    ['{"name": ', "[1, 2, 3]", '"just a string"', ""],
)
def test_file_reader_absorbs_bad_content(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")

    result = FileConfigReader(path).read()
    assert result.values == {}
    assert result.failed


def test_file_reader_absorbs_missing_and_undecodable_files(tmp_path):
    missing = FileConfigReader(tmp_path / "nope.json").read()
    assert missing.values == {} and "FileNotFoundError" in missing.error

    binary = tmp_path / "binary.json"
    binary.write_bytes(b"\xff\xfe\x00")
    assert FileConfigReader(binary).read().failed

    assert FileConfigReader(tmp_path).read().failed


def test_env_reader_lowercases_fields_and_keeps_values():
    env = {
        "APP_NAME": "wins",
        "APP_Www_Port": "8080",
        "APPLE_PIE": "no",
        "app_lower": "no",
        "DEBUG_APP": "1",
        "FILE_APP": "x.json",
        "OTHER": "no",
    }
    assert EnvConfigReader("APP").read(env) == {"name": "wins", "www_port": "8080"}


def test_env_reader_escapes_prefix():
    env = {"A.B_X": "1", "AxB_Y": "2"}
    assert EnvConfigReader("A.B").read(env) == {"x": "1"}


def test_env_reader_collision_is_deterministic(caplog):
    caplog.set_level(logging.WARNING)
    env = {"APP_name": "lower", "APP_NAME": "upper", "APP_Name": "title"}

    assert EnvConfigReader("APP").read(env) == {"name": "lower"}
    assert EnvConfigReader("APP").read(dict(reversed(list(env.items())))) == {"name": "lower"}
    assert "APP_NAME, APP_Name, APP_name" in caplog.text


def test_file_reader_absorbs_too_deeply_nested_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"a": ' + "[" * 100000 + "]" * 100000 + "}", encoding="utf-8")

    result = FileConfigReader(path).read()
    assert result.values == {}
    assert result.error.startswith("RecursionError")

"""Tests for configuration resolution."""

import json

import pytest

from prompter_lib.config import get_handle_retries, load_prompter_config, parse_bool


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PROMPTER_HANDLE_RETRIES", raising=False)


def write_config(path, data):
    path.write_text(json.dumps(data))
    return path


def test_missing_config_file(tmp_path):
    assert load_prompter_config(tmp_path / "missing.json") == {}


def test_unreadable_config_file(tmp_path):
    path = tmp_path / "prompter.json"
    path.write_text("{not json")
    assert load_prompter_config(path) == {}


@pytest.mark.parametrize("value,expected", [
    ("1", True), ("YES", True), (" on ", True),
    ("0", False), ("false", False), ("Off", False),
    ("", None), ("maybe", None),
])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_default_is_true(tmp_path):
    assert get_handle_retries(config_file=tmp_path / "missing.json") is True


def test_config_file_setting(tmp_path):
    path = write_config(tmp_path / "prompter.json", {"prompter": {"handle_retries": False}})
    assert get_handle_retries(config_file=path) is False


def test_env_beats_config(tmp_path, monkeypatch):
    path = write_config(tmp_path / "prompter.json", {"prompter": {"handle_retries": False}})
    monkeypatch.setenv("PROMPTER_HANDLE_RETRIES", "yes")
    assert get_handle_retries(config_file=path) is True


def test_argument_beats_env(tmp_path, monkeypatch):
    monkeypatch.setenv("PROMPTER_HANDLE_RETRIES", "yes")
    assert get_handle_retries(False, config_file=tmp_path / "missing.json") is False


@pytest.mark.parametrize("section", [True, "off", ["handle_retries"], None])
def test_non_dict_section_falls_back_to_default(tmp_path, section):
    path = write_config(tmp_path / "prompter.json", {"prompter": section})
    assert get_handle_retries(config_file=path) is True

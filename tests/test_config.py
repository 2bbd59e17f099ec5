"""Tests for LoggerConfig and environment loading."""

import os

import pytest

from framelog.config import LoggerConfig
from framelog.errors import ConfigurationError
from framelog.sink.buffer import DEFAULT_BUFFER_CAPACITY
from framelog.sink.colors import LogColors
from framelog.sink.formatter import DEFAULT_TEMPLATE
from framelog.sink.model import Level
from framelog.utils.env import load_dotenv, parse_bool


def test_defaults():
    config = LoggerConfig.default()
    assert config.format_template == DEFAULT_TEMPLATE
    assert config.log_colors == LogColors.default()
    assert config.mirror_to_secondary_output is True
    assert config.buffer_capacity == DEFAULT_BUFFER_CAPACITY
    assert config.max_level is Level.DEBUG
    assert config.secondary_output is None


def test_chained_setters_return_new_configs():
    base = LoggerConfig.default()
    white = LogColors(*[(1, 1, 1, 1)] * 5)
    config = base.stdout(False).colors(white).template("{message}").capacity(3).level(Level.WARN)

    assert base.mirror_to_secondary_output is True
    assert config.mirror_to_secondary_output is False
    assert config.log_colors == white
    assert config.format_template == "{message}"
    assert config.buffer_capacity == 3
    assert config.max_level is Level.WARN


def test_config_is_frozen():
    config = LoggerConfig()
    with pytest.raises(AttributeError):
        config.buffer_capacity = 5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"buffer_capacity": 0},
        {"buffer_capacity": "100"},
        {"format_template": None},
        {"log_colors": {"info": (1, 1, 1, 1)}},
        {"max_level": 99},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        LoggerConfig(**kwargs)


def test_from_env_overrides():
    env = {
        "FRAMELOG_STDOUT": "no",
        "FRAMELOG_BUFFER_CAPACITY": " 64 ",
        "FRAMELOG_FORMAT": "{level} {message}",
        "FRAMELOG_LEVEL": "warning",
    }
    config = LoggerConfig.from_env(env)
    assert config.mirror_to_secondary_output is False
    assert config.buffer_capacity == 64
    assert config.format_template == "{level} {message}"
    assert config.max_level is Level.WARN


def test_from_env_empty_is_default():
    assert LoggerConfig.from_env({}) == LoggerConfig.default()


@pytest.mark.parametrize(
    "env",
    [
        {"FRAMELOG_STDOUT": "maybe"},
        {"FRAMELOG_BUFFER_CAPACITY": "lots"},
        {"FRAMELOG_BUFFER_CAPACITY": "0"},
        {"FRAMELOG_LEVEL": "loud"},
    ],
)
def test_from_env_bad_values(env):
    with pytest.raises(ConfigurationError):
        LoggerConfig.from_env(env)


@pytest.mark.parametrize("text, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("Off", False)])
def test_parse_bool(text, expected):
    assert parse_bool(text, "X") is expected


def test_load_dotenv(tmp_path):
    path = tmp_path / ".env"
    path.write_text(
        "# comment\n"
        "\n"
        "FRAMELOG_STDOUT=0\n"
        "FRAMELOG_FORMAT={level}={message}\n"
        "not an assignment\n"
        "EXISTING=from-file\n",
        encoding="utf-8",
    )
    environ = {"EXISTING": "from-shell"}
    assert load_dotenv(path, environ) == 3
    assert environ == {
        "FRAMELOG_STDOUT": "0",
        "FRAMELOG_FORMAT": "{level}={message}",
        "EXISTING": "from-shell",
    }


def test_load_dotenv_missing_file(tmp_path):
    assert load_dotenv(tmp_path / "absent.env", {}) == 0


def test_load_dotenv_defaults_to_os_environ(tmp_path, monkeypatch):
    monkeypatch.delenv("FRAMELOG_TEST_VALUE", raising=False)
    path = tmp_path / ".env"
    path.write_text("FRAMELOG_TEST_VALUE=42\n", encoding="utf-8")
    load_dotenv(path)
    assert os.environ["FRAMELOG_TEST_VALUE"] == "42"
    monkeypatch.delenv("FRAMELOG_TEST_VALUE")

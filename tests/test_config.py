"""Tests for settings and the user .env file."""

import sys

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file, read_user_env_vars, write_user_env_vars


def test_defaults():
    settings = AppSettings()

    assert settings.default_length == 16
    assert settings.default_mode == "ulnse"
    assert settings.default_extra == ""
    assert settings.bar_width == 24
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TINYPW_DEFAULT_LENGTH", "32")
    monkeypatch.setenv("TINYPW_DEFAULT_MODE", "ln")
    monkeypatch.setenv("TINYPW_LOG_LEVEL", "debug")

    settings = AppSettings()

    assert settings.default_length == 32
    assert settings.default_mode == "ln"
    assert settings.log_level == "DEBUG"


def test_project_env_file_is_read(isolated_env):
    (isolated_env / ".env").write_text("TINYPW_BAR_WIDTH=10\n", encoding="utf-8")

    assert AppSettings().bar_width == 10


@pytest.mark.parametrize(("key", "value"), [("TINYPW_DEFAULT_LENGTH", "-1"), ("TINYPW_LOG_LEVEL", "loud")])
def test_invalid_values_are_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        AppSettings()


def test_user_config_dir_follows_xdg(monkeypatch, isolated_env):
    monkeypatch.setattr(sys, "platform", "linux")

    assert get_user_env_file() == isolated_env / "config" / "tinypw" / ".env"


def test_write_user_env_vars_merges_and_sorts():
    write_user_env_vars({"TINYPW_DEFAULT_MODE": "ul"})
    path = write_user_env_vars({"TINYPW_DEFAULT_LENGTH": "20"})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "# tinypw user config (.env)",
        "TINYPW_DEFAULT_LENGTH='20'",
        "TINYPW_DEFAULT_MODE='ul'",
    ]
    assert read_user_env_vars() == {"TINYPW_DEFAULT_LENGTH": "20", "TINYPW_DEFAULT_MODE": "ul"}


def test_user_env_file_is_resolved_per_instance():
    get_user_env_file().parent.mkdir(parents=True)
    get_user_env_file().write_text("TINYPW_DEFAULT_LENGTH=5\n", encoding="utf-8")

    assert AppSettings().default_length == 5


@pytest.mark.parametrize("extra", ['"\'', "~ #x", "#~", "ab'", "\\", " ~ ", "a\\'b"])
def test_saved_values_read_back_unchanged(extra):
    write_user_env_vars({"TINYPW_DEFAULT_EXTRA": extra})

    assert AppSettings().default_extra == extra
    assert read_user_env_vars() == {"TINYPW_DEFAULT_EXTRA": extra}


def test_unquoted_hand_written_values_are_still_read():
    get_user_env_file().parent.mkdir(parents=True)
    get_user_env_file().write_text('TINYPW_DEFAULT_MODE=ul\nTINYPW_DEFAULT_EXTRA="~"\n', encoding="utf-8")

    assert read_user_env_vars() == {"TINYPW_DEFAULT_MODE": "ul", "TINYPW_DEFAULT_EXTRA": "~"}

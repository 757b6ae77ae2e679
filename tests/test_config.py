"""Tests for environment-driven configuration."""

from multiprocessing import cpu_count

import pytest

from ReleaseHub.config.config import (
    DEFAULT_PREFERRED_RESOLUTIONS,
    get_env_bool,
    get_env_int,
    get_env_list,
    get_max_processes,
    get_output_indent,
    get_preferred_resolutions,
)


@pytest.fixture(autouse=True)
def console_only(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_TO_FILE", "false")


class TestGetEnvInt:

    def test_valid_value(self, monkeypatch):
        monkeypatch.setenv("RH_TEST_INT", "7")
        assert get_env_int("RH_TEST_INT", 3) == 7

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_or_blank_uses_default(self, monkeypatch, value):
        if value is None:
            monkeypatch.delenv("RH_TEST_INT", raising=False)
        else:
            monkeypatch.setenv("RH_TEST_INT", value)
        assert get_env_int("RH_TEST_INT", 3) == 3

    def test_invalid_value_warns_and_uses_default(self, monkeypatch, capsys):
        monkeypatch.setenv("RH_TEST_INT", "many")
        assert get_env_int("RH_TEST_INT", 3) == 3
        err = capsys.readouterr().err
        assert "[WARNING]" in err
        assert "Invalid integer value for RH_TEST_INT: 'many'" in err


class TestGetEnvBool:

    @pytest.mark.parametrize("value,expected", [
        ("true", True),
        ("TRUE", True),
        ("1", True),
        ("yes", True),
        ("false", False),
        ("0", False),
        ("off", False),
    ])
    def test_values(self, monkeypatch, value, expected):
        monkeypatch.setenv("RH_TEST_BOOL", value)
        assert get_env_bool("RH_TEST_BOOL", not expected) is expected

    def test_missing_uses_default(self, monkeypatch):
        monkeypatch.delenv("RH_TEST_BOOL", raising=False)
        assert get_env_bool("RH_TEST_BOOL", True) is True


class TestGetEnvList:

    def test_items_stripped_and_empty_items_ignored(self, monkeypatch):
        monkeypatch.setenv("RH_TEST_LIST", " 4k , ,1080p,, 720p ")
        assert get_env_list("RH_TEST_LIST", []) == ["4k", "1080p", "720p"]

    def test_missing_returns_copy_of_default(self, monkeypatch):
        monkeypatch.delenv("RH_TEST_LIST", raising=False)
        default = ["a"]
        result = get_env_list("RH_TEST_LIST", default)
        assert result == default
        assert result is not default


class TestMaxProcesses:

    def test_configured_value(self, monkeypatch):
        monkeypatch.setenv("MAX_PROCESSES", "3")
        assert get_max_processes() == 3

    @pytest.mark.parametrize("value", ["0", "-4"])
    def test_values_below_one_clamped(self, monkeypatch, capsys, value):
        monkeypatch.setenv("MAX_PROCESSES", value)
        assert get_max_processes() == 1
        assert "MAX_PROCESSES must be positive" in capsys.readouterr().err

    def test_invalid_value_uses_cpu_count(self, monkeypatch):
        monkeypatch.setenv("MAX_PROCESSES", "lots")
        assert get_max_processes() == cpu_count()


class TestSettings:

    def test_preferred_resolutions_default(self, monkeypatch):
        monkeypatch.delenv("PREFERRED_RESOLUTIONS", raising=False)
        assert get_preferred_resolutions() == DEFAULT_PREFERRED_RESOLUTIONS

    def test_preferred_resolutions_configured(self, monkeypatch):
        monkeypatch.setenv("PREFERRED_RESOLUTIONS", "1080p, 720p")
        assert get_preferred_resolutions() == ["1080p", "720p"]

    def test_output_indent(self, monkeypatch):
        monkeypatch.setenv("OUTPUT_INDENT", "4")
        assert get_output_indent() == 4
        monkeypatch.delenv("OUTPUT_INDENT")
        assert get_output_indent() == 2

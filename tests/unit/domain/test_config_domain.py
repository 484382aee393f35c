from __future__ import annotations

"""
Unit tests for runtime configuration resolution.

Verifies credential validation, optional header values, model/timeout
overrides and .env loading, using explicit mappings instead of the process
environment.
"""

import os

import pytest

from codesummary.domain.config import (
    ApiSettings,
    AppConfig,
    ConfigurationError,
    build_api_settings,
    build_app_config,
    load_env_file,
)
from codesummary.domain.constants import (
    DEFAULT_EXCLUDE_RULES,
    DEFAULT_MAX_FILE_BYTES,
    DEFAULT_MODEL,
    DEFAULT_REQUEST_TIMEOUT,
    OPENROUTER_API_URL,
)


def test_missing_api_key_raises():
    with pytest.raises(ConfigurationError, match="OPENROUTER_API_KEY"):
        build_api_settings({})


def test_blank_api_key_raises():
    with pytest.raises(ConfigurationError):
        build_api_settings({"OPENROUTER_API_KEY": "   "})


def test_minimal_settings_use_defaults():
    settings = build_api_settings({"OPENROUTER_API_KEY": "sk-1"})

    assert settings.api_key == "sk-1"
    assert settings.api_url == OPENROUTER_API_URL
    assert settings.model == DEFAULT_MODEL
    assert settings.site_url == ""
    assert settings.site_name == ""
    assert settings.timeout == DEFAULT_REQUEST_TIMEOUT


def test_optional_values_are_read():
    settings = build_api_settings({
        "OPENROUTER_API_KEY": "sk-1",
        "YOUR_SITE_URL": "https://example.org",
        "YOUR_SITE_NAME": "Example",
        "OPENROUTER_MODEL": "openai/o1-mini",
        "OPENROUTER_TIMEOUT": "45",
    })

    assert settings.site_url == "https://example.org"
    assert settings.site_name == "Example"
    assert settings.model == "openai/o1-mini"
    assert settings.timeout == 45.0


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "nan", "inf", "-inf"])
def test_invalid_timeout_falls_back(raw, caplog):
    settings = build_api_settings({"OPENROUTER_API_KEY": "sk-1", "OPENROUTER_TIMEOUT": raw})

    assert settings.timeout == DEFAULT_REQUEST_TIMEOUT
    assert "Ignoring invalid OPENROUTER_TIMEOUT" in caplog.text


def test_api_settings_repr_hides_key():
    settings = ApiSettings(api_key="sk-very-secret")
    assert "sk-very-secret" not in repr(settings)


def test_app_config_defaults(tmp_path):
    config = build_app_config(root_path=str(tmp_path), output_dir=str(tmp_path / "out"))

    assert config.root_path == str(tmp_path)
    assert config.output_dir == os.path.join(str(tmp_path), "out")
    assert config.exclude_rules == DEFAULT_EXCLUDE_RULES
    assert config.exclude_rules is not DEFAULT_EXCLUDE_RULES
    assert config.max_file_bytes == DEFAULT_MAX_FILE_BYTES


def test_app_config_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = build_app_config()

    assert config.root_path == os.getcwd()
    assert config.output_dir == os.getcwd()


def test_app_config_accepts_custom_rules():
    config = AppConfig(root_path="/p", output_dir="/o", exclude_rules=["*.md"], max_file_bytes=5)

    assert config.exclude_rules == ["*.md"]
    assert config.max_file_bytes == 5


def test_load_env_file_does_not_override(tmp_path, monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "from-process")
    monkeypatch.setenv("YOUR_SITE_NAME", "placeholder")
    monkeypatch.delenv("YOUR_SITE_NAME")
    (tmp_path / ".env").write_text(
        "OPENROUTER_API_KEY=from-file\nYOUR_SITE_NAME=FromFile\n", encoding="utf-8"
    )

    assert load_env_file(str(tmp_path)) is True
    assert os.environ["OPENROUTER_API_KEY"] == "from-process"
    assert os.environ["YOUR_SITE_NAME"] == "FromFile"


def test_load_env_file_absent(tmp_path):
    assert load_env_file(str(tmp_path)) is False

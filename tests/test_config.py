"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from humanizer.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    Config,
    ConfigError,
    ModelConfig,
    load_config,
)


class TestConfigDefaults:
    def test_default_config(self):
        config = Config()
        assert config.model.provider == "gemini"
        assert config.model.model == DEFAULT_MODEL == "gemini-flash-latest"
        assert config.model.base_url == DEFAULT_BASE_URL
        assert config.model.api_key_env == "API_KEY"
        assert config.model.timeout_seconds == 120.0
        assert config.model.rewrite_temperature == 0.9
        assert config.ui.locale == "ar"
        assert config.logging.level == "INFO"

    def test_log_dir_expands_home(self):
        assert Config().log_dir == Path("~/.humanizer/logs").expanduser()

    def test_missing_file_returns_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "nope.toml") == Config()


class TestLoadConfig:
    def test_full_file(self, tmp_path: Path):
        path = tmp_path / "humanizer.toml"
        path.write_text(
            "[model]\n"
            'model = "gemini-2.5-pro"\n'
            'base_url = "http://localhost:8080"\n'
            'api_key_env = "GEMINI_API_KEY"\n'
            "timeout_seconds = 30\n"
            "rewrite_temperature = 0.7\n"
            "\n"
            "[ui]\n"
            'locale = "EN"\n'
            "\n"
            "[logging]\n"
            'level = "debug"\n'
            'log_path = "/tmp/humanizer-logs"\n'
        )

        config = load_config(path)

        assert config.model.model == "gemini-2.5-pro"
        assert config.model.base_url == "http://localhost:8080"
        assert config.model.api_key_env == "GEMINI_API_KEY"
        assert config.model.timeout_seconds == 30.0
        assert config.model.rewrite_temperature == 0.7
        assert config.ui.locale == "en"
        assert config.logging.level == "DEBUG"
        assert config.logging.log_path == "/tmp/humanizer-logs"

    def test_partial_file_keeps_defaults(self, tmp_path: Path):
        path = tmp_path / "humanizer.toml"
        path.write_text('[model]\nmodel = "gemini-2.0-flash"\n')

        config = load_config(path)

        assert config.model.model == "gemini-2.0-flash"
        assert config.model.rewrite_temperature == 0.9
        assert config.ui.locale == "ar"

    def test_non_positive_timeout_falls_back(self, tmp_path: Path):
        path = tmp_path / "humanizer.toml"
        path.write_text("[model]\ntimeout_seconds = 0\n")
        assert load_config(path).model.timeout_seconds == 120.0

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "humanizer.toml"
        path.write_text("[model\nbroken")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_non_numeric_timeout(self, tmp_path: Path):
        path = tmp_path / "humanizer.toml"
        path.write_text('[model]\ntimeout_seconds = "soon"\n')
        with pytest.raises(ConfigError, match="timeout_seconds"):
            load_config(path)

    def test_non_numeric_temperature(self, tmp_path: Path):
        path = tmp_path / "humanizer.toml"
        path.write_text('[model]\nrewrite_temperature = "hot"\n')
        with pytest.raises(ConfigError, match="rewrite_temperature"):
            load_config(path)

    def test_unsupported_locale(self, tmp_path: Path):
        path = tmp_path / "humanizer.toml"
        path.write_text('[ui]\nlocale = "fr"\n')
        with pytest.raises(ConfigError, match="ui.locale"):
            load_config(path)

    def test_search_order_prefers_cwd(self, tmp_path: Path, monkeypatch):
        (tmp_path / "humanizer.toml").write_text('[ui]\nlocale = "en"\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().ui.locale == "en"


class TestApiKey:
    def test_explicit_key_wins(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "from-env")
        assert ModelConfig(api_key=" explicit ").resolved_api_key == "explicit"

    def test_env_key(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "from-env")
        assert ModelConfig().resolved_api_key == "from-env"

    def test_custom_env_var(self, monkeypatch):
        monkeypatch.delenv("API_KEY", raising=False)
        monkeypatch.setenv("GEMINI_API_KEY", "gem")
        assert ModelConfig(api_key_env="GEMINI_API_KEY").resolved_api_key == "gem"

    def test_missing_key_is_empty(self, monkeypatch):
        monkeypatch.delenv("API_KEY", raising=False)
        assert ModelConfig().resolved_api_key == ""

    def test_repr_masks_key(self):
        text = repr(ModelConfig(api_key="sk-very-secret-1234"))
        assert "very-secret" not in text
        assert "***1234" in text

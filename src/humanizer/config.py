"""Configuration loader for Humanizer.

Loads from humanizer.toml with sensible defaults when file is absent.
Configuration is loaded once at startup and passed via dependency injection.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from humanizer.exceptions import HumanizerError

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_MODEL = "gemini-flash-latest"
SUPPORTED_LOCALES = ("ar", "en")


class ConfigError(HumanizerError):
    """Raised when configuration loading or validation fails."""


@dataclass(frozen=True)
class ModelConfig:
    """Configuration for the generative-text provider."""

    provider: str = "gemini"
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    api_key: str = ""
    api_key_env: str = "API_KEY"
    timeout_seconds: float = 120.0
    rewrite_temperature: float = 0.9

    @property
    def resolved_api_key(self) -> str:
        """Explicit key first, then the configured environment variable."""
        if self.api_key.strip():
            return self.api_key.strip()
        if not self.api_key_env:
            return ""
        return os.environ.get(self.api_key_env, "").strip()

    def __repr__(self) -> str:
        key_display = f"***{self.api_key[-4:]}" if self.api_key else ""
        return (
            f"ModelConfig(provider={self.provider!r}, model={self.model!r}, "
            f"base_url={self.base_url!r}, api_key={key_display!r})"
        )


@dataclass(frozen=True)
class UIConfig:
    locale: str = "ar"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    log_path: str = "~/.humanizer/logs"


@dataclass(frozen=True)
class Config:
    """Top-level Humanizer configuration."""

    model: ModelConfig = field(default_factory=ModelConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def log_dir(self) -> Path:
        return Path(self.logging.log_path).expanduser()


def _parse_model_config(data: dict) -> ModelConfig:
    """Parse the [model] section."""
    timeout_raw = data.get("timeout_seconds", 120.0)
    try:
        timeout_seconds = float(timeout_raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"model.timeout_seconds must be a number: {timeout_raw!r}") from e
    if timeout_seconds <= 0:
        timeout_seconds = 120.0

    temperature_raw = data.get("rewrite_temperature", 0.9)
    try:
        temperature = float(temperature_raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(
            f"model.rewrite_temperature must be a number: {temperature_raw!r}"
        ) from e

    return ModelConfig(
        provider=str(data.get("provider", "gemini")),
        base_url=str(data.get("base_url", DEFAULT_BASE_URL)),
        model=str(data.get("model", DEFAULT_MODEL)),
        api_key=str(data.get("api_key", "")),
        api_key_env=str(data.get("api_key_env", "API_KEY")),
        timeout_seconds=timeout_seconds,
        rewrite_temperature=temperature,
    )


def find_config_path() -> Path | None:
    """Return the first existing humanizer.toml in the default search order."""
    candidates = [
        Path.cwd() / "humanizer.toml",
        Path.home() / ".humanizer" / "humanizer.toml",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from a TOML file.

    If path is None, searches for humanizer.toml in current directory then
    ~/.humanizer/. Returns default config if no file is found.
    """
    if path is None:
        path = find_config_path()

    if path is None or not path.exists():
        return Config()

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    model_data = raw.get("model", {})
    model = _parse_model_config(model_data if isinstance(model_data, dict) else {})

    ui_data = raw.get("ui", {})
    if not isinstance(ui_data, dict):
        ui_data = {}
    locale = str(ui_data.get("locale", "ar")).strip().lower()
    if locale not in SUPPORTED_LOCALES:
        raise ConfigError(
            f"ui.locale must be one of {', '.join(SUPPORTED_LOCALES)}: {locale!r}"
        )

    log_data = raw.get("logging", {})
    if not isinstance(log_data, dict):
        log_data = {}
    logging_cfg = LoggingConfig(
        level=str(log_data.get("level", "INFO")).upper(),
        log_path=str(log_data.get("log_path", "~/.humanizer/logs")),
    )

    return Config(
        model=model,
        ui=UIConfig(locale=locale),
        logging=logging_cfg,
    )

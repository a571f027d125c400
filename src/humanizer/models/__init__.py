"""Model providers."""

from __future__ import annotations

from humanizer.config import ConfigError, ModelConfig
from humanizer.models.base import ModelProvider, ModelResponse, TokenUsage
from humanizer.models.gemini_provider import GeminiProvider


def create_provider(config: ModelConfig) -> ModelProvider:
    """Create a model provider from configuration."""
    if config.provider == "gemini":
        return GeminiProvider.from_config(config)
    raise ConfigError(f"Unknown model provider: {config.provider!r}")


__all__ = [
    "GeminiProvider",
    "ModelProvider",
    "ModelResponse",
    "TokenUsage",
    "create_provider",
]

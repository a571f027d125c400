"""Abstract model interface.

Providers implement a single ``generate`` call covering both request
shapes the humanizer needs: structured JSON output constrained by a
schema, and free-text generation under a system instruction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class TokenUsage:
    """Token usage statistics for a model response."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass
class ModelResponse:
    """Structured response from a model generation call."""

    text: str
    raw: str | dict = ""
    usage: TokenUsage = field(default_factory=TokenUsage)
    model: str = ""
    latency_ms: int = 0


class ModelProvider(ABC):
    """Abstract base class for generative-text providers."""

    @abstractmethod
    async def generate(
        self,
        contents: str,
        *,
        system_instruction: str | None = None,
        temperature: float | None = None,
        response_schema: dict | None = None,
    ) -> ModelResponse:
        """Send one generation request and return the response.

        When ``response_schema`` is given the provider must request JSON
        output constrained to that schema.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable model name."""
        ...

    async def close(self) -> None:
        """Release transport resources. Default: nothing to release."""

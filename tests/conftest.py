"""Shared test fixtures for Humanizer."""

from __future__ import annotations

from pathlib import Path

import pytest

from humanizer.config import Config, LoggingConfig, ModelConfig
from humanizer.models.base import ModelProvider, ModelResponse
from humanizer.state.run_state import AnalysisResult, Options

AI_HEAVY = AnalysisResult(
    human_score=12,
    ai_score=88,
    readability="Grade 12",
    reasons=("Uniform sentence length", "Generic transitions"),
)
HUMAN_LIKE = AnalysisResult(
    human_score=81.4,
    ai_score=18.6,
    readability="Grade 8",
    reasons=("Varied rhythm",),
)


class FakeTextModel:
    """Deterministic stand-in for the language-model client.

    Records every call in order. ``fail_on`` names the call index
    (0 = first score, 1 = rewrite, 2 = second score) that raises.
    """

    def __init__(
        self,
        rewritten: str = "Rewritten text.",
        before: AnalysisResult = AI_HEAVY,
        after: AnalysisResult = HUMAN_LIKE,
        fail_on: int | None = None,
        error: Exception | None = None,
    ):
        self.rewritten = rewritten
        self.before = before
        self.after = after
        self.fail_on = fail_on
        self.error = error or RuntimeError("synthetic failure")
        self.calls: list[tuple] = []

    def _maybe_fail(self) -> None:
        if self.fail_on is not None and len(self.calls) - 1 == self.fail_on:
            raise self.error

    async def score(self, text: str) -> AnalysisResult:
        self.calls.append(("score", text))
        self._maybe_fail()
        score_calls = [c for c in self.calls if c[0] == "score"]
        return self.before if len(score_calls) % 2 == 1 else self.after

    async def rewrite(self, text: str, options: Options) -> str:
        self.calls.append(("rewrite", text, options))
        self._maybe_fail()
        return self.rewritten


class StubProvider(ModelProvider):
    """Provider returning queued response texts and recording requests."""

    def __init__(self, texts: list[str] | None = None, name: str = "stub-model"):
        self._texts = list(texts or [])
        self._name = name
        self.requests: list[dict] = []
        self.closed = False

    @property
    def name(self) -> str:
        return self._name

    async def generate(
        self,
        contents: str,
        *,
        system_instruction: str | None = None,
        temperature: float | None = None,
        response_schema: dict | None = None,
    ) -> ModelResponse:
        self.requests.append({
            "contents": contents,
            "system_instruction": system_instruction,
            "temperature": temperature,
            "response_schema": response_schema,
        })
        text = self._texts.pop(0) if self._texts else ""
        return ModelResponse(text=text, model=self._name)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Provide a test configuration with temp paths."""
    return Config(
        model=ModelConfig(api_key="test-key"),
        logging=LoggingConfig(log_path=str(tmp_path / "logs")),
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a humanizer.toml that logs into the temp directory."""
    path = tmp_path / "humanizer.toml"
    log_dir = (tmp_path / "logs").as_posix()
    path.write_text(
        "[model]\n"
        'api_key = "test-key"\n'
        "\n"
        "[ui]\n"
        'locale = "en"\n'
        "\n"
        "[logging]\n"
        f'log_path = "{log_dir}"\n'
    )
    return path

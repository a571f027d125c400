"""Language-model client: the two remote operations the humanizer needs.

``score`` asks the model for a structured authorship analysis and
``rewrite`` asks it to rewrite text under the humanizer style guide.
"""

from __future__ import annotations

import json
import logging
from typing import Protocol

from humanizer.exceptions import SchemaError
from humanizer.models.base import ModelProvider
from humanizer.prompts.assembler import PromptAssembler
from humanizer.state.run_state import AnalysisResult, Options
from humanizer.utils.latency import timed_block

logger = logging.getLogger(__name__)

DEFAULT_REWRITE_TEMPERATURE = 0.9


class TextModel(Protocol):
    """What the orchestrator needs from a language model."""

    async def score(self, text: str) -> AnalysisResult: ...

    async def rewrite(self, text: str, options: Options) -> str: ...


def parse_analysis(raw_text: str) -> AnalysisResult:
    """Decode structured analysis output.

    Raises SchemaError when the body is empty, not JSON, or not an object.
    """
    text = (raw_text or "").strip()
    # Strip markdown fences
    if text.startswith("```"):
        lines = text.split("\n")
        text = "\n".join(lines[1:])
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    if not text:
        raise SchemaError("Empty analysis response")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Invalid JSON in analysis response: {e}") from e
    if not isinstance(payload, dict):
        raise SchemaError(f"Analysis response is {type(payload).__name__}, expected object")
    missing = [k for k in ("humanScore", "aiScore", "readability", "reasons") if k not in payload]
    if missing:
        logger.warning("Analysis response missing keys %s; using defaults", missing)
    return AnalysisResult.from_payload(payload)


class LanguageModelClient:
    """Scores and rewrites text through a ``ModelProvider``.

    Transport failures from the provider propagate unchanged
    (``TransportError``). Malformed analysis output is degraded to an
    empty ``AnalysisResult`` instead of failing the run.
    """

    def __init__(
        self,
        provider: ModelProvider,
        prompts: PromptAssembler | None = None,
        rewrite_temperature: float = DEFAULT_REWRITE_TEMPERATURE,
    ):
        self._provider = provider
        self._prompts = prompts or PromptAssembler()
        self._rewrite_temperature = rewrite_temperature

    @property
    def model_name(self) -> str:
        return self._provider.name

    async def score(self, text: str) -> AnalysisResult:
        with timed_block(logger, event="model_score", fields={"chars": len(text)}):
            response = await self._provider.generate(
                self._prompts.build_analysis_prompt(text),
                response_schema=self._prompts.analysis_schema(),
            )
        try:
            return parse_analysis(response.text)
        except SchemaError as e:
            logger.warning("Degrading malformed analysis to empty result: %s", e)
            return AnalysisResult.empty()

    async def rewrite(self, text: str, options: Options) -> str:
        with timed_block(logger, event="model_rewrite", fields={"chars": len(text)}):
            response = await self._provider.generate(
                text,
                system_instruction=self._prompts.build_rewrite_instruction(options),
                temperature=self._rewrite_temperature,
            )
        if not response.text.strip():
            logger.warning("Empty rewrite response; returning original text")
            return text
        return response.text

"""Tests for the language-model client."""

from __future__ import annotations

import pytest

from humanizer.engine.client import LanguageModelClient, parse_analysis
from humanizer.exceptions import SchemaError, TransportError
from humanizer.state.run_state import AnalysisResult, Options

from tests.conftest import StubProvider


class TestParseAnalysis:
    def test_full_payload(self):
        result = parse_analysis(
            '{"humanScore": 35, "aiScore": 65, "readability": "Grade 10",'
            ' "reasons": ["Repetitive structure", "Buzzwords"]}'
        )
        assert result == AnalysisResult(
            human_score=35,
            ai_score=65,
            readability="Grade 10",
            reasons=("Repetitive structure", "Buzzwords"),
        )

    def test_markdown_fenced(self):
        result = parse_analysis('```json\n{"aiScore": 70}\n```')
        assert result.ai_score == 70

    def test_partial_payload_defaults(self):
        result = parse_analysis('{"aiScore": 40}')
        assert result.ai_score == 40
        assert result.human_score == 0
        assert result.readability == ""
        assert result.reasons == ()

    def test_empty_object(self):
        assert parse_analysis("{}") == AnalysisResult.empty()

    @pytest.mark.parametrize("raw", ["", "   ", "not json", "[1, 2]", '"text"'])
    def test_rejects_malformed(self, raw):
        with pytest.raises(SchemaError):
            parse_analysis(raw)


class TestScore:
    async def test_sends_structured_request(self):
        provider = StubProvider(['{"aiScore": 80, "humanScore": 20}'])
        client = LanguageModelClient(provider)

        result = await client.score("Delve into the tapestry.")

        request = provider.requests[0]
        assert "Delve into the tapestry." in request["contents"]
        assert request["response_schema"]["type"] == "OBJECT"
        assert request["system_instruction"] is None
        assert result.ai_score == 80
        assert result.human_score == 20

    async def test_malformed_output_degrades_to_empty(self):
        client = LanguageModelClient(StubProvider(["I think it is 80% AI."]))
        assert await client.score("text") == AnalysisResult.empty()

    async def test_empty_output_degrades_to_empty(self):
        client = LanguageModelClient(StubProvider([""]))
        assert await client.score("text") == AnalysisResult.empty()

    async def test_transport_error_propagates(self):
        class FailingProvider(StubProvider):
            async def generate(self, contents, **kwargs):
                raise TransportError("HTTP 401")

        client = LanguageModelClient(FailingProvider())
        with pytest.raises(TransportError):
            await client.score("text")


class TestRewrite:
    async def test_uses_style_guide_and_temperature(self):
        provider = StubProvider(["A plainer version."])
        client = LanguageModelClient(provider)

        result = await client.rewrite("Original.", Options(audience="Nurses", tone="Warm"))

        request = provider.requests[0]
        assert request["contents"] == "Original."
        assert request["temperature"] == 0.9
        assert request["response_schema"] is None
        assert "- Audience Profile: Nurses" in request["system_instruction"]
        assert "- Tone/Style: Warm" in request["system_instruction"]
        assert result == "A plainer version."

    async def test_blank_hints_use_defaults(self):
        provider = StubProvider(["x"])
        await LanguageModelClient(provider).rewrite("t", Options(audience="  ", tone=""))
        instruction = provider.requests[0]["system_instruction"]
        assert "- Audience Profile: General Public" in instruction
        assert "- Tone/Style: Natural and Conversational" in instruction

    async def test_custom_temperature(self):
        provider = StubProvider(["x"])
        await LanguageModelClient(provider, rewrite_temperature=0.4).rewrite("t", Options())
        assert provider.requests[0]["temperature"] == 0.4

    async def test_empty_response_returns_original(self):
        client = LanguageModelClient(StubProvider(["   \n"]))
        assert await client.rewrite("Keep this.", Options()) == "Keep this."

    async def test_model_name(self):
        assert LanguageModelClient(StubProvider(name="gemini-x")).model_name == "gemini-x"

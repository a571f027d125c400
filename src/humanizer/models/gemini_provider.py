"""Google Gemini model provider.

Talks to the Gemini REST ``generateContent`` endpoint directly over
httpx. Supports structured JSON output (``responseSchema``) and
free-text generation under a system instruction.
"""

from __future__ import annotations

import json
import logging
import time

import httpx

from humanizer.config import DEFAULT_BASE_URL, ModelConfig
from humanizer.exceptions import TransportError
from humanizer.models.base import ModelProvider, ModelResponse, TokenUsage

logger = logging.getLogger(__name__)

API_VERSION = "v1beta"


class GeminiProvider(ModelProvider):
    """Provider for the Gemini ``generateContent`` API."""

    def __init__(
        self,
        model: str,
        api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 120.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._model = model
        self._api_key = api_key.strip()
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = timeout_seconds
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_config(cls, config: ModelConfig) -> GeminiProvider:
        return cls(
            model=config.model,
            api_key=config.resolved_api_key,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )

    @property
    def name(self) -> str:
        return self._model

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/{API_VERSION}/models/{self._model}:generateContent"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        # A missing key is sent as-is; the API rejects the request.
        if self._api_key:
            headers["x-goog-api-key"] = self._api_key
        return headers

    def _build_payload(
        self,
        contents: str,
        system_instruction: str | None,
        temperature: float | None,
        response_schema: dict | None,
    ) -> dict:
        payload: dict = {
            "contents": [{"role": "user", "parts": [{"text": contents}]}],
        }
        if system_instruction:
            payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}

        generation_config: dict = {}
        if temperature is not None:
            generation_config["temperature"] = temperature
        if response_schema is not None:
            generation_config["responseMimeType"] = "application/json"
            generation_config["responseSchema"] = response_schema
        if generation_config:
            payload["generationConfig"] = generation_config
        return payload

    @staticmethod
    async def _http_error_body(response: httpx.Response, limit: int = 200) -> str:
        """Safely extract an HTTP error body for the error message."""
        try:
            body = await response.aread()
            if body:
                return body.decode("utf-8", errors="replace")[:limit]
        except httpx.HTTPError:
            pass
        return "<response body unavailable>"

    @staticmethod
    def _extract_text(data: dict) -> str:
        """Join the text parts of the first candidate.

        Blocked prompts come back with no candidates at all; that is an
        empty response, not a transport failure.
        """
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            feedback = data.get("promptFeedback")
            if feedback:
                logger.warning("Gemini returned no candidates: %s", str(feedback)[:200])
            return ""
        candidate = candidates[0] if isinstance(candidates[0], dict) else {}
        content = candidate.get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            return ""
        fragments = [
            str(part.get("text", ""))
            for part in parts
            if isinstance(part, dict) and not part.get("thought")
        ]
        return "".join(fragments)

    async def generate(
        self,
        contents: str,
        *,
        system_instruction: str | None = None,
        temperature: float | None = None,
        response_schema: dict | None = None,
    ) -> ModelResponse:
        payload = self._build_payload(
            contents, system_instruction, temperature, response_schema,
        )
        logger.debug(
            "gemini request model=%s structured=%s payload_bytes=%d",
            self._model,
            response_schema is not None,
            len(json.dumps(payload, ensure_ascii=False).encode("utf-8")),
        )

        client = self._get_client()
        start = time.monotonic()
        try:
            response = await client.post(
                self.endpoint, json=payload, headers=self._headers(),
            )
            response.raise_for_status()
        except httpx.ConnectError as e:
            raise TransportError(
                f"Cannot connect to model server at {self._base_url}: {e}",
                original=e,
            ) from e
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Model request timed out ({self._model}): {e}",
                original=e,
            ) from e
        except httpx.HTTPStatusError as e:
            body_text = await self._http_error_body(e.response)
            raise TransportError(
                f"Model server returned HTTP {e.response.status_code}: {body_text}",
                original=e,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Model request failed ({self._model}): {e}", original=e) from e
        latency = int((time.monotonic() - start) * 1000)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                f"Malformed response from {self._model}: body is not JSON",
                original=e,
            ) from e
        if not isinstance(data, dict):
            raise TransportError(f"Malformed response from {self._model}: expected object")

        usage_data = data.get("usageMetadata") or {}
        usage = TokenUsage(
            input_tokens=int(usage_data.get("promptTokenCount", 0) or 0),
            output_tokens=int(usage_data.get("candidatesTokenCount", 0) or 0),
            total_tokens=int(usage_data.get("totalTokenCount", 0) or 0),
        )
        text = self._extract_text(data)
        logger.info(
            "gemini response model=%s latency_ms=%d tokens=%d chars=%d",
            self._model, latency, usage.total_tokens, len(text),
        )
        return ModelResponse(
            text=text,
            raw=data,
            usage=usage,
            model=str(data.get("modelVersion") or self._model),
            latency_ms=latency,
        )

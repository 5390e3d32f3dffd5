"""
Gemini provider implementation over the generateContent REST endpoint.
"""
import asyncio
import logging
from typing import Optional, Dict, Any

import httpx

from app.core.config import GEMINI_API_BASE_URL, GEMINI_MODEL, GEMINI_TIMEOUT_SECONDS
from app.core.logging_config import sanitize_log_data
from app.llm.errors import ResponseFormatError, UpstreamError
from app.llm.provider import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


def build_generation_payload(prompt: str, response_schema: Dict[str, Any]) -> Dict[str, Any]:
    """Build the generateContent request body for a single user turn."""
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": response_schema,
        },
    }


def extract_candidate_text(envelope: Any) -> str:
    """
    Return the text of the first part of the first candidate.

    Raises:
        ResponseFormatError: If the candidates/content/parts path is missing
    """
    try:
        candidates = envelope.get("candidates")
        if not candidates:
            raise ResponseFormatError("Response has no candidates", raw=envelope)
        parts = (candidates[0].get("content") or {}).get("parts")
        if not parts:
            raise ResponseFormatError("First candidate has no content parts", raw=envelope)
        text = parts[0].get("text")
    except (AttributeError, TypeError) as e:
        raise ResponseFormatError(f"Malformed response envelope: {e}", raw=envelope) from e

    if not isinstance(text, str):
        raise ResponseFormatError("First content part has no text", raw=envelope)
    return text


class GeminiProvider(LLMProvider):
    """Gemini provider issuing schema-constrained generateContent calls."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = GEMINI_MODEL,
        base_url: str = GEMINI_API_BASE_URL,
        timeout: float = GEMINI_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate_json(
        self,
        prompt: str,
        response_schema: Dict[str, Any],
        model: Optional[str] = None,
    ) -> LLMResponse:
        """Generate a JSON completion constrained to response_schema."""
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY not configured")

        model = model or self.model
        url = f"{self.base_url}/models/{model}:generateContent"
        logger.debug(
            "Gemini request: %s",
            sanitize_log_data({"model": model, "api_key": self.api_key, "timeout": self.timeout}),
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                # httpx timeouts apply per connect/read/write step; wait_for bounds the whole call
                response = await asyncio.wait_for(
                    client.post(
                        url,
                        params={"key": self.api_key},
                        json=build_generation_payload(prompt, response_schema),
                    ),
                    timeout=self.timeout,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise UpstreamError(f"Gemini API request timed out after {self.timeout:g}s") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Gemini API request failed: {type(e).__name__}: {e}") from e

        if not response.is_success:
            raise UpstreamError.from_status(response.status_code, response.reason_phrase, response.text)

        try:
            envelope = response.json()
        except ValueError as e:
            raise ResponseFormatError("Response body is not JSON", raw=response.text) from e

        text = extract_candidate_text(envelope)
        usage = envelope.get("usageMetadata")
        if not isinstance(usage, dict):
            usage = {}
        finish_reason = envelope["candidates"][0].get("finishReason")

        logger.info(
            f"Gemini completion: model={model}, tokens_in={usage.get('promptTokenCount', 0)}, "
            f"tokens_out={usage.get('candidatesTokenCount', 0)}, finish_reason={finish_reason}"
        )
        return LLMResponse(
            content=text,
            tokens_in=usage.get("promptTokenCount", 0),
            tokens_out=usage.get("candidatesTokenCount", 0),
            model=model,
            metadata={"finish_reason": finish_reason},
        )

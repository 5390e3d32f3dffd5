"""
LLM provider dependency for interview routes.
"""
from app.core.config import GEMINI_API_KEY, GEMINI_API_BASE_URL, GEMINI_MODEL, GEMINI_TIMEOUT_SECONDS
from app.llm.gemini_provider import GeminiProvider
from app.llm.provider import LLMProvider


def get_llm_provider() -> LLMProvider:
    """Build the Gemini provider from process configuration."""
    return GeminiProvider(
        api_key=GEMINI_API_KEY,
        model=GEMINI_MODEL,
        base_url=GEMINI_API_BASE_URL,
        timeout=GEMINI_TIMEOUT_SECONDS,
    )

"""
Health check endpoint for deployment monitoring.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from app.core.config import API_VERSION, GEMINI_MODEL
from app.core.llm_dependency import get_llm_provider
from app.llm.provider import LLMProvider

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health_check(provider: LLMProvider = Depends(get_llm_provider)):
    """
    Health check endpoint for deployment monitoring.

    Returns "healthy" when the Gemini API key is configured, "degraded" otherwise.
    No model call is made.
    """
    status = "healthy"
    llm_status = "configured"

    if not provider.is_configured():
        llm_status = "missing_api_key"
        status = "degraded"

    return {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "llm": llm_status,
        "model": GEMINI_MODEL,
        "version": API_VERSION,
    }
